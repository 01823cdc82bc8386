[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "udprtt"
version = "0.1.0"
description = "UDP request/acknowledge exchange that measures round-trip times between a server and a client"
requires-python = ">=3.10"
keywords = ["udp", "rtt", "latency", "ping", "network", "sockets"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
udprtt-server = "udprtt.server:main"
udprtt-client = "udprtt.client:main"

[tool.hatch.build.targets.wheel]
packages = ["udprtt"]

[tool.pytest.ini_options]
addopts = "-ra"
