# udprtt

A small UDP round-trip-time monitor made of a server and a client.

The server waits until a client announces itself with `INIT`, then sends
it a request (`R <seq> <hh:mm:ss:mmm>`) at a fixed interval, three seconds
by default. The client answers each one with `ACK R <seq> <timestamp>`. The
server sends that acknowledgement back to the client and prints the
round-trip time of the exchange in milliseconds. When the session is told
to end, the server sends `E <seq> <timestamp>`, the client answers
`ACK E <seq> <timestamp>`, and the server closes with a final
`ACK <seq> <timestamp>`. If the client stops answering a request, the
server stops without the closing exchange.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

Start the server first. It reads the address to bind from
`server_config.txt` in the working directory, or from the file given with
`--config`. The file holds an IP address and a port separated by
whitespace:

```
127.0.0.1 8886
```

If the file is missing, the server asks for the address and the port on
the terminal.

```
udprtt-server
udprtt-server --config other_config.txt --interval 1.5
```

Then start the client. By default it sends `INIT` to `127.0.0.1:8886` so
the server learns where to send its requests; `--host` and `--port` point
it elsewhere:

```
udprtt-client
udprtt-client --host 127.0.0.1 --port 8886
```

The server prints every message it sends, along with lines such as:

```
RTT for seq 00001: 0.214 ms
```

To end the session, press `e` in the server's terminal (on Windows the key
alone is enough; elsewhere type `e` and press Enter). Both sides then go
through the closing exchange and exit.

## Using it as a library

The message format lives in `udprtt.protocol`: `request_message`,
`end_message`, `final_ack_message` and `ack_message` build the messages,
`message_kind` classifies one as a `MessageKind`, `format_timestamp` and
`now_timestamp` render a time of day as `hh:mm:ss:mmm`, `elapsed_ms` turns
two performance-counter readings into milliseconds, and `load_config`
reads a `ServerConfig` from a file.

`udprtt.server.UdpServer` and `udprtt.client.UdpClient` run the two ends
over a UDP socket of their own or one you pass them, and both work as
context managers. On the server, `wait_for_client` captures the client's
address, `send_request` performs one timed exchange and returns an
`RttSample` (or `None` when the client does not answer), `terminate` runs
the closing exchange, and `serve(interval, stop_requested)` repeats
requests until the callback asks to stop. `UdpClient.run` returns every
message it received.

The package also has helpers for socket-level values: IPv4 addresses,
socket addresses and byte order (`udprtt.addressing`), bounded descriptor
sets (`udprtt.fdset`), I/O control codes (`udprtt.ioctl`), network event
masks (`udprtt.netevents`), quality-of-service records and protocol chains
(`udprtt.qos`), and named socket error codes with the `WinsockError`
exception (`udprtt.errors`).