import pytest

from udprtt.qos import (
    BASE_PROTOCOL,
    FLOWSPEC_SIZE,
    LAYERED_PROTOCOL,
    MAX_PROTOCOL_CHAIN,
    FlowSpec,
    ProtocolChain,
    QualityOfService,
    ServiceType,
    unpack_flowspec,
    unpack_qos,
)


def _sample_flowspec():
    return FlowSpec(
        token_rate=8000,
        token_bucket_size=1500,
        peak_bandwidth=16000,
        latency=20000,
        delay_variation=500,
        service_type=ServiceType.GUARANTEED,
        max_sdu_size=1500,
        minimum_policed_size=64,
    )


def test_flowspec_wire_size():
    assert len(FlowSpec().pack()) == 32


def test_flowspec_fields_are_little_endian():
    assert FlowSpec(token_rate=1).pack()[:4] == b"\x01\x00\x00\x00"


def test_flowspec_round_trip():
    spec = _sample_flowspec()
    assert unpack_flowspec(spec.pack()) == spec


def test_service_type_becomes_enum():
    spec = unpack_flowspec(FlowSpec(service_type=2).pack())
    assert spec.service_type is ServiceType.CONTROLLEDLOAD


def test_unknown_service_type_kept_as_int():
    assert FlowSpec(service_type=99).service_type == 99


def test_flowspec_rejects_out_of_range():
    with pytest.raises(ValueError):
        FlowSpec(latency=-1)
    with pytest.raises(ValueError):
        FlowSpec(token_rate=1 << 32)


def test_unpack_flowspec_rejects_wrong_length():
    with pytest.raises(ValueError):
        unpack_flowspec(bytes(FLOWSPEC_SIZE - 1))


def test_qos_round_trip_with_provider_data():
    qos = QualityOfService(_sample_flowspec(), FlowSpec(), b"provider")
    packed = qos.pack()
    assert len(packed) == 2 * FLOWSPEC_SIZE + 4 + len(b"provider")
    assert packed.endswith(b"provider")
    assert unpack_qos(packed) == qos


def test_qos_round_trip_without_provider_data():
    qos = QualityOfService()
    assert unpack_qos(qos.pack()) == qos


def test_unpack_qos_rejects_truncated_data():
    with pytest.raises(ValueError):
        unpack_qos(bytes(2 * FLOWSPEC_SIZE))


def test_unpack_qos_rejects_length_mismatch():
    packed = QualityOfService(provider_specific=b"abc").pack()
    with pytest.raises(ValueError):
        unpack_qos(packed[:-1])
    with pytest.raises(ValueError):
        unpack_qos(packed + b"x")


def test_base_protocol_chain():
    chain = ProtocolChain([1001])
    assert chain.is_base()
    assert chain.chain_len == BASE_PROTOCOL


def test_layered_protocol_chain():
    chain = ProtocolChain((), layered=True)
    assert not chain.is_base()
    assert chain.chain_len == LAYERED_PROTOCOL


def test_longer_chain_is_not_base():
    chain = ProtocolChain([1, 2, 3])
    assert chain.chain_len == len(chain.entries)
    assert not chain.is_base()


def test_protocol_chain_limits():
    with pytest.raises(ValueError):
        ProtocolChain(range(MAX_PROTOCOL_CHAIN + 1))
    with pytest.raises(ValueError):
        ProtocolChain([1], layered=True)
    with pytest.raises(ValueError):
        ProtocolChain([])
    assert ProtocolChain(range(MAX_PROTOCOL_CHAIN)).chain_len == MAX_PROTOCOL_CHAIN