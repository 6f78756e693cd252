import pytest

from quweid.codemap import CodeMapper, ConverterError, quwei_bytes, quwei_pair


def _decode(raw: bytes) -> str | None:
    try:
        return raw.decode("gb18030")
    except UnicodeDecodeError:
        return None


@pytest.fixture(scope="module")
def mapper():
    return CodeMapper()


def test_quwei_pair():
    assert quwei_pair(1601) == (16, 1)
    assert quwei_pair(1) == (0, 1)
    assert quwei_pair(9990) == (99, 90)


def test_standard_rows():
    assert quwei_bytes(1) == b"\xa0\xa1"
    assert quwei_bytes(1601) == b"\xb0\xa1"
    assert quwei_bytes(9494) == b"\xfe\xfe"


def test_extended_rows():
    assert quwei_bytes(9501) == b"\xa8\x41"
    assert quwei_bytes(9601) == b"\xa9\x41"


def test_extended_rows_skip_7f():
    # wei 63 would land on 0x7F
    assert quwei_bytes(9563) == b"\xa8\x80"
    assert quwei_bytes(9663) == b"\xa9\x80"
    assert quwei_bytes(9562) == b"\xa8\x7e"


def test_out_of_range_sub_code():
    with pytest.raises(ValueError):
        quwei_bytes(0)
    with pytest.raises(ValueError):
        quwei_bytes(10001)


def test_known_characters(mapper):
    assert mapper.map(1601) == "啊"
    assert mapper.map(1602) == "阿"
    assert mapper.map(5589) == "座"


def test_matches_codec(mapper):
    for sub_code in (1, 10, 100, 199, 1601, 9501, 9563, 9990, 10000):
        assert mapper.map(sub_code) == _decode(quwei_bytes(sub_code))


def test_undecodable_is_none():
    # Every byte above 0x7F fails in ASCII, so nothing maps
    mapper = CodeMapper("ascii")
    assert mapper.map(1601) is None


def test_trail_byte_ff_is_none(mapper):
    assert quwei_bytes(1695) == bytes([0xA1, 0xFF])
    assert mapper.map(1695) is None



def test_pure(mapper):
    assert [mapper.map(1601) for _ in range(3)] == ["啊"] * 3


def test_unknown_codec_is_fatal():
    with pytest.raises(ConverterError):
        CodeMapper("no-such-charset")
