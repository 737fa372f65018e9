import pytest

from tonaddress import layout
from tonaddress.alphabet import Base64Alphabet, b64decode
from tonaddress.crc import crc16
from tonaddress.errors import ParseError, ParseReason

HASH_PART = bytes.fromhex(
    "e4d954ef9f4e1250a26b5bbad76a1cdd17cfd08babad6f4c23e372270aef6f76"
)


@pytest.mark.parametrize('bounceable,production,flag', (
    (True, True, 0x11),
    (False, True, 0x51),
    (True, False, 0x91),
    (False, False, 0xD1),
))
def test_pack_flags(bounceable, production, flag):
    data = layout.pack(0, HASH_PART, bounceable, production)
    assert len(data) == layout.ADDRESS_LEN
    assert data[0] == flag
    assert data[1] == 0
    assert data[2:34] == HASH_PART
    assert int.from_bytes(data[34:], "big") == crc16(data[:34])


@pytest.mark.parametrize('bounceable,production', (
    (True, True),
    (True, False),
    (False, True),
    (False, False),
))
def test_unpack_flags(bounceable, production):
    data = layout.pack(7, HASH_PART, bounceable, production)
    workchain, hash_part, non_bounceable, non_production = layout.unpack(data, "addr")
    assert workchain == 7
    assert hash_part == HASH_PART
    assert non_bounceable is not bounceable
    assert non_production is not production


@pytest.mark.parametrize('workchain,stored', (
    (0, 0x00),
    (255, 0xFF),
    (-1, 0xFF),
    (256, 0x00),
    (-2**31, 0x00),
))
def test_pack_keeps_low_workchain_byte(workchain, stored):
    data = layout.pack(workchain, HASH_PART)
    assert data[1] == stored


def test_unpack_workchain_is_unsigned():
    data = layout.pack(-1, HASH_PART)
    workchain, _, _, _ = layout.unpack(data, "addr")
    assert workchain == 255


def test_unpack_invalid_flag():
    data = bytearray(layout.pack(0, HASH_PART))
    data[0] = 0x55
    with pytest.raises(ParseError) as exc_info:
        layout.unpack(bytes(data), "original")
    assert exc_info.value == ParseError("original", ParseReason.B64_FLAG)


def test_unpack_invalid_flag_checked_before_crc():
    data = bytearray(layout.pack(0, HASH_PART))
    data[0] = 0x00
    data[35] ^= 0xFF
    with pytest.raises(ParseError) as exc_info:
        layout.unpack(bytes(data), "original")
    assert exc_info.value.reason is ParseReason.B64_FLAG


@pytest.mark.parametrize('index', [2, 33, 34, 35])
def test_unpack_crc_mismatch(index):
    data = bytearray(layout.pack(0, HASH_PART, bounceable=False, production=True))
    assert data[0] == 0x51
    data[index] ^= 0x01
    with pytest.raises(ParseError) as exc_info:
        layout.unpack(bytes(data), "original")
    assert exc_info.value.address == "original"
    assert exc_info.value.reason is ParseReason.B64_CRC


def test_non_bounceable_vector_flag():
    # UQAWzEKcdnykvXfUNouqdS62tvrp32bCxuKS6eQrS6ISgZ8t
    data = b64decode("UQAWzEKcdnykvXfUNouqdS62tvrp32bCxuKS6eQrS6ISgZ8t", Base64Alphabet.STANDARD)
    assert data[0] == 0x51
    _, _, non_bounceable, non_production = layout.unpack(data, "addr")
    assert non_bounceable is True
    assert non_production is False
    assert layout.pack(data[1], data[2:34], bounceable=False, production=True) == data


def test_bounceable_vector_flag():
    data = b64decode("EQDk2VTvn04SUKJrW7rXahzdF8_Qi6utb0wj43InCu9vdjrR", Base64Alphabet.URL_SAFE)
    assert data[0] == 0x11
    assert layout.pack(0, HASH_PART) == data
