import pytest
from bitpacket.binary import CHUNK_BITS, BitAccess, Get, Put, mask, parse_hex


# -----------------------------------------------------------------------------

CHUNKS = (
    0b10111100_00100000_00000000_00000000_00000000_00000000_00000000_00001011,
    0b11011100_00100000_00000000_00000000_00000000_00000000_00000000_00000101
)


def test_access_len():
    assert len(BitAccess(CHUNKS)) == 2 * CHUNK_BITS
    assert len(BitAccess(())) == 0


def test_access_within_chunk():
    a = BitAccess(CHUNKS)
    assert a.get(0, 5) == 0b10111
    assert a.get(3, 6) == 0b111000
    assert a.get(60, 4) == 0b1011
    assert a.get(64, 4) == 0b1101
    assert a.get(65, 4) == 0b1011
    assert a.get(128 - 3, 3) == 0b101
    assert a.get(128 - 2, 2) == 0b1
    assert a.get(17, 0) == 0


def test_access_across_chunks():
    a = BitAccess(CHUNKS)
    assert a.get(60, 8) == 0b10111101
    assert a.get(32, 64) == 0b101111011100001000000000000000000000


def test_access_past_end():
    a = BitAccess(CHUNKS)
    with pytest.raises(EOFError):
        a.get(126, 3)
    with pytest.raises(EOFError):
        BitAccess(()).get(0, 1)


def test_access_is_pure():
    a = BitAccess(CHUNKS)
    assert a.get(60, 8) == a.get(60, 8)


# -----------------------------------------------------------------------------

def test_parse_hex():
    assert parse_hex('') == ()
    assert parse_hex('D2FE28') == (0xD2FE28 << 40,)
    assert parse_hex('0123456789ABCDEF' 'F') == (
        0x0123456789ABCDEF,
        0xF << 60
    )


# -----------------------------------------------------------------------------

def test_get_1():
    g = Get(BitAccess(CHUNKS))
    assert g.uint(3) == 0b101
    assert g.uint(61) == (
        0b1110000100000000000000000000000000000000000000000000000001011
    )
    assert g.uint(3) == 0b110
    assert g.uint(61) == (
        0b1110000100000000000000000000000000000000000000000000000000101
    )


def test_get_avail():
    g = Get(BitAccess(CHUNKS))
    assert g.avail == 128
    assert g.uint(61) == (
        0b1011110000100000000000000000000000000000000000000000000000001
    )
    assert g.avail == 67
    assert g.uint(6) == 0b11110
    assert g.avail == 61
    assert g.bit_offset == 67
    assert g.uint(61) == (
        0b1110000100000000000000000000000000000000000000000000000000101
    )
    assert g.avail == 0


def test_get_wide():
    g = Get.from_hex('F' * 48)
    assert g.uint(4) == 0xF
    assert g.uint(150) == mask(150)
    assert g.avail == 38


def test_get_from_hex():
    g = Get.from_hex('D2FE28')
    assert g.uint(3) == 0b110
    assert g.uint(3) == 0b100
    assert g.uint(5) == 0b10111
    assert g.uint(5) == 0b11110
    assert g.uint(5) == 0b00101
    assert g.uint(3) == 0


def test_get_from_odd_hex():
    g = Get.from_hex('DEADBEAF0000BADF00D')
    assert g.uint(8 * 4) == 0xDEADBEAF
    assert g.uint(4 * 4) == 0
    assert g.uint(7 * 4) == 0xBADF00D


def test_get_bool():
    g = Get.from_hex('A')
    assert g.bool() is True
    assert g.bool() is False


def test_get_past_end_does_not_advance():
    g = Get.from_hex('FF')
    g.uint(60)
    with pytest.raises(EOFError):
        g.uint(5)
    assert g.bit_offset == 60
    assert g.uint(4) == 0


# -----------------------------------------------------------------------------

def test_put_1():
    p = Put()
    p.uint(0b110, 3)
    p.uint(0b100, 3)
    p.uint(0b10111, 5)
    p.uint(0b11110, 5)
    p.uint(0b00101, 5)
    assert p.bit_length == 21
    assert p.hex == 'D2FE28'


def test_put_2():
    p = Put()
    p.bool(True)
    p.bool(False)
    p.uint(0b101010, 6)
    assert p.hex == 'AA'


def test_put_extend():
    head = Put()
    head.uint(0b1, 1)

    tail = Put()
    tail.uint(0, 4)
    tail.uint(0b111, 3)

    head.extend(tail)
    assert head.bit_length == 8
    assert head.hex == '87'


def test_put_empty():
    assert Put().hex == ''
