from bitpacket.utils import group


# -----------------------------------------------------------------------------

CHUNK_BITS = 64
CHUNK_HEX_DIGITS = CHUNK_BITS // 4


# -----------------------------------------------------------------------------

def mask(n: int) -> int:
    """
    >>> bin(mask(0))
    '0b0'
    >>> bin(mask(1))
    '0b1'
    >>> bin(mask(3))
    '0b111'
    """
    return (1 << n) - 1


def extract(x: int, size: int, start: int, stop: int) -> int:
    """
    >>> bin(extract(0b10101010, 8, 0, 8))
    '0b10101010'
    >>> bin(extract(0b10101010, 8, 2, 5))
    '0b101'
    """
    return (x >> (size - stop)) & mask(stop - start)


def parse_hex(s: str) -> tuple[int, ...]:
    """
    Pack a string of hex digits into CHUNK_BITS wide chunks, MSB first. A
    short final chunk is left-aligned.

    >>> [hex(x) for x in parse_hex('D2FE28')]
    ['0xd2fe280000000000']
    """
    chunks = []
    for digits in group(s, CHUNK_HEX_DIGITS):
        padding = CHUNK_BITS - len(digits) * 4
        chunks.append(int(digits, 16) << padding)
    return tuple(chunks)


# -----------------------------------------------------------------------------

class BitAccess:
    "Random access to the bits of a sequence of fixed width chunks."

    def __init__(self, chunks: tuple[int, ...]):
        assert all(0 <= c <= mask(CHUNK_BITS) for c in chunks)
        self._chunks = chunks

    @classmethod
    def from_hex(cls, s: str) -> 'BitAccess':
        return cls(parse_hex(s))

    def __len__(self) -> int:
        return len(self._chunks) * CHUNK_BITS

    def get(self, bit_offset: int, num_bits: int) -> int:
        assert 0 <= num_bits <= CHUNK_BITS
        assert bit_offset >= 0

        if bit_offset + num_bits > len(self):
            raise EOFError(
                f"Cannot read {num_bits} bits at offset {bit_offset}: "
                f"stream is {len(self)} bits long"
            )

        if num_bits == 0:
            return 0

        index, start = divmod(bit_offset, CHUNK_BITS)

        # If all bits that must be read are in the same chunk.
        if start + num_bits <= CHUNK_BITS:
            return extract(self._chunks[index], CHUNK_BITS,
                           start, start + num_bits)

        # If the bits are spanning across the chunk boundary: the tail of
        # the first chunk forms the most significant part of the result.
        in_c0 = CHUNK_BITS - start
        in_c1 = num_bits - in_c0

        head = extract(self._chunks[index], CHUNK_BITS, start, CHUNK_BITS)
        tail = extract(self._chunks[index + 1], CHUNK_BITS, 0, in_c1)

        return (head << in_c1) | tail


# -----------------------------------------------------------------------------

class Get:
    def __init__(self, access: BitAccess):
        self._access = access
        self._bit_offset = 0

    @classmethod
    def from_hex(cls, s: str) -> 'Get':
        return cls(BitAccess.from_hex(s))

    @property
    def bit_offset(self) -> int:
        "Return the number of bits read so far."
        return self._bit_offset

    @property
    def avail(self) -> int:
        "Return the number of bits left to read."
        return len(self._access) - self._bit_offset

    def uint(self, n: int) -> int:
        assert n >= 0

        if n > self.avail:
            raise EOFError(
                f"Cannot read {n} bits: only {self.avail} bits available"
            )

        # Wide reads are split so that every access fits in a chunk.
        res = 0
        while n > CHUNK_BITS:
            res = (res << CHUNK_BITS) | self._get(CHUNK_BITS)
            n -= CHUNK_BITS
        return (res << n) | self._get(n)

    def _get(self, n: int) -> int:
        x = self._access.get(self._bit_offset, n)
        self._bit_offset += n
        return x

    def bool(self) -> bool:
        return self.uint(1) == 1


# -----------------------------------------------------------------------------

class Put:
    def __init__(self):
        self._value = 0
        self._bit_length = 0

    @property
    def bit_length(self) -> int:
        "Return the number of bits written so far."
        return self._bit_length

    @property
    def value(self) -> int:
        "Return the bits written so far as an unsigned integer."
        return self._value

    @property
    def hex(self) -> str:
        "Return the bits padded with zeros to the byte boundary, as hex."
        padding = (8 - self._bit_length) % 8
        size = (self._bit_length + padding) // 8
        return ((self._value << padding)
                .to_bytes(size, byteorder='big')
                .hex()
                .upper())

    def uint(self, x: int, n: int):
        assert 0 <= x <= mask(n)
        self._value = (self._value << n) | x
        self._bit_length += n

    def bool(self, x: bool):
        self.uint(1 if x is True else 0, 1)

    def extend(self, put: 'Put'):
        self.uint(put.value, put.bit_length)
