from string import hexdigits

from bitpacket.binary import Get

from bitpacket.common import (
    VERSION_BITS, TYPE_BITS, LITERAL_TYPE, LITERAL_GROUP_BITS,
    DEFAULT_MAX_DEPTH,
    Operation, LengthMode,
    Packet, Literal, Operator
)


# -----------------------------------------------------------------------------

def decode(s: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Packet:
    """
    Decode the outermost packet of a hex encoded transmission. Bits left
    over after it are padding and are ignored.
    """
    s = s.strip()

    if not all(c in hexdigits for c in s):
        raise ValueError(f"Not a hex string: {s!r}")

    return get_packet(Get.from_hex(s), max_depth=max_depth)


# -----------------------------------------------------------------------------

def get_packet(
        get: Get,
        depth: int = 0,
        max_depth: int = DEFAULT_MAX_DEPTH
) -> Packet:
    if depth > max_depth:
        raise ValueError(f"Packets nested deeper than {max_depth} levels")

    version = get.uint(VERSION_BITS)
    type_ = get.uint(TYPE_BITS)

    match type_:
        case t if t == LITERAL_TYPE:
            return Literal(version, get_literal(get))
        case t if t in Operation.values():
            mode, children = get_children(get, depth, max_depth)
            return Operator(version, Operation(t), children, mode)

    raise AssertionError(f"Unexpected packet type: {type_}")


def get_literal(get: Get) -> int:
    value = 0
    while True:
        more = get.bool()
        value = (value << LITERAL_GROUP_BITS) | get.uint(LITERAL_GROUP_BITS)
        if more is False:
            return value


# -----------------------------------------------------------------------------

def get_children(
        get: Get,
        depth: int,
        max_depth: int
) -> tuple[LengthMode, tuple[Packet, ...]]:
    mode = get_length_mode(get)
    length = get.uint(mode.field_bits)

    children = []

    match mode:
        case LengthMode.Bits:
            if length > get.avail:
                raise EOFError(
                    f"Children declared as {length} bits long but only "
                    f"{get.avail} bits available"
                )

            target = get.avail - length
            while get.avail > target:
                children.append(get_packet(get, depth + 1, max_depth))

            if get.avail != target:
                raise ValueError(
                    f"Children overran their declared length of {length} "
                    f"bits by {target - get.avail} bits"
                )

        case LengthMode.Count:
            for _ in range(length):
                children.append(get_packet(get, depth + 1, max_depth))

    return (mode, tuple(children))


def get_length_mode(get: Get) -> LengthMode:
    return LengthMode(get.uint(1))
