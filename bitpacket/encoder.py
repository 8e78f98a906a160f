from dataclasses import replace

from bitpacket.binary import Put, mask

from bitpacket.common import (
    VERSION_BITS, TYPE_BITS, LITERAL_TYPE, LITERAL_GROUP_BITS,
    LengthMode,
    Packet, Literal, Operator
)


# -----------------------------------------------------------------------------

def encode(packet: Packet) -> str:
    put = Put()
    put_packet(put, packet)
    return put.hex


def reframe(packet: Packet, mode: LengthMode) -> Packet:
    "Return a copy of the tree with every operator framed with mode."
    match packet:
        case Literal():
            return packet
        case Operator():
            return replace(
                packet,
                children=tuple(reframe(c, mode) for c in packet.children),
                length_mode=mode
            )


# -----------------------------------------------------------------------------

def put_packet(put: Put, packet: Packet):
    _put_field(put, packet.version, VERSION_BITS, "version")

    match packet:
        case Literal(_, value):
            put.uint(LITERAL_TYPE, TYPE_BITS)
            put_literal(put, value)
        case Operator(_, operation, children, mode):
            put.uint(operation.value, TYPE_BITS)
            put_children(put, children, mode)


def put_literal(put: Put, value: int):
    if value < 0:
        raise ValueError(f"Cannot encode negative literal: {value}")

    groups = max(1, -(-value.bit_length() // LITERAL_GROUP_BITS))

    for i in reversed(range(groups)):
        x = (value >> (i * LITERAL_GROUP_BITS)) & mask(LITERAL_GROUP_BITS)
        put.bool(i > 0)
        put.uint(x, LITERAL_GROUP_BITS)


def put_children(put: Put, children: tuple[Packet, ...], mode: LengthMode):
    put.uint(mode.value, 1)

    match mode:
        case LengthMode.Bits:
            # The length field precedes the children, so they are written
            # apart first.
            body = Put()
            for child in children:
                put_packet(body, child)
            _put_field(put, body.bit_length, mode.field_bits,
                       "children length")
            put.extend(body)
        case LengthMode.Count:
            _put_field(put, len(children), mode.field_bits, "children count")
            for child in children:
                put_packet(put, child)


def _put_field(put: Put, x: int, n: int, name: str):
    if not 0 <= x <= mask(n):
        raise ValueError(f"Cannot encode {name} {x} in {n} bits")
    put.uint(x, n)
