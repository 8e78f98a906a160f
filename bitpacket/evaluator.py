from functools import reduce
from operator import mul

from bitpacket.common import Operation, Packet, Literal, Operator


# -----------------------------------------------------------------------------

def version_sum(packet: Packet) -> int:
    match packet:
        case Literal(version, _):
            return version
        case Operator(version, _, children):
            return version + sum(version_sum(c) for c in children)


# -----------------------------------------------------------------------------

def evaluate(packet: Packet) -> int:
    match packet:
        case Literal(_, value):
            return value
        case Operator():
            return evaluate_operator(packet)


def evaluate_operator(packet: Operator) -> int:
    xs = [evaluate(c) for c in packet.children]
    operation = packet.operation

    if operation.is_comparison and len(xs) != 2:
        raise ValueError(
            f"{operation.name} expects 2 operands, got {len(xs)}: {packet!r}"
        )

    if operation in (Operation.Minimum, Operation.Maximum) and len(xs) == 0:
        raise ValueError(f"{operation.name} of no operands: {packet!r}")

    match operation:
        case Operation.Sum:
            return sum(xs)
        case Operation.Product:
            return reduce(mul, xs, 1)
        case Operation.Minimum:
            return min(xs)
        case Operation.Maximum:
            return max(xs)
        case Operation.GreaterThan:
            return int(xs[0] > xs[1])
        case Operation.LessThan:
            return int(xs[0] < xs[1])
        case Operation.EqualTo:
            return int(xs[0] == xs[1])

    raise AssertionError(f"Unexpected operation: {operation}")
