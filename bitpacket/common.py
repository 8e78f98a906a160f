from dataclasses import dataclass
from bitpacket.utils import Enum


# -----------------------------------------------------------------------------

VERSION_BITS = 3
TYPE_BITS = 3

LITERAL_TYPE = 4
LITERAL_GROUP_BITS = 4

DEFAULT_MAX_DEPTH = 256


# -----------------------------------------------------------------------------

class Operation(Enum):
    Sum = 0
    Product = 1
    Minimum = 2
    Maximum = 3
    GreaterThan = 5
    LessThan = 6
    EqualTo = 7

    @property
    def is_comparison(self) -> bool:
        return self in COMPARISONS


COMPARISONS = frozenset({
    Operation.GreaterThan,
    Operation.LessThan,
    Operation.EqualTo
})


# -----------------------------------------------------------------------------

class LengthMode(Enum):
    Bits = 0
    Count = 1

    @property
    def field_bits(self) -> int:
        return LENGTH_FIELD_BITS[self]


# Width of the field following the length mode bit: total bit length of the
# children, or number of children.
LENGTH_FIELD_BITS = {
    LengthMode.Bits: 15,
    LengthMode.Count: 11
}


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Literal:
    version: int
    value: int


@dataclass(frozen=True)
class Operator:
    version: int
    operation: Operation
    children: tuple['Packet', ...]
    length_mode: LengthMode = LengthMode.Count

    def __repr__(self):
        return (f"Operator(version={self.version}, "
                f"operation={self.operation.name}, "
                f"children={len(self.children)})")


Packet = Literal | Operator
