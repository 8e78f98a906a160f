from argparse import Action
from enum import Enum as _Enum
from typing import TypeVar, overload


T = TypeVar('T')


@overload
def group(xs: str, n: int) -> list[str]:
    ...


@overload
def group(xs: list[T], n: int) -> list[list[T]]:
    ...


def group(xs, n):
    """
    >>> group([1, 2, 3, 4, 5, 6], 2)
    [[1, 2], [3, 4], [5, 6]]
    >>> group('DEADBEEF0', 4)
    ['DEAD', 'BEEF', '0']
    """
    if n < 1:
        raise ValueError('n must be greater than zero')
    return [xs[i:i+n] for i in range(0, len(xs), n)]


class Enum(_Enum):
    @classmethod
    def values(cls):
        return set(x.value for x in cls.__members__.values())


class EnumAction(Action):
    "Accept an Enum member by name on the command line."

    def __init__(self, **kwargs):
        type = kwargs.pop("type", None)

        if type is None:
            raise ValueError("type must be an Enum")
        if not issubclass(type, _Enum):
            raise TypeError("type must be an Enum")

        kwargs.setdefault("choices", tuple(e.name.lower() for e in type))
        super(EnumAction, self).__init__(**kwargs)
        self._enum = type

    def __call__(self, parser, namespace, values, option_string=None):
        value = self._enum[values.capitalize()]
        setattr(namespace, self.dest, value)
