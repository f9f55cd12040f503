"""Internal types module"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from functools import lru_cache
from typing import (
    Any, ClassVar, Collection, Dict, Generic, Iterator, List, Sequence, Tuple, TypeVar, Union, cast, overload
)

from typing_extensions import Annotated, get_args, get_origin, get_type_hints

from .exception import DomainError

T = TypeVar('T')
T_co = TypeVar('T_co', covariant=True)
Nb = TypeVar('Nb', bound=Union[float, int])  # Number
Tup3 = Tuple[Nb, Nb, Nb]


class ColourModel(Enum):
    """Closed set of the colour models known to the conversion graph"""
    RGB = 'RGB'
    HSV = 'HSV'
    HSL = 'HSL'
    HWB = 'HWB'
    CMYK = 'CMYK'
    XYZ = 'XYZ'
    LAB = 'LAB'
    LUV = 'LUV'
    LCHAB = 'LCHab'
    LCHUV = 'LCHuv'
    OKLAB = 'Oklab'
    OKLCH = 'Oklch'
    ANSI16 = 'Ansi16'
    ANSI256 = 'Ansi256'

    def __str__(self) -> str:
        return self.value


class CheckAnnotated(Generic[T], ABC):
    @abstractmethod
    def check(self, val: T, param_name: str) -> None:
        ...


class Finite(CheckAnnotated[float]):
    def check(self, val: float, param_name: str) -> None:
        if not math.isfinite(val):
            raise DomainError(f'{param_name} "{val}" is not a finite number')


class ValueRangeIncInc(CheckAnnotated[float]):
    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def check(self, val: float, param_name: str) -> None:
        if not self.x <= val <= self.y:
            raise DomainError(f'{param_name} "{val}" is not in the range [{self.x}, {self.y}]')


class OneOf(CheckAnnotated[int]):
    def __init__(self, values: Collection[int]) -> None:
        self.values = frozenset(values)

    def check(self, val: int, param_name: str) -> None:
        if isinstance(val, bool) or not isinstance(val, int) or val not in self.values:
            raise DomainError(f'{param_name} "{val}" is not one of the allowed codes')


Real = Annotated[float, Finite()]
Hue = Annotated[float, Finite()]
Unit = Annotated[float, Finite(), ValueRangeIncInc(0.0, 1.0)]
Pct = Annotated[float, ValueRangeIncInc(0.0, 1.0)]
Byte = Annotated[int, OneOf(range(256))]


@lru_cache(maxsize=None)
def _annotated_checks(cls: type) -> Tuple[Tuple[str, Tuple[CheckAnnotated[Any], ...]], ...]:
    checks: List[Tuple[str, Tuple[CheckAnnotated[Any], ...]]] = []
    for name, hint in get_type_hints(cls, include_extras=True).items():
        if get_origin(hint) is Annotated:
            _, *hint_args = get_args(hint)
            checks.append((name, tuple(a for a in hint_args if isinstance(a, CheckAnnotated))))
    return tuple(checks)


def check_annotations(obj: object, /) -> None:
    """
    Run the range checks declared with ``Annotated`` on the attributes of ``obj``

    :param obj:         Instance whose class annotates its fields
    """
    for name, checkers in _annotated_checks(type(obj)):
        value = getattr(obj, name)
        for checker in checkers:
            checker.check(value, name)


def check_value(val: Any, hint: Any, param_name: str, /) -> None:
    """
    Run the range checks of an ``Annotated`` alias on a single value

    :param val:         Value to check
    :param hint:        Annotated alias, e.g. Unit
    :param param_name:  Name reported in the error message
    """
    for checker in get_args(hint)[1:]:
        if isinstance(checker, CheckAnnotated):
            checker.check(val, param_name)


_NamedSequenceT = TypeVar('_NamedSequenceT', bound='NamedSequence[Any]')


class NamedSequence(Sequence[T_co], Generic[T_co], ABC):
    """Immutable sequence whose items are also reachable by their field names"""

    __slots__ = ()

    _fields: ClassVar[Tuple[str, ...]] = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def _set(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)

    def __str__(self) -> str:
        clsname = self.__class__.__name__
        values = ', '.join('%s=%r' % (k, getattr(self, k)) for k in self._fields)
        return '%s(%s)' % (clsname, values)

    def __repr__(self) -> str:
        return self.__str__()

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, NamedSequence):
            return NotImplemented
        return type(self) == type(__o) and tuple(self) == tuple(__o)

    def __hash__(self) -> int:
        return hash((type(self), tuple(self)))

    @overload
    def __getitem__(self, index: int) -> T_co:
        ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[T_co, ...]:
        ...

    def __getitem__(self, index: int | slice) -> T_co | Tuple[T_co, ...]:
        if isinstance(index, slice):
            return tuple(getattr(self, name) for name in self._fields[index])
        return cast(T_co, getattr(self, self._fields[index]))

    def __iter__(self) -> Iterator[T_co]:
        return (getattr(self, name) for name in self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __copy__(self: _NamedSequenceT) -> _NamedSequenceT:
        return self

    def __deepcopy__(self: _NamedSequenceT, *args: Any) -> _NamedSequenceT:
        return self

    def _asdict(self) -> Dict[str, T_co]:
        return {k: v for k, v in zip(self._fields, self)}
