"""Start and end points of a range.

An end point is either a finite number (:class:`Finite`) or one of the
two infinities. The infinities are represented as singletons
(:obj:`neg_inf` and :obj:`pos_inf`), so they can be compared with
``is`` or ``==``.

Of the infinities, only :obj:`neg_inf` may start a range and only
:obj:`pos_inf` may end it.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Union

import typing_extensions

Number = Union[int, float]


class Endpoint:
    """Abstract base class for all end points."""

    def is_infinite(self) -> bool:
        return False

    def inner(self) -> Optional[Number]:
        """The finite value or `None` for infinite end points."""
        return None

    def __str__(self) -> str:
        """Token in the range notation."""
        raise NotImplementedError

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("end points are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("end points are immutable")


class Finite(Endpoint):
    """A finite end point."""

    value: Number

    def __init__(self, value: Number) -> None:
        object.__setattr__(self, "value", value)

    def inner(self) -> Number:
        return self.value

    def __str__(self) -> str:
        if isinstance(self.value, float):
            # positional notation, the range grammar has no exponents
            text = format(Decimal(repr(self.value)), "f")
            if "." not in text:
                text += ".0"
            return text
        return "%s" % self.value

    def __repr__(self) -> str:
        return "Finite(%r)" % self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Finite):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)


class _Infinity(Endpoint):
    instance: Optional[_Infinity] = None

    def __new__(cls) -> typing_extensions.Self:
        if not cls.instance:
            cls.instance = super(_Infinity, cls).__new__(cls)
        return cls.instance  # type: ignore

    def is_infinite(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "%s()" % self.__class__.__name__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return isinstance(other, self.__class__)

    def __hash__(self) -> int:
        return hash(self.__class__.__name__)


class NegativeInfinity(_Infinity):
    """Unbounded start point, written as "~"."""

    def __str__(self) -> str:
        return "~"


neg_inf = NegativeInfinity()


class PositiveInfinity(_Infinity):
    """Unbounded end point, written by omitting the end."""

    def __str__(self) -> str:
        return ""


pos_inf = PositiveInfinity()
