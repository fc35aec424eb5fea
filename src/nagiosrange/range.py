import math
from typing import Any, Optional, Union

from nagiosrange.endpoint import Endpoint, Finite, Number, NegativeInfinity
from nagiosrange.error import MalformedEnd
from nagiosrange.parser import parse_spec, verify

RangeSpec = Union[str, int, float, "Range"]


class Range:
    """Represents a threshold range.

    The general format is "[@][start:][end]". "start:" may be omitted if
    start==0. "~:" means that start is negative infinity. If `end` is
    omitted, infinity is assumed. To invert the match condition, prefix
    the range expression with "@".

    Ranges are immutable. Both points are :class:`~.endpoint.Endpoint`
    objects, so infinite bounds are never compared numerically.

    See
    https://github.com/monitoring-plugins/monitoring-plugin-guidelines/blob/main/definitions/01.range_expressions.md
    for details.
    """

    invert: bool

    start: Endpoint

    end: Endpoint

    def __init__(self, spec: RangeSpec) -> None:
        """Creates a Range object according to `spec`.

        :param spec: may be either a string, a number, or another
            Range object. A number `n` is the same as "0:n".
        :raise RangeError: if `spec` is not a valid range
        :raise TypeError: if `spec` has an unsupported type
        """
        invert: bool
        start: Endpoint
        end: Endpoint
        if isinstance(spec, Range):
            start, end, invert = spec.start, spec.end, spec.invert
        elif isinstance(spec, (int, float)) and not isinstance(spec, bool):
            if isinstance(spec, float) and not math.isfinite(spec):
                raise MalformedEnd(str(spec), str(spec))
            start, end, invert = Finite(0), Finite(spec), False
            verify(str(spec), start, end)
        elif isinstance(spec, str):
            start, end, invert = parse_spec(spec)
        else:
            raise TypeError(
                "cannot create range from type {0}".format(type(spec)), spec
            )
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "invert", invert)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ranges are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("ranges are immutable")

    def is_start_infinite(self) -> bool:
        return self.start.is_infinite()

    def is_end_infinite(self) -> bool:
        return self.end.is_infinite()

    def is_inverted(self) -> bool:
        return self.invert

    def start_value(self) -> Optional[Number]:
        """Finite start point or `None` for negative infinity."""
        return self.start.inner()

    def end_value(self) -> Optional[Number]:
        """Finite end point or `None` for positive infinity."""
        return self.end.inner()

    def is_inside(self) -> bool:
        """`True` if values inside the bounds raise an alert ("@" prefix)."""
        return self.invert

    def is_outside(self) -> bool:
        """`True` if values outside the bounds raise an alert."""
        return not self.invert

    def match(self, value: float) -> bool:
        """Decides if `value` is inside/outside the threshold.

        :returns: `True` if value is inside the bounds for non-inverted
            Ranges.

        Also available as `in` operator.
        """
        if isinstance(self.start, Finite) and value < self.start.value:
            return False ^ self.invert
        if isinstance(self.end, Finite) and value > self.end.value:
            return False ^ self.invert
        return True ^ self.invert

    def __contains__(self, value: float) -> bool:
        return self.match(value)

    def _format_bounds(self, omit_zero_start: bool = True) -> str:
        result: list[str] = []
        if isinstance(self.start, NegativeInfinity):
            result.append("~:")
        elif (
            not omit_zero_start
            or self.start != Finite(0)
            or self.end.is_infinite()
        ):
            result.append("%s:" % self.start)
        result.append(str(self.end))
        return "".join(result)

    def __str__(self) -> str:
        """Canonical range specification."""
        return ("@" if self.invert else "") + self._format_bounds()

    def __repr__(self) -> str:
        """Parseable range specification."""
        return "Range(%r)" % str(self)

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Range):
            return NotImplemented
        return (
            self.invert == value.invert
            and self.start == value.start
            and self.end == value.end
        )

    def __hash__(self) -> int:
        return hash((self.start, self.end, self.invert))

    @property
    def violation(self) -> str:
        """Human-readable description why a value does not match."""
        return "{0} range {1}".format(
            "inside" if self.invert else "outside", self._format_bounds(False)
        )


def parse(text: str) -> Range:
    """Parses a range expression.

    :raise RangeError: if `text` is not a valid range expression
    """
    if not isinstance(text, str):
        raise TypeError("range expression must be a string", text)
    return Range(text)


# pylint: disable-next=redefined-builtin
def check(range: Range, value: float) -> bool:
    """Checks `value` against `range`, honouring the invert flag."""
    return range.match(value)
