"""Exceptions raised while parsing range expressions.

All exceptions derive from :class:`RangeError`, which itself is a
:class:`ValueError`. Each failure kind has its own subclass so callers
can tell them apart with ordinary ``except`` clauses.
"""

from typing import Optional


class RangeError(ValueError):
    """Base class for all range parsing errors.

    :param spec: the complete range expression that was being parsed
    :param token: the offending part of the expression, if any
    """

    spec: str

    token: Optional[str]

    message: str = "invalid range"

    def __init__(self, spec: str, token: Optional[str] = None) -> None:
        super().__init__(spec, token)
        self.spec = spec
        self.token = token

    def __str__(self) -> str:
        if self.token is not None:
            return "{0}: {1!r} in {2!r}".format(self.message, self.token, self.spec)
        return "{0}: {1!r}".format(self.message, self.spec)


class EmptyRange(RangeError):
    """The range expression has no content."""

    message = "the range string must not be empty"


class MalformedStart(RangeError):
    """The start point is neither "~" nor a signed number."""

    message = "the start point could not be parsed as number"


class MalformedEnd(RangeError):
    """The end point is not a signed number."""

    message = "the end point could not be parsed as number"


class InvalidRange(RangeError):
    """Both points are finite and the start is greater than the end."""

    message = "the start point must not be greater than the end point"


class MissingColon(RangeError):
    """A range without colon that does not contain any number."""

    message = "expected a number or a start:end pair"
