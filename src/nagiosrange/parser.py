"""Parser for the threshold range notation.

The general format is "[@][start:][end]":

* "@" inverts the match condition,
* "start:" may be omitted if start is 0,
* "~" as start means negative infinity,
* an omitted end means positive infinity.

Numbers may carry a sign and a fractional part. Exponents are not
allowed.

See
https://github.com/monitoring-plugins/monitoring-plugin-guidelines/blob/main/definitions/01.range_expressions.md
for details.
"""

import logging
import re

from nagiosrange.endpoint import Endpoint, Finite, Number, neg_inf, pos_inf
from nagiosrange.error import (
    EmptyRange,
    InvalidRange,
    MalformedEnd,
    MalformedStart,
    MissingColon,
)

_log = logging.getLogger(__name__)

_number = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")

_digit = re.compile(r"[0-9]")


def parse_number(token: str) -> Number:
    """Converts a signed number token to `int` or `float`.

    Tokens with a fractional part become floats, all others ints.

    :raise ValueError: if `token` is not a signed number
    """
    if not _number.fullmatch(token):
        raise ValueError("not a signed number", token)
    if "." in token:
        return float(token)
    return int(token)


def _parse_start(spec: str, token: str) -> Endpoint:
    if token == "":
        return Finite(0)
    if token == "~":
        return neg_inf
    try:
        return Finite(parse_number(token))
    except ValueError:
        _log.debug("rejecting start point %r in %r", token, spec)
        raise MalformedStart(spec, token) from None


def _parse_end(spec: str, token: str) -> Endpoint:
    if token == "":
        return pos_inf
    try:
        return Finite(parse_number(token))
    except ValueError:
        _log.debug("rejecting end point %r in %r", token, spec)
        raise MalformedEnd(spec, token) from None


def verify(spec: str, start: Endpoint, end: Endpoint) -> None:
    """Raises :class:`InvalidRange` if the range is not consistent."""
    if isinstance(start, Finite) and isinstance(end, Finite):
        if start.value > end.value:
            raise InvalidRange(spec)


def parse_spec(spec: str) -> tuple[Endpoint, Endpoint, bool]:
    """Splits a range expression into start, end and the invert flag.

    Surrounding whitespace is ignored. The expression is split at the
    first colon. Without colon the expression is a bare end point and
    the start is 0.

    :raise EmptyRange: if `spec` is empty or whitespace only
    :raise MalformedStart: if the start is neither "~" nor a number
    :raise MalformedEnd: if the end is not a number
    :raise MissingColon: if there is no colon and no number either
    :raise InvalidRange: if start is greater than end
    """
    text = spec.strip()
    if text == "":
        raise EmptyRange(spec)
    invert = False
    if text.startswith("@"):
        invert = True
        text = text[1:]
    if ":" in text:
        start_str, _, end_str = text.partition(":")
        start = _parse_start(spec, start_str)
    else:
        if not _digit.search(text):
            raise MissingColon(spec, text)
        start, end_str = Finite(0), text
    end = _parse_end(spec, end_str)
    verify(spec, start, end)
    _log.debug("parsed %r as start=%r end=%r invert=%s", spec, start, end, invert)
    return start, end, invert
