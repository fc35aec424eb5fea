"""Parse and evaluate Nagios threshold range expressions."""

from importlib import metadata

from nagiosrange.endpoint import (
    Endpoint,
    Finite,
    NegativeInfinity,
    PositiveInfinity,
    neg_inf,
    pos_inf,
)
from nagiosrange.error import (
    EmptyRange,
    InvalidRange,
    MalformedEnd,
    MalformedStart,
    MissingColon,
    RangeError,
)
from nagiosrange.options import range_type
from nagiosrange.range import Range, RangeSpec, check, parse

__version__: str = metadata.version("nagiosrange")

__all__ = [
    "Endpoint",
    "Finite",
    "NegativeInfinity",
    "PositiveInfinity",
    "neg_inf",
    "pos_inf",
    "EmptyRange",
    "InvalidRange",
    "MalformedEnd",
    "MalformedStart",
    "MissingColon",
    "RangeError",
    "range_type",
    "Range",
    "RangeSpec",
    "check",
    "parse",
]
