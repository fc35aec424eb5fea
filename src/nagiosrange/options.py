"""Command line integration.

Plugins usually receive their thresholds as ``--warning`` and
``--critical`` options. :func:`range_type` converts such option values
while the command line is parsed, so malformed ranges are reported by
:mod:`argparse` like any other invalid argument::

    parser.add_argument("-w", "--warning", type=range_type)
"""

import argparse

from nagiosrange.error import RangeError
from nagiosrange.range import Range


def range_type(text: str) -> Range:
    """Converts an option value to a :class:`~.range.Range`.

    :raise argparse.ArgumentTypeError: if `text` is not a valid range
    """
    try:
        return Range(text)
    except RangeError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
