#!/usr/bin/env python3

"""
Strand values, validation helpers and strand reconciliation.

Strand is one of four values:

    1     - "+" strand
    -1    - "-" strand
    0     - strandless (explicitly no orientation)
    None  - unknown (orientation not yet determined)

Flat and Unknown are distinct: a flat feature has no orientation, an unknown
one simply has not been assigned one.
"""

import logging
from typing import Iterable, Optional

from .exceptions import InvalidArgumentError

PLUS = 1
MINUS = -1
FLAT = 0
UNKNOWN = None

# Display symbols; None renders as '?'
STRAND_SYMBOLS = {PLUS: '+', MINUS: '-', FLAT: '.'}
SYMBOL_STRANDS = {'+': PLUS, '-': MINUS, '.': FLAT, '?': UNKNOWN}


def _is_int(value) -> bool:
    # bool is an int subclass but never a coordinate
    return isinstance(value, int) and not isinstance(value, bool)


def validate_non_negative_int(value, argument: str) -> int:
    """Return value if it is an integer >= 0, otherwise raise."""
    if not _is_int(value):
        raise InvalidArgumentError("must be an integer", argument, value)
    if value < 0:
        raise InvalidArgumentError("must not be negative", argument, value)
    return value


def validate_positive_int(value, argument: str) -> int:
    """Return value if it is an integer >= 1, otherwise raise."""
    if not _is_int(value):
        raise InvalidArgumentError("must be an integer", argument, value)
    if value < 1:
        raise InvalidArgumentError("must be a positive 1-based coordinate", argument, value)
    return value


def validate_int(value, argument: str) -> int:
    """Return value if it is an integer of any sign, otherwise raise."""
    if not _is_int(value):
        raise InvalidArgumentError("must be an integer", argument, value)
    return value


def validate_strand(value) -> Optional[int]:
    """Return value if it is a valid strand, otherwise raise."""
    if value is None:
        return UNKNOWN
    if not _is_int(value) or value not in (PLUS, MINUS, FLAT):
        raise InvalidArgumentError("strand must be None, 0, 1 or -1", "strand", value)
    return value


def strand_from_symbol(symbol: str) -> Optional[int]:
    """Convert '+', '-', '.' or '?' into a strand value."""
    try:
        return SYMBOL_STRANDS[symbol]
    except KeyError:
        raise InvalidArgumentError("strand symbol must be one of + - . ?", "strand", symbol)


def strand_symbol(strand: Optional[int]) -> str:
    """Convert a strand value into its display symbol."""
    if strand is None:
        return '?'
    return STRAND_SYMBOLS[strand]


def reconcile_strands(strands: Iterable[Optional[int]]) -> Optional[int]:
    """
    Combine strand values into a single consensus strand.

    Unknown and flat values carry no orientation and are skipped. The first
    oriented value becomes the consensus; any later value on the opposite
    strand is a conflict and the result is Unknown (None) regardless of what
    follows. If no oriented value is seen, the result is flat when at least
    one input was flat and Unknown otherwise.

    Conflicts are data, not failures: nothing is raised.

    Args:
        strands: Strand values in any order

    Returns:
        1, -1, 0 or None
    """
    consensus = UNKNOWN
    seen_flat = False

    for current in strands:
        if current:
            if consensus:
                # Opposite orientations multiply to -1
                if consensus * current == -1:
                    logging.debug(f"Strand conflict between {consensus} and {current}; consensus is unknown")
                    return UNKNOWN
                continue
            consensus = current
        elif current == FLAT:
            seen_flat = True

    if consensus:
        return consensus
    return FLAT if seen_flat else UNKNOWN


def consensus_strand(*items) -> Optional[int]:
    """Reconcile the strands of any objects exposing a ``strand`` attribute."""
    for item in items:
        if not hasattr(item, 'strand'):
            raise InvalidArgumentError("object does not expose a strand", "item", item)
    return reconcile_strands(item.strand for item in items)
