#!/usr/bin/env python3

"""
Range: a half-open interval on a zero-based coordinate line with a strand.

A range is stored as lower bound, length and strand:

    lower  >= 0
    length >= 0
    strand in (1, -1, 0, None)

The upper bound is always derived (``lower + length``). Writing ``lower``
keeps the upper bound fixed and adjusts the length; writing ``upper`` keeps
the lower bound fixed.

    >>> r = Range.from_ends(52, 143)
    >>> r.lower, r.upper, r.strand, r.length, r.phase
    (51, 143, 1, 92, 2)
    >>> r.end5, r.end3
    (52, 143)
"""

from typing import Optional, Tuple

from .exceptions import InvalidArgumentError
from .interface import CoordinateMixin, require_coordinates
from .strand import (MINUS, PLUS, validate_int, validate_non_negative_int,
                     validate_positive_int, validate_strand)


class Range(CoordinateMixin):
    """Mutable interbase range with lower bound, length and strand."""

    def __init__(self, lower: int = 0, length: int = 0, strand: Optional[int] = None):
        self._lower = validate_non_negative_int(lower, "lower")
        self._length = validate_non_negative_int(length, "length")
        self._strand = validate_strand(strand)

    # Constructors

    @classmethod
    def from_ends(cls, end5: int, end3: int) -> 'Range':
        """
        Create a range from 1-based 5' and 3' ends.

        The strand follows the direction of the ends. Equal ends give a
        zero-length range at ``end5 - 1`` with Unknown strand, since a single
        point has no orientation.
        """
        validate_positive_int(end5, "end5")
        validate_positive_int(end3, "end3")

        if end5 < end3:
            return cls(end5 - 1, end3 - end5, PLUS)
        if end3 < end5:
            return cls(end3 - 1, end5 - end3, MINUS)
        return cls(end5 - 1, 0)

    @classmethod
    def from_lower_upper(cls, lower: int, upper: int, strand: Optional[int] = None) -> 'Range':
        """Create a range from interbase lower and upper bounds."""
        validate_non_negative_int(lower, "lower")
        validate_non_negative_int(upper, "upper")
        if upper < lower:
            raise InvalidArgumentError("upper bound must not be less than lower bound", "upper", upper)
        return cls(lower, upper - lower, strand)

    @classmethod
    def from_upper_length(cls, upper: int, length: int, strand: Optional[int] = None) -> 'Range':
        """
        Create a range from its upper bound and length.

        Handy when a regex match end marks the upper bound of a stretch
        (e.g. a run of Ns) whose length is known.
        """
        validate_non_negative_int(upper, "upper")
        validate_non_negative_int(length, "length")
        if length > upper:
            raise InvalidArgumentError("length must not exceed upper bound", "length", length)
        return cls(upper - length, length, strand)

    @classmethod
    def cast(cls, other) -> 'Range':
        """Build a Range from any object exposing lower, upper and strand."""
        require_coordinates(other, "other")
        get_lus = getattr(other, 'get_lus', None)
        if callable(get_lus):
            lower, upper, strand = get_lus()
        else:
            lower, upper, strand = other.lower, other.upper, other.strand
        return cls.from_lower_upper(lower, upper, strand)

    # Accessors

    @property
    def lower(self) -> int:
        """Lower bound; setting it keeps the upper bound fixed."""
        return self._lower

    @lower.setter
    def lower(self, value: int) -> None:
        validate_non_negative_int(value, "lower")
        self._set_length(self.upper - value)
        self._lower = value

    @property
    def upper(self) -> int:
        """Upper bound; setting it keeps the lower bound fixed."""
        return self._lower + self._length

    @upper.setter
    def upper(self, value: int) -> None:
        validate_non_negative_int(value, "upper")
        self._set_length(value - self._lower)

    @property
    def length(self) -> int:
        return self._length

    def _set_length(self, value: int) -> None:
        # Lower bound is the anchor
        if value < 0:
            raise InvalidArgumentError("length must not be negative", "length", value)
        self._length = value

    @property
    def strand(self) -> Optional[int]:
        """Strand: 1 (+), -1 (-), 0 (strandless) or None (unknown)."""
        return self._strand

    @strand.setter
    def strand(self, value: Optional[int]) -> None:
        self._strand = validate_strand(value)

    def get_lus(self) -> Tuple[int, int, Optional[int]]:
        """Return (lower, upper, strand)."""
        return self._lower, self.upper, self._strand

    def copy(self) -> 'Range':
        """Return an independent range with the same coordinates."""
        return Range(self._lower, self._length, self._strand)

    def extend(self, lower_offset: int, upper_offset: Optional[int] = None) -> 'Range':
        """
        Extend (or with negative offsets, contract) both ends in place.

        Args:
            lower_offset: Amount to move the lower bound down
            upper_offset: Amount to move the upper bound up (defaults to
                lower_offset)

        Returns:
            self
        """
        validate_int(lower_offset, "lower_offset")
        if upper_offset is None:
            upper_offset = lower_offset
        validate_int(upper_offset, "upper_offset")

        new_lower = self._lower - lower_offset
        new_upper = self.upper + upper_offset
        validate_non_negative_int(new_lower, "lower")
        if new_upper < new_lower:
            raise InvalidArgumentError("extension would invert the range", "upper", new_upper)

        self._lower = new_lower
        self._length = new_upper - new_lower
        return self

    def __repr__(self) -> str:
        return f"Range(lower={self._lower}, length={self._length}, strand={self._strand})"
