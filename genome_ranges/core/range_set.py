#!/usr/bin/env python3

"""
RangeSet: an ordered collection of ranges treated as one composite feature.

The set keeps references to its members, not copies. Bounds and strand are
recomputed from the members on every access, so mutating a member through
any other handle is reflected immediately. Several operations write back
through those references:

    - setting ``lower``/``upper``/``strand`` on the set moves member bounds
      or strands
    - ``sort()`` and ``introns()`` reorder the member list in place
    - ``normalize_strands()`` assigns the consensus strand to members whose
      strand is unknown or flat

Empty sets have no bounds: lower, upper, strand, end5, end3, simplify,
introns, spliced_length and spliced_sequence all return None. Members without
bounds, such as an empty nested set, take no part in aggregation.
"""

import logging
from typing import Iterator, List, Optional

from .exceptions import InvalidArgumentError, OverlappingRangesError
from .interface import CoordinateMixin, require_coordinates
from .range import Range
from .strand import reconcile_strands, validate_non_negative_int, validate_strand


class RangeSet(CoordinateMixin):
    """Ordered collection of coordinate-bearing members."""

    def __init__(self, *ranges):
        self._ranges: List = []
        self.push(*ranges)

    def push(self, *ranges) -> None:
        """Append one or more range-like objects (stored by reference)."""
        for item in ranges:
            require_coordinates(item)
        self._ranges.extend(ranges)

    def ranges(self) -> List:
        """Return a new list of the members; the members themselves are shared."""
        return list(self._ranges)

    def _bounded(self) -> List:
        return [item for item in self._ranges if item.lower is not None and item.upper is not None]

    def _edge_members(self, bound: str) -> List:
        """Leaf members sitting on the set's lower or upper bound."""
        edge = getattr(self, bound)
        found = []
        for item in self._bounded():
            if getattr(item, bound) != edge:
                continue
            if isinstance(item, RangeSet):
                found.extend(item._edge_members(bound))
            else:
                found.append(item)
        return found

    def sort(self) -> List:
        """Sort members by lower then upper bound, in place; unbounded members go last."""
        self._ranges.sort(key=lambda item: (item.lower is None, item.lower or 0, item.upper or 0))
        return list(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self) -> Iterator:
        return iter(self._ranges)

    # Bounds-like accessors

    @property
    def lower(self) -> Optional[int]:
        """Lowest member lower bound; setting it moves every member at that bound."""
        bounded = self._bounded()
        if not bounded:
            return None
        return min(item.lower for item in bounded)

    @lower.setter
    def lower(self, value: int) -> None:
        validate_non_negative_int(value, "lower")
        targets = self._edge_members('lower')
        for item in targets:
            if value > item.upper:
                raise InvalidArgumentError("lower bound must not exceed a member's upper bound",
                                           "lower", value)
        for item in targets:
            item.lower = value

    @property
    def upper(self) -> Optional[int]:
        """Highest member upper bound; setting it moves every member at that bound."""
        bounded = self._bounded()
        if not bounded:
            return None
        return max(item.upper for item in bounded)

    @upper.setter
    def upper(self, value: int) -> None:
        validate_non_negative_int(value, "upper")
        targets = self._edge_members('upper')
        for item in targets:
            if value < item.lower:
                raise InvalidArgumentError("upper bound must not be less than a member's lower bound",
                                           "upper", value)
        for item in targets:
            item.upper = value

    @property
    def strand(self) -> Optional[int]:
        """Consensus strand of the members; setting it assigns every member."""
        if not self._ranges:
            return None
        return reconcile_strands(item.strand for item in self._ranges)

    @strand.setter
    def strand(self, value: Optional[int]) -> None:
        value = validate_strand(value)
        for item in self._ranges:
            item.strand = value

    def normalize_strands(self) -> Optional[int]:
        """
        Give unknown/flat members the consensus strand.

        Members are only written when the consensus is oriented (+1/-1); a
        conflicting or strandless set is left untouched.

        Returns:
            The consensus strand
        """
        consensus = self.strand
        if not consensus:
            return consensus

        normalized = 0
        for item in self._ranges:
            if not item.strand:
                item.strand = consensus
                normalized += 1

        if normalized:
            logging.debug(f"Normalized strand of {normalized} member(s) to {consensus}")
        return consensus

    # Range makers

    def simplify(self) -> Optional[Range]:
        """Return a single Range spanning the set with its consensus strand."""
        if self.lower is None:
            return None
        return Range.from_lower_upper(self.lower, self.upper, self.strand)

    def introns(self) -> Optional[List[Range]]:
        """
        Return the gaps between consecutive members.

        Members are sorted in place first. Each gap runs from one member's
        upper bound to the next member's lower bound and has Unknown strand.
        Touching members produce zero-length gaps; members without bounds
        are skipped.

        Raises:
            OverlappingRangesError: If two consecutive sorted members overlap
        """
        if self.lower is None:
            return None

        self.sort()
        members = self._bounded()
        introns = []
        for previous, current in zip(members, members[1:]):
            if previous.upper > current.lower:
                raise OverlappingRangesError("cannot derive a gap between overlapping members",
                                             previous, current)
            introns.append(Range.from_lower_upper(previous.upper, current.lower))
        return introns

    # Spliced quantities

    def spliced_length(self) -> Optional[int]:
        """Sum of member lengths (compare ``length``, the span of the set)."""
        bounded = self._bounded()
        if not bounded:
            return None
        return sum(item.length for item in bounded)

    def spliced_sequence(self, buffer):
        """
        Concatenate each member's subsequence in member order.

        Members are not sorted first; call ``sort()`` beforehand when
        coordinate order is wanted. Members without bounds contribute
        nothing.
        """
        bounded = self._bounded()
        if not bounded:
            return None

        pieces = [item.sequence(buffer) for item in bounded]
        if isinstance(pieces[0], bytes):
            return b''.join(pieces)
        return ''.join(pieces)

    def __repr__(self) -> str:
        return f"RangeSet({', '.join(repr(item) for item in self._ranges)})"
