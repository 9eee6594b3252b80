#!/usr/bin/env python3

"""
Custom exceptions for genomic range handling.

Provides specific exception types for better error handling and debugging.
Value absence (non-overlapping ranges, empty sets, unoriented ends) is
reported as ``None`` rather than raised.
"""


class RangeError(Exception):
    """Base exception for all range-related errors."""
    pass


class InvalidArgumentError(RangeError, ValueError):
    """Malformed coordinate or strand supplied to a constructor or setter."""

    def __init__(self, message: str, argument: str = "", value=None):
        super().__init__(message)
        self.argument = argument
        self.value = value

    def __str__(self):
        if self.argument:
            return f"Invalid {self.argument} ({self.value!r}): {super().__str__()}"
        return super().__str__()


class StrandError(RangeError):
    """Operation needs an oriented (+1/-1) strand."""

    def __init__(self, message: str, strand=None):
        super().__init__(message)
        self.strand = strand

    def __str__(self):
        return f"Strand error (strand={self.strand!r}): {super().__str__()}"


class OverlappingRangesError(RangeError):
    """Adjacent members of a set overlap where gaps were expected."""

    def __init__(self, message: str, first=None, second=None):
        super().__init__(message)
        self.first = first
        self.second = second

    def __str__(self):
        if self.first is not None and self.second is not None:
            return (f"Overlapping ranges [{self.first.lower}, {self.first.upper}) and "
                    f"[{self.second.lower}, {self.second.upper}): {super().__str__()}")
        return super().__str__()


class SequenceError(RangeError):
    """Error occurred during sequence extraction."""

    def __init__(self, message: str, sequence_length: int = -1, upper: int = -1):
        super().__init__(message)
        self.sequence_length = sequence_length
        self.upper = upper

    def __str__(self):
        if self.sequence_length >= 0 and self.upper >= 0:
            return (f"Sequence error: {super().__str__()} "
                    f"(sequence length: {self.sequence_length}, upper bound: {self.upper})")
        return f"Sequence error: {super().__str__()}"


class ConfigurationError(RangeError):
    """Error in range configuration."""
    pass


class GenomeError(RangeError):
    """Error accessing genome reference."""

    def __init__(self, message: str, chromosome: str = "", coordinates: str = ""):
        super().__init__(message)
        self.chromosome = chromosome
        self.coordinates = coordinates

    def __str__(self):
        if self.chromosome and self.coordinates:
            return f"Genome error at {self.chromosome}:{self.coordinates}: {super().__str__()}"
        elif self.chromosome:
            return f"Genome error at {self.chromosome}: {super().__str__()}"
        return super().__str__()
