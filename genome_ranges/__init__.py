#!/usr/bin/env python3

"""
Genomic Ranges

Half-open genomic intervals on a zero-based coordinate line with strand,
conversion to and from 1-based 5'/3' ends, and the algebra for combining
them (overlap, containment, union, intersection) and aggregating many of
them into one composite feature (simplify, introns, splicing).

Modules:
- core: Range and RangeSet value types, strand reconciliation, exceptions,
  formatting and configuration
- utils: Genome reference access for sequence extraction
- tests: Comprehensive test suite
"""

__version__ = "0.6.0"
__author__ = "Genomic Ranges Team"

# Import main components for easy access
from .core.range import Range
from .core.range_set import RangeSet
from .core.interface import CoordinateBearing
from .core.strand import PLUS, MINUS, FLAT, UNKNOWN, reconcile_strands, consensus_strand
from .core.exceptions import (
    RangeError, InvalidArgumentError, StrandError, OverlappingRangesError,
    SequenceError, ConfigurationError, GenomeError
)
from .core.formatting import RangeFormatter
from .core.config import RangeConfig, load_config

__all__ = [
    # Value types
    'Range', 'RangeSet', 'CoordinateBearing',
    # Strands
    'PLUS', 'MINUS', 'FLAT', 'UNKNOWN', 'reconcile_strands', 'consensus_strand',
    # Exceptions
    'RangeError', 'InvalidArgumentError', 'StrandError', 'OverlappingRangesError',
    'SequenceError', 'ConfigurationError', 'GenomeError',
    # Display and configuration
    'RangeFormatter', 'RangeConfig', 'load_config'
]
