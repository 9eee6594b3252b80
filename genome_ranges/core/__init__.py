#!/usr/bin/env python3

"""
Core module for genomic ranges.

Contains the range value type, range sets, strand reconciliation, exception
types, display formatting and configuration management components.
"""

from .range import Range
from .range_set import RangeSet
from .interface import CoordinateBearing, CoordinateMixin
from .strand import PLUS, MINUS, FLAT, UNKNOWN, reconcile_strands, consensus_strand
from .exceptions import (
    RangeError, InvalidArgumentError, StrandError, OverlappingRangesError,
    SequenceError, ConfigurationError, GenomeError
)
from .formatting import RangeFormatter
from .config import RangeConfig, load_config

__all__ = [
    'Range', 'RangeSet', 'CoordinateBearing', 'CoordinateMixin',
    'PLUS', 'MINUS', 'FLAT', 'UNKNOWN', 'reconcile_strands', 'consensus_strand',
    'RangeError', 'InvalidArgumentError', 'StrandError', 'OverlappingRangesError',
    'SequenceError', 'ConfigurationError', 'GenomeError',
    'RangeFormatter', 'RangeConfig', 'load_config'
]
