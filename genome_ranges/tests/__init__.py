#!/usr/bin/env python3

"""
Test suite for genomic ranges.

Unit tests covering:
- Range construction, coordinate conversion and pairwise algebra
- RangeSet aggregation, introns, splicing and member aliasing
- Strand validation and reconciliation
- Display formatting and configuration management
- Genome reference sequence extraction
- Command-line interface
"""
