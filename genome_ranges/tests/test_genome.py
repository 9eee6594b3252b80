#!/usr/bin/env python3

"""
Unit tests for genome reference sequence extraction.

Builds a small indexed FASTA in a temporary directory and extracts range
and spliced range set sequence from it.
"""

import unittest
import tempfile
import os
import sys

# Add the parent directory to the path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from genome_ranges.core.exceptions import GenomeError, SequenceError
from genome_ranges.core.range import Range
from genome_ranges.core.range_set import RangeSet
from genome_ranges.utils.genome import GenomeReference

FASTA = """>chr1
AAAACCCCGG
GGTTTTacgt
>chr2
NNNNNNNNNN
"""


class TestGenomeReference(unittest.TestCase):
    """Test GenomeReference against a temporary FASTA file."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.genome_file = os.path.join(self.temp_dir.name, "genome.fa")
        with open(self.genome_file, 'w') as f:
            f.write(FASTA)
        self.genome = GenomeReference(self.genome_file)

    def tearDown(self):
        self.genome.close()
        self.temp_dir.cleanup()

    def test_contigs(self):
        """Test listing contigs."""
        self.assertEqual(self.genome.contigs(), ['chr1', 'chr2'])

    def test_extract(self):
        """Test extracting a range, across a line break."""
        self.assertEqual(self.genome.extract('chr1', Range.from_lower_upper(8, 14)), "GGGGTT")
        self.assertEqual(self.genome.extract('chr1', Range.from_ends(17, 20)), "ACGT")

    def test_range_sequence_from_record(self):
        """Test that a contig record works directly as a sequence buffer."""
        record = self.genome.contig('chr1')
        self.assertEqual(Range.from_lower_upper(0, 4).sequence(record), "AAAA")
        with self.assertRaises(SequenceError):
            Range.from_lower_upper(15, 21).sequence(record)

    def test_extract_spliced(self):
        """Test splicing member sequences from a contig."""
        range_set = RangeSet(Range.from_lower_upper(0, 2), Range.from_lower_upper(12, 14))
        self.assertEqual(self.genome.extract_spliced('chr1', range_set), "AATT")

    def test_missing_contig(self):
        """Test error handling for unknown contigs."""
        with self.assertRaises(GenomeError):
            self.genome.extract('chrX', Range(0, 1))

    def test_range_beyond_contig(self):
        """Test that out-of-bounds ranges become genome errors."""
        with self.assertRaises(GenomeError) as context:
            self.genome.extract('chr2', Range.from_lower_upper(5, 11))
        self.assertEqual(context.exception.chromosome, 'chr2')
        self.assertEqual(context.exception.coordinates, '5-11')

    def test_missing_file(self):
        """Test error handling for a nonexistent genome file."""
        with self.assertRaises(GenomeError):
            GenomeReference(os.path.join(self.temp_dir.name, "missing.fa"))


if __name__ == '__main__':
    unittest.main()
