#!/usr/bin/env python3

"""
Genome reference access for range sequence extraction.

Wraps a pyfaidx indexed FASTA so that ranges and range sets can pull
sequence from named contigs without loading whole chromosomes into memory.
"""

import logging
import os
from typing import List

import pyfaidx

from ..core.exceptions import GenomeError, SequenceError


class GenomeReference:
    """Indexed FASTA reference keyed by contig name."""

    def __init__(self, genome_file: str):
        if not os.path.exists(genome_file):
            raise GenomeError(f"Genome file not found: {genome_file}")

        self.genome_file = genome_file
        logging.info(f"Loading genome from {genome_file}")
        try:
            self.genome = pyfaidx.Fasta(genome_file)
        except pyfaidx.FastaIndexingError as e:
            raise GenomeError(f"Failed to index genome file {genome_file}: {e}")
        logging.info(f"Genome loaded successfully ({len(self.genome.keys())} contigs)")

    def contigs(self) -> List[str]:
        """Names of all contigs in the reference."""
        return list(self.genome.keys())

    def contig(self, name: str):
        """Return the record for a contig; usable directly as a sequence buffer."""
        if name not in self.genome:
            raise GenomeError("Contig not found in genome", chromosome=name)
        return self.genome[name]

    def extract(self, name: str, item) -> str:
        """
        Extract the sequence covered by a range from a contig.

        For a RangeSet use ``extract_spliced`` to join member sequences; this
        method returns the span ``[lower, upper)``.
        """
        record = self.contig(name)
        try:
            sequence = item.sequence(record)
        except SequenceError as e:
            raise GenomeError(str(e), chromosome=name, coordinates=f"{item.lower}-{item.upper}")
        return sequence.upper() if sequence is not None else None

    def extract_spliced(self, name: str, range_set) -> str:
        """Concatenate member sequences of a range set from a contig."""
        record = self.contig(name)
        try:
            sequence = range_set.spliced_sequence(record)
        except SequenceError as e:
            raise GenomeError(str(e), chromosome=name,
                              coordinates=f"{range_set.lower}-{range_set.upper}")
        return sequence.upper() if sequence is not None else None

    def close(self) -> None:
        """Release the underlying file handle."""
        self.genome.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
