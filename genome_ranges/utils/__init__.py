#!/usr/bin/env python3

"""Utilities for working with external sequence sources."""

from .genome import GenomeReference

__all__ = ['GenomeReference']
