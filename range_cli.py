#!/usr/bin/env python3

"""
Command-line interface for genomic ranges.

Converts between 1-based 5'/3' ends and interbase coordinates, describes a
single range, and aggregates several ranges into a spliced feature.
"""

import argparse
import sys
import logging
from typing import List

from genome_ranges.core.config import load_config
from genome_ranges.core.exceptions import RangeError, InvalidArgumentError
from genome_ranges.core.formatting import RangeFormatter
from genome_ranges.core.range import Range
from genome_ranges.core.range_set import RangeSet
from genome_ranges.core.strand import strand_from_symbol, strand_symbol


def setup_logging(log_level: str = "INFO") -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Interbase range conversions and range set aggregation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 1-based ends to interbase coordinates
  python range_cli.py ends 52 143

  # Describe lower/upper/strand
  python range_cli.py describe 50 150 --strand -

  # Aggregate exons into a spliced feature
  python range_cli.py splice 0:10:+ 20:30:+ 45:60:+
        """
    )
    parser.add_argument(
        '--config',
        help='Configuration file (JSON or YAML)'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: from configuration, INFO)'
    )
    parser.add_argument(
        '--format',
        dest='string_method',
        choices=['lus', '53'],
        help='Display style for ranges (default: from configuration, lus)'
    )
    parser.add_argument(
        '--width',
        type=int,
        help='Integer padding width for display (default: from configuration, 6)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    ends = subparsers.add_parser('ends', help="Convert 1-based 5'/3' ends")
    ends.add_argument('end5', type=int, help="1-based 5' end")
    ends.add_argument('end3', type=int, help="1-based 3' end")

    describe = subparsers.add_parser('describe', help='Describe an interbase range')
    describe.add_argument('lower', type=int, help='Interbase lower bound')
    describe.add_argument('upper', type=int, help='Interbase upper bound')
    describe.add_argument('--strand', default='?', choices=['+', '-', '.', '?'],
                          help='Strand symbol (default: ?)')

    splice = subparsers.add_parser('splice', help='Aggregate ranges into a spliced feature')
    splice.add_argument('ranges', nargs='+', help='Ranges as lower:upper[:strand]')
    splice.add_argument('--normalize-strands', action='store_true', default=None,
                        help='Assign the consensus strand to unknown/flat members')

    return parser


def parse_range_token(token: str) -> Range:
    """Parse 'lower:upper' or 'lower:upper:strand' into a Range."""
    parts = token.split(':')
    if len(parts) not in (2, 3):
        raise InvalidArgumentError("expected lower:upper[:strand]", "range", token)
    try:
        lower, upper = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidArgumentError("bounds must be integers", "range", token)
    strand = strand_from_symbol(parts[2]) if len(parts) == 3 else None
    return Range.from_lower_upper(lower, upper, strand)


def describe_range(item, formatter: RangeFormatter) -> List[str]:
    """Lines describing every derived quantity of a range or set."""
    return [
        f"range:   {item.to_display_string(formatter)}",
        f"ends:    {item.to_display_string(formatter, '53')}",
        f"lower:   {item.lower}",
        f"upper:   {item.upper}",
        f"strand:  {strand_symbol(item.strand)}",
        f"length:  {item.length}",
        f"phase:   {item.phase}",
        f"end5:    {item.end5}",
        f"end3:    {item.end3}",
    ]


def run_splice(tokens: List[str], normalize: bool, formatter: RangeFormatter) -> List[str]:
    """Aggregate range tokens and describe the spliced feature."""
    range_set = RangeSet(*[parse_range_token(token) for token in tokens])
    if normalize:
        range_set.normalize_strands()

    lines = describe_range(range_set, formatter)
    lines.append(f"spliced length: {range_set.spliced_length()}")
    for intron in range_set.introns():
        lines.append(f"intron:  {intron.to_display_string(formatter)}")
    return lines


def main(argv=None):
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(config_path=args.config, use_env=True)

        # Override config with command line arguments
        if args.log_level is not None:
            config.log_level = args.log_level
        if args.string_method is not None:
            config.string_method = args.string_method
        if args.width is not None:
            config.integer_width = args.width
        if args.command == 'splice' and args.normalize_strands is not None:
            config.normalize_strands = args.normalize_strands

        # Re-validate after CLI overrides.
        config.validate()
    except RangeError as e:
        setup_logging()
        logging.getLogger(__name__).error(f"Configuration error: {e}")
        return 1

    setup_logging(config.log_level)
    logger = logging.getLogger(__name__)
    formatter = RangeFormatter.from_config(config)

    try:
        if args.command == 'ends':
            lines = describe_range(Range.from_ends(args.end5, args.end3), formatter)
        elif args.command == 'describe':
            item = Range.from_lower_upper(args.lower, args.upper, strand_from_symbol(args.strand))
            lines = describe_range(item, formatter)
        else:
            lines = run_splice(args.ranges, config.normalize_strands, formatter)
    except RangeError as e:
        logger.error(f"Range error: {e}")
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
