import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

import yaml

from dutree.config import ScanOptions
from dutree.errors import ScanError, UsageError
from dutree.scanner import ScanReport, Scanner

EXIT_USAGE = 1
EXIT_SCAN_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dutree',
        description='Report disk usage of a directory as a ranked list or a tree.'
    )
    parser.add_argument('folder', nargs='?', default=None, help='folder to scan')
    parser.add_argument('-i', '--inverted', action='store_true', default=None, help='inverted sort')
    parser.add_argument('--depth', type=int, dest='max_depth', default=None,
                        help='max depth to go (0 = infinite)')
    parser.add_argument('-a', '--all', action='store_true', dest='include_hidden', default=None,
                        help='do not ignore entries starting with .')
    parser.add_argument('-t', '--tree', action='store_true', default=None, help='print tree of all indexed files')
    parser.add_argument('--top', type=int, default=None, help='N top files (0 = all)')
    parser.add_argument('-d', '--dirs', action='store_true', dest='include_dirs', default=None,
                        help='include directories')
    parser.add_argument('-H', '--human-readable', action='store_true', dest='human_readable', default=None,
                        help='human readable sizes')
    parser.add_argument('-v', '--verbose', action='store_true', default=None, help='verbose mode')
    parser.add_argument('--workers', type=int, default=None, help='max concurrent directory reads (0 = unlimited)')
    parser.add_argument('--config_path', type=str, default=None, help='path to configuration file')
    return parser


def parse_options(argv: Optional[Sequence[str]] = None) -> ScanOptions:
    """Build options from command line and optional configuration file.

    Raises
    ------
    ValueError
        If no folder is given either way or an option is out of range.
    """
    args = build_parser().parse_args(argv)
    overrides = {name: getattr(args, name) for name in ScanOptions.field_names()}
    if args.config_path:
        options = ScanOptions.from_yaml(args.config_path, **overrides)
    else:
        options = ScanOptions(**{key: value for key, value in overrides.items() if value is not None})
    message = options.validate()
    if message is not None:
        raise ValueError(message)
    return options


def print_report(report: ScanReport, verbose: bool) -> None:
    for line in report.lines:
        print(line)
    if verbose:
        print(f'## File Count {report.entry_count}')
        print(f'## Directories Read {report.directories_read}')
        print(f'## Skipped Files {report.files_skipped}')
        print(f'## Sorting Time {report.sort_time:.6f}s')
        print(f'## Printing Time {report.render_time:.6f}s')
        print(f'## Index Time {report.discovery_time:.6f}s')
        print(f'## Total Times {report.total_time:.6f}s')


async def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        options = parse_options(argv)
    except (OSError, TypeError, ValueError, yaml.YAMLError) as err:
        print(err, file=sys.stderr)
        return EXIT_USAGE
    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')
    try:
        report = await Scanner(options).run(progress=options.verbose)
    except UsageError as err:
        print(err, file=sys.stderr)
        return EXIT_USAGE
    except ScanError as err:
        print(err, file=sys.stderr)
        return EXIT_SCAN_FAILED
    print_report(report, options.verbose)
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))
