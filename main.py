#!/usr/bin/env python3
"""
Main entry point for the syntax-check runner.

Lints Views/HTML/HtmlEmail.php and Views/HTML/HtmlA.php, prints the linter
output for each, then prints the full contents of each file.

Usage:
    python main.py                       # Check with config/settings.yaml
    python main.py --settings my.yaml    # Use another settings file
    python main.py --verbose             # Debug logging on stderr
"""

import argparse
import sys

from core.checker import SyntaxChecker
from core.registry import TargetRegistry
from utils.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Syntax-check runner - lint fixed view files and dump their contents'
    )
    parser.add_argument(
        '--settings',
        type=str,
        default=None,
        help='Settings YAML file path (default: config/settings.yaml)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    registry = TargetRegistry(settings_path=args.settings)

    # Setup logging
    log_settings = registry.get_settings().get('logging', {})
    log_level = 'DEBUG' if args.verbose else log_settings.get('level', 'WARNING')
    setup_logging(
        level=log_level,
        format_str=log_settings.get('format'),
        log_file=log_settings.get('file')
    )

    checker = SyntaxChecker(registry=registry)
    checker.print_report(sys.stdout)

    # Linter failures are part of the printed text, not the exit status
    return 0


if __name__ == '__main__':
    sys.exit(main())
