#!/usr/bin/env python3
"""tsquery Compiler CLI - Main entry point for all commands."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from config.config_service import ConfigurationService
from search.models import QueryValidationError
from search.query_compiler import QueryCompiler

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

EXIT_OK = 0
EXIT_INVALID_QUERY = 2
EXIT_INVALID_CONFIG = 3


def positive_int(value):
    """Custom argparse type for positive integers."""
    try:
        ivalue = int(value)
        if ivalue <= 0:
            raise argparse.ArgumentTypeError(f"{value} is an invalid positive int value")
        return ivalue
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value} is not an integer")


def add_query_arguments(parser):
    """Add arguments shared by the query commands."""
    parser.add_argument(
        'query',
        help='Search query as typed by the user'
    )
    parser.add_argument(
        '--max-length',
        type=positive_int,
        help='Override the maximum query length'
    )


def add_config_command(subparsers):
    """Add the config command."""
    config_parser = subparsers.add_parser(
        'config',
        help='View or modify the stored configuration'
    )
    actions = config_parser.add_mutually_exclusive_group()
    actions.add_argument(
        '--show',
        action='store_true',
        help='Show the effective configuration (default)'
    )
    actions.add_argument(
        '--set',
        nargs=2,
        metavar=('KEY', 'VALUE'),
        help='Set a stored configuration value (e.g., --set max_query_length 500)'
    )
    actions.add_argument(
        '--validate',
        action='store_true',
        help='Check the stored file and environment overrides'
    )
    actions.add_argument(
        '--reset',
        action='store_true',
        help='Remove the stored configuration file'
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='tsquery-compiler',
        description='Compile free-text search queries into PostgreSQL tsquery syntax'
    )
    parser.add_argument(
        '--config-dir',
        help='Directory holding .tsquery_compiler/compiler_config.json (defaults to cwd)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log each pipeline stage'
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # compile
    compile_parser = subparsers.add_parser(
        'compile',
        help='Compile a query and print the tsquery text'
    )
    add_query_arguments(compile_parser)
    compile_parser.add_argument(
        '--json',
        action='store_true',
        help='Print compiled text and terms as JSON'
    )

    # terms
    terms_parser = subparsers.add_parser(
        'terms',
        help='Print the include and exclude terms of a query as JSON'
    )
    add_query_arguments(terms_parser)

    add_config_command(subparsers)

    # serve
    subparsers.add_parser(
        'serve',
        help='Run the MCP server over stdio'
    )

    return parser


def create_compiler(args) -> QueryCompiler:
    """
    Create a compiler from stored configuration and command line overrides.

    Raises:
        ValueError: If --max-length is outside the accepted range
    """
    config = ConfigurationService(args.config_dir).get_config()
    if getattr(args, 'max_length', None):
        config = config.with_overrides({"max_query_length": args.max_length})
    return QueryCompiler(config)


def handle_compile(args) -> int:
    compiler = create_compiler(args)
    compiled = compiler.compile(args.query)

    if args.json:
        print(json.dumps(compiled.to_dict(), indent=2))
    else:
        print(compiled.compiled_text)
    return EXIT_OK


def handle_terms(args) -> int:
    compiler = create_compiler(args)
    terms = compiler.extract_terms(args.query)

    print(json.dumps({
        "include_terms": sorted(terms.include_terms),
        "exclude_terms": sorted(terms.exclude_terms)
    }, indent=2))
    return EXIT_OK


def handle_config(args) -> int:
    """Handle config command."""
    service = ConfigurationService(args.config_dir)

    if args.set:
        key, raw_value = args.set
        try:
            value = int(raw_value)
        except ValueError:
            # Left as a string so the validator reports it
            value = raw_value
        service.update_config({key: value})
        print(f"Set {key} = {value}")
        return EXIT_OK

    if args.reset:
        service.reset_configuration()
        print("Configuration reset to defaults")
        return EXIT_OK

    if args.validate:
        is_valid, errors = service.validate_configuration()
        if is_valid:
            print("Configuration is valid")
            return EXIT_OK
        for error in errors:
            print(f"Error: {error}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    print(json.dumps(service.get_config().to_dict(), indent=2))
    return EXIT_OK


def handle_serve(args) -> int:
    from server import main_sync
    main_sync()
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    handlers = {
        'compile': handle_compile,
        'terms': handle_terms,
        'config': handle_config,
        'serve': handle_serve
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return EXIT_OK

    try:
        return handler(args)
    except QueryValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INVALID_QUERY
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG


if __name__ == '__main__':
    sys.exit(main())
