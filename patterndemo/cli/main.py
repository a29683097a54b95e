"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Pattern routing and execution
- Output formatting
"""
import os
import sys
import math
import argparse
from typing import Any, Dict, List, Optional, Tuple, Union

from patterndemo import PACKAGE_NAME, __version__
from patterndemo.application.runner import PatternName
from patterndemo.config import AppConfig
from patterndemo.domain.core.exceptions import DomainException
from patterndemo.domain.database import DatabaseEngine
from patterndemo.domain.payment import PaymentMethodType
from patterndemo.domain.transport import TransportKind
from patterndemo.domain.ui import UIFamily
from patterndemo.infrastructure.logging.logger import get_logger, setup_logging
from patterndemo.cli.formatters import format_output

OUTPUT_FORMATS = ['json', 'yaml', 'table', 'list']


def _host_user_pair(value: str) -> Tuple[str, str]:
    host, separator, user = value.partition(':')
    if not separator or not host or not user:
        raise argparse.ArgumentTypeError(f"expected HOST:USER, got '{value}'")
    return host, user


def _amount(value: str) -> Union[int, float]:
    try:
        return int(value)
    except ValueError:
        pass
    try:
        amount = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid amount: '{value}'")
    if not math.isfinite(amount):
        raise argparse.ArgumentTypeError(f"amount must be finite, got '{value}'")
    return amount


def _key_value(value: str) -> Tuple[str, str]:
    key, separator, item = value.partition('=')
    if not separator or not key:
        raise argparse.ArgumentTypeError(f"expected FIELD=VALUE, got '{value}'")
    return key, item


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per pattern."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or PACKAGE_NAME,
        description="Run creational design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s factory-method road                      # Factory Method with road logistics
  %(prog)s payment credit_card 99.95                # Payment factory
  %(prog)s singleton db1:admin db2:guest            # Two accesses, one connection
  %(prog)s prototype T C --set title=T2             # Clone and edit
  %(prog)s --format table abstract-factory macos    # Widget family as a table
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (.json, .yaml, .yml)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, default='json', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='pattern', help='Available patterns')

    # Factory method
    factory_method = subparsers.add_parser(PatternName.FACTORY_METHOD.value,
                                           help='Factory Method with logistics creators')
    factory_method.add_argument('variant', choices=TransportKind.values(), help='Transport kind')

    # Payment factory
    payment = subparsers.add_parser(PatternName.PAYMENT.value, help='Payment method factory')
    payment.add_argument('variant', choices=PaymentMethodType.values(), help='Payment method')
    payment.add_argument('amount', type=_amount, help='Amount to charge')

    # Singleton
    singleton = subparsers.add_parser(PatternName.SINGLETON.value,
                                      help='Repeated access to one shared connection')
    singleton.add_argument('configs', nargs='+', type=_host_user_pair, metavar='HOST:USER',
                           help='Connection arguments, one pair per access')

    # Prototype
    prototype = subparsers.add_parser(PatternName.PROTOTYPE.value, help='Clone a document and edit the clone')
    prototype.add_argument('title', help='Template title')
    prototype.add_argument('content', help='Template content')
    prototype.add_argument('--meta', action='append', type=_key_value, default=[], metavar='KEY=VALUE',
                           help='Template metadata entry (repeatable)')
    prototype.add_argument('--set', dest='edits', action='append', type=_key_value, default=[],
                           metavar='FIELD=VALUE',
                           help='Edit applied to the clone: title, content or metadata.<key> (repeatable)')

    # Abstract factories
    abstract_factory = subparsers.add_parser(PatternName.ABSTRACT_FACTORY.value,
                                             help='Abstract Factory with widget families')
    abstract_factory.add_argument('variant', choices=UIFamily.values(), help='Widget family')

    database_factory = subparsers.add_parser(PatternName.DATABASE_FACTORY.value,
                                             help='Abstract Factory with database driver families')
    database_factory.add_argument('variant', choices=DatabaseEngine.values(), help='Database engine')

    # Registries
    prototypes = subparsers.add_parser(PatternName.PROTOTYPES.value,
                                       help='Clone a template from the prototype registry')
    prototypes.add_argument('variant', metavar='KEY', help='Registered template key')

    service = subparsers.add_parser(PatternName.SERVICE.value, help='Resolve a service by name')
    service.add_argument('variant', metavar='NAME', help='Registered service name')
    service.add_argument('--message', help='Message to send')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def execute_command(args: argparse.Namespace, app) -> Dict[str, Any]:
    """Run the selected demonstration and return the result document."""
    options: Dict[str, Any] = {}
    if args.pattern == PatternName.PAYMENT.value:
        options['amount'] = args.amount
    elif args.pattern == PatternName.SINGLETON.value:
        options['configs'] = args.configs
    elif args.pattern == PatternName.PROTOTYPE.value:
        options.update(
            title=args.title,
            content=args.content,
            metadata=dict(args.meta),
            edits=dict(args.edits),
        )
    elif args.pattern == PatternName.SERVICE.value:
        options['message'] = args.message

    result = app.runner.run(args.pattern, getattr(args, 'variant', None), **options)
    return result.to_dict()


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        # Validate required arguments
        if not args.pattern:
            print("Error: No pattern specified. Use --help for usage information.")
            sys.exit(1)

        # Initialize application
        try:
            from patterndemo.bootstrap import create_application
            app = create_application(args.config)
            if args.log_level:
                logging_config = app.config_manager.get_typed(AppConfig).logging
                setup_logging(logging_config.model_copy(update={'level': args.log_level}))
        except DomainException as e:
            logger.error(f"Failed to initialize application: {e}")
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)

        # Execute command
        try:
            result = execute_command(args, app)
            formatted_output = format_output(result, args.format)

            if args.output:
                with open(args.output, 'w') as f:
                    f.write(formatted_output)
                if not args.quiet:
                    print(f"Output written to {args.output}")
            else:
                print(formatted_output)

        except DomainException as e:
            logger.error(f"Domain error: {e}")
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            if args.verbose:
                import traceback
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
