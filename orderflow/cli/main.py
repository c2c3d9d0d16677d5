"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Scenario routing and execution
- Output formatting of scenario results
"""
import argparse
import os
import sys
from typing import List, Optional

from orderflow import __version__
from orderflow.bootstrap import GATEWAYS, Application
from orderflow.cli.formatters import format_output
from orderflow.cli.scenarios import SCENARIOS
from orderflow.infrastructure.error import EXIT_SUCCESS, handle_domain_errors


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per scenario."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "orderflow",
        description="orderflow - SOLID principles and design patterns on an order-processing domain",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s facade --order-id order123 --amount 100
  %(prog)s proxy --roles admin guest
  %(prog)s adapter --gateway mercadopago
  %(prog)s decorator --format table
  %(prog)s all
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (YAML or JSON)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                        default='json', help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='scenario', help='Available scenarios')

    facade = subparsers.add_parser('facade', help='Process an order through the order facade')
    facade.add_argument('--order-id', default='order123', help='Order identifier')
    facade.add_argument('--amount', type=float, default=100.0, help='Order amount')

    proxy = subparsers.add_parser('proxy', help='Pay through the access-controlled caching proxy')
    proxy.add_argument('--order-id', default='order123', help='Order identifier')
    proxy.add_argument('--amount', type=float, default=100.0, help='Order amount')
    proxy.add_argument('--roles', nargs='+', help='Roles to attempt the payment as')

    observer = subparsers.add_parser('observer', help='Notify observers of order status changes')
    observer.add_argument('--order-id', default='12345', help='Order identifier')
    observer.add_argument('--amount', type=float, default=100.0, help='Order amount')
    observer.add_argument('--statuses', nargs='+', default=['shipped', 'delivered'],
                          help='Statuses to move the order through')

    decorator = subparsers.add_parser('decorator', help='Price an order through discount and tax decorators')
    decorator.add_argument('--item', default='Book', help='Item name')
    decorator.add_argument('--price', type=float, default=50.0, help='Base price')
    decorator.add_argument('--discount', type=float, help='Discount percentage')
    decorator.add_argument('--tax', type=float, help='Tax rate percentage')

    template = subparsers.add_parser('template', help='Pay an order with a template-method payment')
    template.add_argument('--order-id', default='order123', help='Order identifier')
    template.add_argument('--amount', type=float, default=100.0, help='Order amount')
    template.add_argument('--method', choices=['credit', 'debit'], default='credit', help='Payment method')

    adapter = subparsers.add_parser('adapter', help='Charge an order through a gateway adapter')
    adapter.add_argument('--order-id', default='order123', help='Order identifier')
    adapter.add_argument('--customer-id', default='user456', help='Customer identifier')
    adapter.add_argument('--gateway', choices=list(GATEWAYS), default='stripe', help='Payment gateway')

    methods = subparsers.add_parser('methods', help='Pay with credit card, boleto and PIX')
    methods.add_argument('--amount', type=float, default=150.0, help='Payment amount')
    methods.add_argument('--description', default='Online purchase', help='Payment description')

    accounts = subparsers.add_parser('accounts', help='Exercise account and file saver contracts')
    accounts.add_argument('--deposit', type=float, default=100.0, help='Initial deposit')
    accounts.add_argument('--withdraw', type=float, default=500.0, help='Withdrawal to attempt')

    discounts = subparsers.add_parser('discounts', help='Swap discount policies on an order amount')
    discounts.add_argument('--amount', type=float, default=100.0, help='Order amount')

    processor = subparsers.add_parser('processor', help='Process an order with single-purpose steps')
    processor.add_argument('--order-id', default='123', help='Order identifier')
    processor.add_argument('--amount', type=float, default=100.0, help='Order amount')
    processor.add_argument('--out-of-stock', action='store_true', help='Fail the inventory check')
    processor.add_argument('--decline', action='store_true', help='Decline the payment')

    config = subparsers.add_parser('config', help='Show and update gateway configuration')
    config.add_argument('--api-key', help='New API key')
    config.add_argument('--timeout', type=int, help='New timeout in milliseconds')

    subparsers.add_parser('all', help='Run every scenario with its defaults')

    return parser


def execute_scenario(app: Application, args: argparse.Namespace) -> int:
    """Run the selected scenario (or all of them) and print its result."""
    if args.scenario == 'all':
        parser = build_parser()
        results = {}
        for name, scenario in SCENARIOS.items():
            print(f"\n=== {name} ===")
            results[name] = scenario(app, parser.parse_args([name]))
        print(format_output(results, args.format))
        return EXIT_SUCCESS

    result = SCENARIOS[args.scenario](app, args)
    print(format_output(result, args.format))
    return EXIT_SUCCESS


@handle_domain_errors
def run(args: argparse.Namespace) -> int:
    """Build the application from the global options and run the scenario."""
    app = Application(config_path=args.config, log_level=args.log_level)
    app.initialize()
    return execute_scenario(app, args)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.scenario:
        parser.print_help()
        return 2

    return run(args)


if __name__ == '__main__':
    sys.exit(main())
