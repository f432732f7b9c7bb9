"""Entry point for ipormac CLI client."""

import argparse
import sys

import requests

from cli.api_client import DrillAPIClient
from cli.console import ConsoleUI


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='ipormac - is it an IPv4, IPv6 or MAC address, or none of these?'
    )
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='Server URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--site',
        default=None,
        help='Site key for score tracking (default: network-addresses)'
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        '--check',
        nargs='+',
        metavar='ADDRESS',
        help='Classify the given tokens and exit'
    )
    mode.add_argument('--stats', action='store_true', help='Print progress and exit')
    mode.add_argument('--hints', action='store_true', help='Print address format rules and exit')
    mode.add_argument('--sites', action='store_true', help='List sites and exit')
    return parser


def run_once(args, client: DrillAPIClient, ui: ConsoleUI) -> bool:
    """Handle a one-shot option. Returns False when the quiz should run instead."""
    if args.check:
        for address in args.check:
            ui.print_check(client.check_address(address))
    elif args.stats:
        ui.print_stats(client.get_stats())
    elif args.hints:
        ui.print_hints(client.get_hints())
    elif args.sites:
        ui.print_sites(client.list_sites())
    else:
        return False
    return True


def main(argv=None):
    args = build_parser().parse_args(argv)

    client = DrillAPIClient(base_url=args.server, site_key=args.site)
    ui = ConsoleUI(client)

    try:
        if not run_once(args, client, ui):
            ui.run()
    except requests.RequestException as e:
        print(f"Error talking to {client.base_url}: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
