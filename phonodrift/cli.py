#!/usr/bin/env python3
"""
PhonoDrift CLI
==============
Command-line interface for drifting word generation.

Usage:
    phonodrift generate -n 10 --drift midway
    phonodrift generate -n 3 --trace --seed 7
    phonodrift blend --drift 0.5 --row a
    phonodrift profiles
"""

import argparse
import json
import logging
import sys

from phonodrift import __version__
from phonodrift.settings import get_setting

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else getattr(
        logging, str(get_setting("logging.level", "WARNING")).upper(), logging.WARNING
    )
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate words."""
    from phonodrift import PhonoDrift, get_drift

    pd = PhonoDrift(seed=args.seed)
    drift = get_drift(args.drift)
    syllables = tuple(args.syllables) if args.syllables else None

    if args.parallel:
        words = pd.generate_parallel(count=args.count, drift=drift,
                                     syllables=syllables, workers=args.workers)
    else:
        words = pd.trace(count=args.count, drift=drift, syllables=syllables)

    if args.json:
        print(json.dumps({
            'drift': drift,
            'words': [w.to_dict() if args.trace else w.text for w in words],
        }, indent=2))
        return 0

    if args.trace:
        if not out.quiet:
            from phonodrift.ui import render_trace
            render_trace(words)
        return 0

    out.print(f"Generated {len(words)} words (drift={drift:.2f}):")
    out.print("-" * 40)
    for i, word in enumerate(words, 1):
        out.print(f"{i:2}. {word.text or '(empty)':<16} {word.mean_surprise:.3f}")
    if out.quiet:
        for word in words:
            print(word.text)
    return 0


def cmd_blend(args, out: Output):
    """Show the blended transition table."""
    from phonodrift import build_blended, get_drift

    model = build_blended(get_drift(args.drift))
    rows = args.row or None
    if rows:
        unknown = [r for r in rows if r not in model.transitions]
        if unknown:
            raise ValueError(f"Unknown row(s): {', '.join(unknown)}")

    if args.json:
        data = model.to_dict()
        if rows:
            data['transitions'] = {r: data['transitions'][r] for r in rows}
        print(json.dumps(data, indent=2))
        return 0

    if not out.quiet:
        from phonodrift.ui import render_blend
        render_blend(model, rows)
    return 0


def cmd_profiles(args, out: Output):
    """List drift profiles."""
    from phonodrift.config import list_profiles

    profiles = list_profiles()
    if out.quiet:
        for name in profiles:
            print(name)
        return 0

    from phonodrift.ui import render_profiles
    render_profiles(profiles)
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='phonodrift',
        description='PhonoDrift - Drifting Phonotactic Word Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10 --drift midway
  %(prog)s generate -n 3 --trace --seed 7
  %(prog)s generate -n 100 --parallel --workers 8 --json
  %(prog)s blend --drift 0.5 --row a i
  %(prog)s profiles
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate words')
    p.add_argument('-n', '--count', type=int, default=None, help='Number of words (default: from app.yaml)')
    p.add_argument('--drift', '-d', help='Drift value in [0, 1] or profile name')
    p.add_argument('--syllables', type=int, nargs=2, metavar=('MIN', 'MAX'),
                   help='Per-word syllable budget range')
    p.add_argument('--seed', type=int, help='Seed for reproducible output')
    p.add_argument('--trace', '-t', action='store_true', help='Show per-edge probabilities and surprise')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    p.add_argument('--parallel', action='store_true', help='Generate on a thread pool')
    p.add_argument('--workers', type=int, help='Worker threads for --parallel')

    # --- blend ---
    p = subparsers.add_parser('blend', aliases=['b'], help='Show the blended transition table')
    p.add_argument('--drift', '-d', help='Drift value in [0, 1] or profile name')
    p.add_argument('--row', '-r', nargs='+', help='Only these previous symbols')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- profiles ---
    subparsers.add_parser('profiles', help='List drift profiles')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.verbose)

    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'b': 'blend',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'blend': cmd_blend,
        'profiles': cmd_profiles,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
