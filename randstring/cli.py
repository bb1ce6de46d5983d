"""CLI for randstring — generate random strings/passwords and check their strength."""

import argparse
import logging
import sys

from rich import print
from rich.markup import escape
from rich.table import Table

from .config import load_config, to_generation_config
from .generator import generate_many
from .strength import check_strength, describe, PasswordStrength
from .validator import ConfigurationError

STRENGTH_STYLES = {
    PasswordStrength.VERY_WEAK: "bold red",
    PasswordStrength.WEAK: "red",
    PasswordStrength.GOOD: "yellow",
    PasswordStrength.STRONG: "bold green",
}

def _settings_from_args(args):
    settings = load_config(args.config)
    if args.length is not None:
        settings["length"] = args.length
        settings["min_length"] = None
        settings["max_length"] = None
    if args.min is not None or args.max is not None:
        settings["min_length"] = args.min
        settings["max_length"] = args.max
    if args.case:
        settings["letter_case"] = args.case
    if args.no_letters:
        settings["letters"] = False
    if args.no_digits:
        settings["digits"] = False
    if args.no_symbols:
        settings["symbols"] = False
    if args.no_force_each:
        settings["force_each"] = False
    if args.symbols:
        settings["custom_symbols"] = args.symbols
    if args.copies is not None:
        settings["copies"] = args.copies
    return settings

def _styled(strength):
    style = STRENGTH_STYLES[strength]
    return f"[{style}]{describe(strength)}[/{style}]"

def cmd_generate(args):
    settings = _settings_from_args(args)
    try:
        config = to_generation_config(settings)
        if args.length is not None:
            # keep an explicit --length even next to --min/--max so validation sees both
            config.fixed_length = args.length
        results = generate_many(config, settings["copies"])
    except ConfigurationError as e:
        print(f"[red]Invalid configuration ({e.kind.value}): {escape(str(e))}[/red]")
        return 2
    except ValueError as e:
        print(f"[red]{escape(str(e))}[/red]")
        return 2

    if not args.show_strength:
        for i, s in enumerate(results):
            print(f"[bold green]String #{i+1}:[/bold green] {escape(s)}")
        return 0

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", width=4)
    table.add_column("Generated")
    table.add_column("Strength")
    for i, s in enumerate(results):
        table.add_row(str(i + 1), escape(s), _styled(check_strength(s)))
    print(table)
    return 0

def cmd_check(args):
    strength = check_strength(args.password)
    print(f"Strength: {_styled(strength)}")
    return 0

def build_parser():
    parser = argparse.ArgumentParser(prog="randstring")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more random strings")
    gen.add_argument("--config", type=str, help="Path to a JSON settings file")
    gen.add_argument("--length", type=int, help="Fixed length")
    gen.add_argument("--min", type=int, help="Minimum length (use with --max)")
    gen.add_argument("--max", type=int, help="Maximum length (use with --min)")
    gen.add_argument("--case", choices=["upper", "lower", "mixed"], help="Letter case")
    gen.add_argument("--no-letters", action="store_true", help="Disable letters")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--no-force-each", action="store_true", help="Do not require one character of each class")
    gen.add_argument("--symbols", type=str, help="Custom symbol characters")
    gen.add_argument("--copies", type=int, help="How many strings to generate")
    gen.add_argument("--show-strength", action="store_true", help="Show strength of each string")
    gen.set_defaults(func=cmd_generate)

    chk = sub.add_parser("check", help="Check the strength of a password")
    chk.add_argument("password", type=str, help="Password to check (wrap in quotes)")
    chk.set_defaults(func=cmd_check)
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)

if __name__ == "__main__":
    sys.exit(main())
