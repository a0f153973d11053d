"""CLI for PassLens: analyze a password, show or set settings, launch the GUI."""

import argparse
import json
import logging
import sys
from getpass import getpass

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import DEFAULTS, build_analyzer, config_path, load_config, parse_setting, save_config
from .logs import setup_logging
from .report import Category, Report, report_rows
from .suggestions import GENERAL_TIPS

log = logging.getLogger(__name__)

console = Console()

EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

CATEGORY_STYLES = {
    Category.VERY_WEAK: "bold red",
    Category.WEAK: "red",
    Category.MODERATE: "yellow",
    Category.STRONG: "green",
    Category.EXCELLENT: "bold green",
}


def render_report(report: Report, guesses_per_second: float) -> None:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    for label, value in report_rows(report):
        if label == "Strength":
            value = f"[{CATEGORY_STYLES[report.category]}]{value}[/]"
        elif label == "Crack time":
            label = f"Crack time @{guesses_per_second:,.0f} guesses/s"
        table.add_row(label, value)
    console.print(Panel(table, title="Analysis"))

    console.print("\n[bold]Suggestions:[/bold]")
    for s in report.suggestions:
        console.print(f" • {s}", markup=False)
    console.print(f"\n[dim]Tips: {GENERAL_TIPS}[/dim]")


def _read_password(args) -> str:
    if args.password is not None:
        return args.password
    return getpass("Enter a password to evaluate: ")


def cmd_analyze(args) -> int:
    cfg = load_config(args.config)
    if args.rate is not None:
        cfg["guesses_per_second"] = args.rate
    if args.wordlist:
        cfg["wordlist_path"] = args.wordlist
    try:
        analyzer = build_analyzer(cfg)
    except (ValueError, OSError) as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        return EXIT_USAGE
    log.debug("using %r", analyzer)

    try:
        pw = _read_password(args)
    except (KeyboardInterrupt, EOFError):
        console.print("\nAborted.")
        return EXIT_INTERRUPTED

    report = analyzer.analyze(pw)
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        render_report(report, analyzer.guesses_per_second)
    return 0


def cmd_config_show(args) -> int:
    path = args.config or config_path()
    cfg = load_config(path)
    table = Table(show_header=True, header_style="bold magenta", title=path)
    table.add_column("Key")
    table.add_column("Value")
    for key in DEFAULTS:
        table.add_row(key, json.dumps(cfg.get(key)))
    console.print(table)
    return 0


def cmd_config_set(args) -> int:
    path = args.config or config_path()
    try:
        value = parse_setting(args.key, args.value)
    except KeyError:
        console.print(f"[red]Unknown setting: {args.key} (choose from {', '.join(DEFAULTS)})[/red]")
        return EXIT_USAGE
    except ValueError as e:
        console.print(f"[red]Invalid value for {args.key}: {e}[/red]")
        return EXIT_USAGE
    cfg = load_config(path)
    cfg[args.key] = value
    save_config(cfg, path)
    console.print(f"[green]Saved {args.key} to:[/green] {path}")
    return 0


def cmd_gui(args) -> int:
    try:
        from .gui import main as gui_main
    except ImportError as e:
        console.print(f"[red]GUI unavailable ({escape(str(e))}). Install with: pip install 'passlens\\[gui]'[/red]")
        return EXIT_USAGE
    return gui_main()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passlens")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", "-c", type=str, help="Path to settings file")
    sub = parser.add_subparsers(dest="cmd", required=True)

    an = sub.add_parser("analyze", help="Analyze a password and show suggestions")
    an.add_argument("password", nargs="?", help="Password to evaluate (prompted, hidden, when omitted)")
    an.add_argument("--json", action="store_true", help="Print the report as JSON")
    an.add_argument("--rate", type=float, help="Attacker guesses per second")
    an.add_argument("--wordlist", type=str, help="Extra weak-password list, one per line")
    an.set_defaults(func=cmd_analyze)

    cf = sub.add_parser("config", help="Settings")
    csub = cf.add_subparsers(dest="ccmd", required=True)

    cf_show = csub.add_parser("show", help="Show effective settings")
    cf_show.set_defaults(func=cmd_config_show)

    cf_set = csub.add_parser("set", help="Persist one setting")
    cf_set.add_argument("key", help=f"One of: {', '.join(DEFAULTS)}")
    cf_set.add_argument("value", help="New value ('none' clears wordlist_path)")
    cf_set.set_defaults(func=cmd_config_set)

    gui = sub.add_parser("gui", help="Open the analyzer window")
    gui.set_defaults(func=cmd_gui)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
