from __future__ import annotations
import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tintlog.core.errors import TintlogError
from tintlog.core.levels import LEVELS
from tintlog.logger import Logger, LoggerRegistry
from tintlog.system.settings import Settings

console = Console()

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tintlog", description="Colorized console logging helper")
    parser.add_argument("--settings", type=Path, help="settings file (default ~/.tintlog.json)")
    parser.add_argument("--level", help="override the configured threshold")
    sub = parser.add_subparsers(dest="command", required=True)

    emit = sub.add_parser("emit", help="write one log line")
    emit.add_argument("method", choices=list(LEVELS))
    emit.add_argument("message")
    emit.add_argument("--context")
    emit.add_argument("--prefix")
    emit.add_argument("--component")
    emit.add_argument("--timezone", action="store_true", help="append the zone abbreviation")

    sub.add_parser("levels", help="list levels and their streams")
    sub.add_parser("config", help="show resolved settings")
    return parser

def _cmd_emit(args: argparse.Namespace, log: Logger, settings: Settings) -> int:
    opts = settings.logger_options()
    if args.prefix:
        opts["show_prefix"] = args.prefix
    if args.component:
        opts["component"] = args.component
    if args.timezone:
        opts["timezone"] = True
    if args.level:
        opts["level"] = args.level
    out = log.fork(opts)
    getattr(out, args.method)(args.message, args.context)
    return 0

def _cmd_levels(args: argparse.Namespace, log: Logger, settings: Settings) -> int:
    table = Table(title="Log levels")
    table.add_column("Method", style="bold")
    table.add_column("Priority", justify="right")
    table.add_column("Stream")
    table.add_column("Shown", justify="center")
    for method, (priority, stream) in LEVELS.items():
        shown = "yes" if log.is_enabled_for(method) else "no"
        table.add_row(method, str(int(priority)), stream, shown)
    console.print(table)
    return 0

def _cmd_config(args: argparse.Namespace, log: Logger, settings: Settings) -> int:
    d = settings.data
    body = "\n".join([
        f"file      : {settings.path}",
        f"level     : {log.options.level.name}",
        f"timezone  : {d.timezone}",
        f"color     : {d.color}",
        f"prefix    : {d.prefix or '-'}",
        f"component : {d.component or '-'}",
    ])
    console.print(Panel(body, title="tintlog settings", border_style="bright_blue"))
    return 0

_COMMANDS = {
    "emit": _cmd_emit,
    "levels": _cmd_levels,
    "config": _cmd_config,
}

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    registry = LoggerRegistry()
    log = Logger(registry, show_prefix="tintlog")
    try:
        settings = Settings.load(args.settings, log=log)
        if not settings.data.color:
            # Styles consult the environment on every call.
            os.environ["TINTLOG_COLOR_DISABLED"] = "1"
        log.set_global_level(args.level or settings.data.level)
        return _COMMANDS[args.command](args, log, settings)
    except TintlogError as e:
        console.print(f"[red]error:[/] {escape(str(e))}")
        return 2

if __name__ == "__main__":
    sys.exit(main())
