"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from utilbox import __version__
from utilbox.config import load_config


def setup_logging(config: dict[str, Any], verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the utilbox logger: level from --verbose/--quiet or config, console handler,
    optional file handler from config.
    """
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    root = logging.getLogger("utilbox")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError:
                root.warning("Could not open log file %s", log_file)


def _add_context_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--package", "-p", help="Package to resolve resources against (default: utilbox).")
    group.add_argument("--dir", "-d", dest="directory", type=Path, help="Directory to resolve resources against.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="utilbox",
        description="Read package resources and properties from the command line.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, help="Config file overriding ~/.utilbox/config.json.")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # read
    p_read = subparsers.add_parser("read", help="Print a text resource.")
    p_read.add_argument("name", help="Resource name (e.g. data/words.txt or /pkg/data/words.txt).")
    _add_context_args(p_read)
    p_read.add_argument("--lines", action="store_true", help="Print the resource line by line, numbered.")
    p_read.add_argument("--encoding", "-e", help="Text encoding (default: from config, utf-8).")
    p_read.set_defaults(run="read")

    # properties
    p_props = subparsers.add_parser("properties", help="Print the key=value pairs of a .properties resource.")
    p_props.add_argument("name", help="Resource name.")
    _add_context_args(p_props)
    p_props.set_defaults(run="properties")

    # list
    p_list = subparsers.add_parser("list", help="List resource names.")
    p_list.add_argument("patterns", nargs="*", help="Gitignore-style patterns to filter names (default: all).")
    _add_context_args(p_list)
    p_list.set_defaults(run="list")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    setup_logging(
        config,
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )
    args.config_data = config

    if getattr(args, "directory", None) is not None:
        args.directory = args.directory.resolve()

    run = getattr(args, "run", None)
    if run == "read":
        from utilbox.commands.read_cmd import run as cmd_run
    elif run == "properties":
        from utilbox.commands.properties_cmd import run as cmd_run
    elif run == "list":
        from utilbox.commands.list_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)


if __name__ == "__main__":
    main()
