"""
CLI Module

Architectural Intent:
- Command-line interface for cronfleet
- Entry point for all user interactions
- Delegates to application use cases via composition root
- Supports --verbose/--debug flags for log level control
"""

import argparse
import logging
import sys
import traceback
from dataclasses import replace
from cronfleet.infrastructure.config import CronfleetConfig, load_config
from cronfleet.infrastructure.logging import configure_logging

_TASKS = {
    "update": ("update_crontab", "Updating crontab", "Crontab updated"),
    "clear": ("clear_crontab", "Clearing crontab", "Crontab cleared"),
    "rollback": ("rollback_crontab", "Rolling back crontab", "Crontab rolled back"),
}


def _parse_role_map(values: list[str]) -> dict[str, tuple[str, ...]]:
    role_map: dict[str, tuple[str, ...]] = {}
    for value in values:
        role, sep, hosts = value.partition("=")
        if not sep or not role:
            raise ValueError(f"Expected ROLE=HOST[,HOST...], got {value!r}")
        parsed = tuple(h.strip() for h in hosts.split(",") if h.strip())
        role_map[role] = role_map.get(role, ()) + parsed
    return role_map


def apply_overrides(config: CronfleetConfig, args: argparse.Namespace) -> CronfleetConfig:
    if args.role:
        config = replace(config, roles=_parse_role_map(args.role))
    if args.roles is not None:
        roles = tuple(r.strip() for r in args.roles.split(",") if r.strip())
        config = replace(config, crontab=replace(config.crontab, roles=roles))
    return config


def log_level(config: CronfleetConfig, args: argparse.Namespace) -> int:
    """--debug and --verbose win over the configured log_level."""
    if args.debug:
        return logging.DEBUG
    if args.verbose:
        return logging.INFO
    level = logging.getLevelName(config.log_level.upper())
    return level if isinstance(level, int) else logging.WARNING


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="cronfleet: deliver whenever-managed crontabs to deploy targets by role"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit structured JSON log lines"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="Path to config file (default: cronfleet.json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in (
        ("update", "Install the crontab on every host holding a crontab role"),
        ("clear", "Remove the crontab from every host holding a crontab role"),
        ("rollback", "Restore the previous release's crontab, or clear it"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--role",
            "-r",
            action="append",
            default=[],
            metavar="ROLE=HOST[,HOST]",
            help="Declare role membership (repeatable, replaces the config role map)",
        )
        sub.add_argument(
            "--roles", default=None, help="Comma-separated roles to deliver to"
        )
        if name != "rollback":
            sub.add_argument("--path", "-p", default=None, help="Release path to run in")

    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)

    configure_logging(level=log_level(config, args), json_format=args.json_logs)

    verbose = args.verbose or args.debug

    if args.command not in _TASKS:
        parser.print_help()
        return

    from cronfleet.composition_root import create_container

    attr, doing, done = _TASKS[args.command]
    try:
        config = apply_overrides(config, args)
        use_case = getattr(create_container(config), attr)
    except ValueError as e:
        print(f"[-] Invalid configuration: {e}")
        sys.exit(1)

    # rollback takes its path from the release history
    kwargs = {"path": args.path} if hasattr(args, "path") else {}

    print(f"[*] {doing} for roles {', '.join(config.crontab.roles) or 'all'}...")
    try:
        success = use_case.execute(**kwargs)
    except Exception as e:
        print(f"[-] {doing} failed: {e}")
        if verbose:
            traceback.print_exc()
        sys.exit(1)

    if success:
        print(f"[+] {done}.")
    else:
        print(f"[-] {doing} failed.")
        sys.exit(1)


if __name__ == "__main__":
    main()
