"""Command line utilities for inspecting Bazaar branches."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Iterable, Tuple

from .bzr.branch import Branch
from .config import BzrConfig
from .errors import BzrError


def _resolve_config(args: argparse.Namespace) -> BzrConfig:
    config = BzrConfig()
    if args.base_dir is not None:
        config.base_dir = args.base_dir
    if args.bzr is not None:
        config.executable = args.bzr
    if args.timeout is not None:
        config.timeout = args.timeout
    return config


def _resolve_target(config: BzrConfig, target: str) -> Path:
    """Map a registered branch name to its path; anything else is a path."""
    branches = config.load_branches()
    if target in branches:
        return Path(branches[target])
    return Path(target)


def _parse_revision(value: str) -> Tuple[int, int]:
    start, sep, stop = value.partition("..")
    try:
        return int(start or 1), int(stop) if sep and stop else -1
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"invalid revision range {value!r}, expected START..END"
        ) from e


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid count {value!r}") from e
    if number < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative, got {number}")
    return number


def _open_branch(args: argparse.Namespace) -> Branch | None:
    config = _resolve_config(args)
    path = _resolve_target(config, args.target)
    try:
        return Branch(path, config=config)
    except BzrError as e:
        print(f"Error: {e}")
        return None


def _show_info(args: argparse.Namespace) -> None:
    branch = _open_branch(args)
    if branch is None:
        return

    info = branch.info
    if args.json:
        print(json.dumps(info.to_dict(), indent=2))
        return

    print(f"Branch: {branch.path}")
    print(f"  Nick        : {info.branch_nick}")
    print(f"  Revision    : {info.revno}")
    print(f"  Revision id : {info.revision_id}")
    print(f"  Date        : {info.date}")


def _show_log(args: argparse.Namespace) -> None:
    branch = _open_branch(args)
    if branch is None:
        return

    try:
        if args.revision is None and not args.reverse:
            log = branch.log
        else:
            start, stop = args.revision or (1, -1)
            log = branch.fetch_log(forward=not args.reverse, start=start, stop=stop)
    except BzrError as e:
        print(f"Error: {e}")
        return

    commits = log.last(args.last) if args.last is not None else list(log.each_entry())

    if args.json:
        print(json.dumps([commit.to_dict() for commit in commits], indent=2))
        return

    for commit in commits:
        print(f"{commit.revno or '?':>6}  {commit.timestamp or '-'}  {commit.committer or '-'}")
        if commit.message:
            print(f"        {commit.message}")
        if commit.merged:
            print(f"        merged: {commit.merged}")
    if log.skipped:
        print(f"Warning: skipped {log.skipped} unreadable log entries")


def _branch_add(args: argparse.Namespace) -> None:
    config = _resolve_config(args)
    branch_path = args.path.resolve()
    if not branch_path.exists():
        print(f"Error: Path does not exist: {branch_path}")
        return

    branches = config.load_branches()
    if args.name in branches:
        print(f"Error: Branch '{args.name}' already registered")
        return

    try:
        branch = Branch(branch_path, config=config)
    except BzrError as e:
        print(f"Error: {e}")
        return

    branches[args.name] = str(branch_path)
    config.save_branches(branches)
    print(f"Added branch '{args.name}'")
    print(f"  Path: {branch_path}")
    print(f"  Nick: {branch.info.branch_nick}")


def _branch_list(args: argparse.Namespace) -> None:
    config = _resolve_config(args)
    branches = config.load_branches()
    if not branches:
        print("No branches registered.")
        return

    print(f"Registered branches ({len(branches)}):")
    for name, path in sorted(branches.items()):
        print(f"  {name}: {path}")


def _branch_remove(args: argparse.Namespace) -> None:
    config = _resolve_config(args)
    branches = config.load_branches()
    if branches.pop(args.name, None) is None:
        print(f"Error: Branch '{args.name}' not found")
        return
    config.save_branches(branches)
    print(f"Removed branch '{args.name}'")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--base-dir",
        type=Path,
        help="Directory holding the branch registry (defaults to ~/.bzrmeta)",
    )
    parser.add_argument("--bzr", help="bzr executable to run (defaults to 'bzr')")
    parser.add_argument("--timeout", type=float, help="Seconds allowed per bzr command")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    info_parser = subparsers.add_parser("info", help="Show version info of a branch")
    info_parser.add_argument("target", help="Registered branch name or branch path")
    info_parser.add_argument("--json", action="store_true", help="Print JSON")
    info_parser.set_defaults(func=_show_info)

    log_parser = subparsers.add_parser("log", help="Show the commits of a branch")
    log_parser.add_argument("target", help="Registered branch name or branch path")
    log_parser.add_argument(
        "--reverse",
        action="store_true",
        help="List newest commits first",
    )
    log_parser.add_argument(
        "-r",
        "--revision",
        type=_parse_revision,
        help="Revision range START..END (END -1 means latest)",
    )
    log_parser.add_argument(
        "--last", type=_non_negative_int, help="Only show the last N commits"
    )
    log_parser.add_argument("--json", action="store_true", help="Print JSON")
    log_parser.set_defaults(func=_show_log)

    branch_parser = subparsers.add_parser("branch", help="Manage registered branches")
    branch_sub = branch_parser.add_subparsers(dest="branch_command", required=True)

    # branch add
    add_parser = branch_sub.add_parser("add", help="Register a branch under a name")
    add_parser.add_argument("path", type=Path, help="Path to bzr branch")
    add_parser.add_argument("--name", required=True, help="Unique name for the branch")
    add_parser.set_defaults(func=_branch_add)

    # branch list
    list_parser = branch_sub.add_parser("list", help="List registered branches")
    list_parser.set_defaults(func=_branch_list)

    # branch remove
    remove_parser = branch_sub.add_parser("remove", help="Forget a registered branch")
    remove_parser.add_argument("name", help="Branch name to remove")
    remove_parser.set_defaults(func=_branch_remove)

    return parser


def main(argv: Iterable[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    args.func(args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
