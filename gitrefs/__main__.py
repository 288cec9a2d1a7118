#!/usr/bin/env python3
"""CLI entry point for gitrefs.

Usage:
    python -m gitrefs [--repo PATH] <command> [options]

Commands:
    resolve         Print the commit ID of a full refspec
    exists          Check whether a ref, branch or tag exists
    refs            List references
    branches        List branch short names
    tags            List tag short names
    symbolic-ref    Read or update a symbolic ref
    create-branch   Create a branch at a base revision
    delete-branch   Delete a branch
    diff-branches   Summarize files changed between two branches
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from gitrefs.commands import (
    cmd_branches,
    cmd_create_branch,
    cmd_delete_branch,
    cmd_diff_branches,
    cmd_exists,
    cmd_refs,
    cmd_resolve,
    cmd_symbolic_ref,
    cmd_tags,
)
from gitrefs.commands.refs import EXISTS_KINDS
from gitrefs.config import GitConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitrefs",
        description="Resolve git references and summarize branch diffs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gitrefs resolve refs/heads/main
  gitrefs exists branch feature-x
  gitrefs refs --heads --tags
  gitrefs create-branch hotfix refs/tags/v1.0.0
  gitrefs delete-branch --force hotfix
  gitrefs --repo ../other diff-branches main feature-x --format text
        """,
    )
    parser.add_argument(
        "--repo",
        default=".",
        help="Path to the git repository (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML config file",
    )
    parser.add_argument(
        "--git",
        dest="git_binary",
        help="git executable to run (default: git)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Timeout in seconds for each git command (default: 60)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Echo git commands and failures to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # resolve command
    parser_resolve = subparsers.add_parser(
        "resolve",
        help="Print the commit ID of a full refspec",
    )
    parser_resolve.add_argument("ref", help="Full refspec, e.g. refs/heads/main")

    # exists command
    parser_exists = subparsers.add_parser(
        "exists",
        help="Check whether a ref, branch or tag exists (exit 0 if so)",
    )
    parser_exists.add_argument("kind", choices=EXISTS_KINDS, help="What name refers to")
    parser_exists.add_argument("name", help="Full refspec for 'ref', short name otherwise")

    # refs command
    parser_refs = subparsers.add_parser(
        "refs",
        help="List references",
    )
    parser_refs.add_argument("--heads", action="store_true", help="Include branches")
    parser_refs.add_argument("--tags", action="store_true", help="Include tags")
    parser_refs.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)",
    )
    parser_refs.add_argument("patterns", nargs="*", help="Patterns refs must match")

    subparsers.add_parser("branches", help="List branch short names")
    subparsers.add_parser("tags", help="List tag short names")

    # symbolic-ref command
    parser_symbolic = subparsers.add_parser(
        "symbolic-ref",
        help="Read or update a symbolic ref",
    )
    parser_symbolic.add_argument(
        "--name",
        default="HEAD",
        help="Symbolic ref name (default: HEAD)",
    )
    parser_symbolic.add_argument(
        "ref",
        nargs="?",
        help="Point the symbolic ref at this refspec instead of reading it",
    )

    # create-branch command
    parser_create = subparsers.add_parser(
        "create-branch",
        help="Create a branch at a base revision",
    )
    parser_create.add_argument("name", help="Branch short name")
    parser_create.add_argument("base", help="Revision the branch will point at")

    # delete-branch command
    parser_delete = subparsers.add_parser(
        "delete-branch",
        help="Delete a branch",
    )
    parser_delete.add_argument("name", help="Branch short name")
    parser_delete.add_argument(
        "--force",
        action="store_true",
        help="Delete even if the branch is not fully merged",
    )

    # diff-branches command
    parser_diff = subparsers.add_parser(
        "diff-branches",
        help="Summarize files changed between two branches",
    )
    parser_diff.add_argument("source", help="Source branch")
    parser_diff.add_argument("target", help="Target branch")
    parser_diff.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = GitConfig.load(
            config_file=args.config,
            git_binary=args.git_binary,
            timeout=args.timeout,
            verbose=args.verbose,
        )
    except (OSError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    repo = args.repo

    # Route to command implementations with explicit parameters
    if args.command == "resolve":
        return cmd_resolve(args.ref, repo, config)

    elif args.command == "exists":
        return cmd_exists(args.kind, args.name, repo, config)

    elif args.command == "refs":
        return cmd_refs(
            repo,
            config,
            heads=args.heads,
            tags=args.tags,
            patterns=args.patterns,
            output_format=args.format,
        )

    elif args.command == "branches":
        return cmd_branches(repo, config)

    elif args.command == "tags":
        return cmd_tags(repo, config)

    elif args.command == "symbolic-ref":
        return cmd_symbolic_ref(repo, config, name=args.name, ref=args.ref)

    elif args.command == "create-branch":
        return cmd_create_branch(args.name, args.base, repo, config)

    elif args.command == "delete-branch":
        return cmd_delete_branch(args.name, repo, config, force=args.force)

    elif args.command == "diff-branches":
        return cmd_diff_branches(
            args.source, args.target, repo, config, output_format=args.format
        )

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
