"""Command-line interface for resource access.

This module provides a CLI for inspecting resources held by directories and
archives without writing code.

Commands:
    list: List the resources under a logical folder
    cat: Print a resource decoded as text
    extract: Copy a resource to a temporary file and print its path

Example:
    $ resource-access list io/app --path build/resources --path lib/app.zip
    $ resource-access list io/app --path lib/app.zip --pattern '.*\\.txt'
    $ resource-access cat io/app/readme.txt --path lib/app.zip --encoding utf-8
    $ resource-access extract io/app/readme.txt --config resources.yaml
"""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from resource_access.config import load_config
from resource_access.exceptions import ResourceError
from resource_access.models import ResourceConfig
from resource_access.observability.audit import JSONLAuditSink
from resource_access.runtime.repository import ResourceRepository


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--path",
        type=Path,
        action="append",
        default=[],
        help="Directory or archive to search (can be specified multiple times, "
             "earlier entries take priority)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file (optional)",
    )
    parser.add_argument(
        "--audit-log",
        type=Path,
        help="Append audit events to this JSONL file (optional)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="resource-access",
        description="Read resources from directories and archives",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser(
        "list",
        help="List resources under a folder",
        description="Display every resource name under a logical folder",
    )
    list_parser.add_argument("folder", help="Logical folder name ('' for the root)")
    list_parser.add_argument(
        "--pattern",
        help="Only list names that fully match this regular expression",
    )
    _add_common_arguments(list_parser)

    cat_parser = subparsers.add_parser(
        "cat",
        help="Print a resource as text",
        description="Decode a resource with a text encoding and print it",
    )
    cat_parser.add_argument("name", help="Logical resource name")
    cat_parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding (default: utf-8)",
    )
    _add_common_arguments(cat_parser)

    extract_parser = subparsers.add_parser(
        "extract",
        help="Copy a resource to a temporary file",
        description="Copy a resource to a new temporary file and print its path",
    )
    extract_parser.add_argument("name", help="Logical resource name")
    _add_common_arguments(extract_parser)

    return parser


def build_repository(args: argparse.Namespace) -> ResourceRepository:
    """Create a repository from --config and --path arguments.

    --path entries are searched before any configured search path.
    """
    config = load_config(args.config) if args.config else ResourceConfig()
    config.search_path = list(args.path) + config.search_path

    audit_sink = JSONLAuditSink(args.audit_log) if args.audit_log else None
    return ResourceRepository.from_config(config, audit_sink=audit_sink)


def cmd_list(args: argparse.Namespace) -> int:
    """Execute the list command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        repo = build_repository(args)

        if args.pattern:
            names = repo.list_matching(args.folder, args.pattern)
        else:
            names = repo.list(args.folder)

        for name in names:
            print(name)

        return 0

    except ResourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_cat(args: argparse.Namespace) -> int:
    """Execute the cat command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        repo = build_repository(args)
        sys.stdout.write(repo.get_as_string(args.name, args.encoding))
        return 0

    except ResourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_extract(args: argparse.Namespace) -> int:
    """Execute the extract command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        repo = build_repository(args)
        print(repo.get_as_path(args.name))
        return 0

    except ResourceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the resource-access command is executed.
    It parses command-line arguments and dispatches to the appropriate
    command handler.
    """
    parser = create_parser()
    args = parser.parse_args()

    if args.command == "list":
        exit_code = cmd_list(args)
    elif args.command == "cat":
        exit_code = cmd_cat(args)
    elif args.command == "extract":
        exit_code = cmd_extract(args)
    else:
        parser.print_help()
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
