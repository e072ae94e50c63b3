"""CLI entrypoint for Skillbook."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skillbook import __version__
from skillbook.cli.handlers import (
    handle_install,
    handle_list,
    handle_resolve,
    handle_show,
    handle_validate_config,
)
from skillbook.constants.branding import CLI_DESCRIPTION
from skillbook.constants.checks import VALID_SEVERITIES
from skillbook.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from skillbook.exceptions import ConfigError, SkillbookError
from skillbook.exceptions.validation import format_errors
from skillbook.linter import evaluate_exit_code, lint_workspace
from skillbook.reporting import StdoutReporter
from skillbook.validation import preflight_validate


def _add_workspace_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Workspace root path (default: .)")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillbook",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="List skills with their descriptions")
    _add_workspace_args(list_cmd)
    list_cmd.add_argument("--category", default=None, help="Only list skills in this category")
    list_cmd.add_argument("--json", action="store_true", help="Print the listing as JSON")

    show = subparsers.add_parser("show", help="Print one skill's metadata and body")
    _add_workspace_args(show)
    show.add_argument("name", help="Skill name or directory name")
    show.add_argument("--body-only", action="store_true", help="Print only the body after the frontmatter")

    lint = subparsers.add_parser("lint", help="Run structural checks on skill documents")
    _add_workspace_args(lint)
    lint.add_argument("skills", nargs="*", help="Skill names to lint (default: all)")
    lint.add_argument("--category", default=None, help="Only lint skills in this category")
    lint.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for summary files (no files written if omitted)",
    )
    lint.add_argument(
        "--output-format",
        default=DEFAULT_OUTPUT_FORMAT,
        help="Comma-separated output formats: json, markdown (default: json)",
    )
    lint.add_argument(
        "--fail-on",
        choices=sorted(VALID_SEVERITIES),
        default=None,
        help="Lowest failing severity that makes the run fail (default from config: error)",
    )
    lint.add_argument("--failures-only", action="store_true", help="Only print skills that fail")
    lint.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    lint.add_argument("--no-color", action="store_true", help="Disable colored output")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without linting")
    _add_workspace_args(validate)

    resolve = subparsers.add_parser("resolve", help="Print the skills the given agents need")
    _add_workspace_args(resolve)
    resolve.add_argument("agents", nargs="*", help="Agent names")
    resolve.add_argument("--all", action="store_true", help="Resolve skills for every agent")

    install = subparsers.add_parser("install", help="Copy the skills the given agents need into a target")
    _add_workspace_args(install)
    install.add_argument("agents", nargs="*", help="Agent names")
    install.add_argument("--all", action="store_true", help="Install skills for every agent")
    install.add_argument("-t", "--target", type=Path, required=True, help="Target project directory")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    handlers = {
        "list": handle_list,
        "show": handle_show,
        "validate-config": handle_validate_config,
        "resolve": handle_resolve,
        "install": handle_install,
    }
    if args.command in handlers:
        return handlers[args.command](args)

    if args.command != "lint":
        parser.error(f"Unsupported command: {args.command}")
    return _handle_lint(args)


def _handle_lint(args: argparse.Namespace) -> int:
    """Run ``skillbook lint`` and map the outcome to an exit code."""
    raw_tokens = args.output_format.split(",")
    output_formats = tuple(fmt for fmt in (t.strip() for t in raw_tokens) if fmt)
    if not output_formats or len(output_formats) != len(raw_tokens):
        print(
            "Configuration error: --output-format contains empty or malformed tokens",
            file=sys.stderr,
        )
        return 2
    invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        print(
            f"Configuration error: unknown output format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}",
            file=sys.stderr,
        )
        return 2

    validation_errors = preflight_validate(root=args.root, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        result = lint_workspace(
            root=args.root,
            config_path=args.config,
            skills=tuple(args.skills) or None,
            category=args.category,
            out=args.output_dir,
            output_formats=output_formats,
            fail_on=args.fail_on,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkillbookError as exc:
        print(f"Lint error: {exc}", file=sys.stderr)
        return 1

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(
            result,
            color=use_color,
            verbose=args.verbose,
            failures_only=args.failures_only,
        )
        print(reporter.render())

    return evaluate_exit_code(result)


if __name__ == "__main__":
    raise SystemExit(main())
