"""Command-line entrypoint for bundle and create-rsp."""

from __future__ import annotations

import argparse
import shlex
import sys
from pathlib import Path
from typing import TextIO

from codefuse import __version__
from codefuse.bundler import INVALID_INPUT, OUTPUT_DIR_NOT_FOUND, BundleError, run_bundle
from codefuse.config import AppConfig, CliOverrides, load_effective_config
from codefuse.logging import JsonlAuditLogger, RunEvent, sanitize_options, utc_timestamp
from codefuse.request import (
    RESPONSE_FILE_NAME,
    parse_bool,
    prompt_for_options,
    write_response_file,
)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_INVALID_OUTPUT_PATH = 3


class _ArgumentParser(argparse.ArgumentParser):
    """Parser whose @file lines are split like a shell command line."""

    def convert_arg_line_to_args(self, arg_line: str) -> list[str]:
        return shlex.split(arg_line)


def _bool_flag(value: str) -> bool:
    try:
        return parse_bool(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


def _add_bundle_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output", "-o", type=Path, default=None, help="file path and name")
    parser.add_argument(
        "--language",
        "-l",
        default=None,
        help="comma-separated language tags, or 'all'",
    )
    parser.add_argument(
        "--note",
        "-n",
        nargs="?",
        const=True,
        default=None,
        type=_bool_flag,
        help="Whether to include source code comments in the bundle file",
    )
    parser.add_argument("--author", "-a", default=None, help="Name of the creator of the file")
    parser.add_argument(
        "--remove-empty-lines",
        "-r",
        nargs="?",
        const=True,
        default=None,
        type=_bool_flag,
        help="Remove empty lines from the source code",
    )
    parser.add_argument("--sort", "-s", default=None, help="Sort order (name/type)")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser with the bundle and create-rsp subcommands."""
    parser = _ArgumentParser(
        prog="codefuse",
        description="Bundle code files to a single file",
        fromfile_prefix_chars="@",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--root", default=".", help="directory to scan (default: cwd)")
    parser.add_argument("--audit-log", default=None, help="append a JSONL record of each run")
    subparsers = parser.add_subparsers(dest="command", required=True)
    bundle = subparsers.add_parser("bundle", help="Bundle code files to a single file")
    _add_bundle_options(bundle)
    create_rsp = subparsers.add_parser(
        "create-rsp", help="Create a response file with a ready command"
    )
    _add_bundle_options(create_rsp)
    return parser


def _overrides_from_args(args: argparse.Namespace) -> CliOverrides:
    return CliOverrides(
        output=args.output,
        language=args.language,
        note=args.note,
        author=args.author,
        remove_empty_lines=args.remove_empty_lines,
        sort=args.sort,
        audit_log=Path(args.audit_log) if args.audit_log is not None else None,
    )


def _log_run(
    audit: JsonlAuditLogger | None,
    out_stream: TextIO,
    command: str,
    ok: bool,
    error_code: str | None,
    metadata: dict[str, object],
) -> bool:
    """Append a run event; an unwritable log is reported and returns False."""
    if audit is None:
        return True
    event = RunEvent(
        timestamp=utc_timestamp(),
        command=command,
        ok=ok,
        error_code=error_code,
        metadata=metadata,
    )
    try:
        audit.append(event)
    except OSError as error:
        out_stream.write(f"Error: {error}\n")
        return False
    return True


def bundle_command(
    config: AppConfig, *, out_stream: TextIO, audit: JsonlAuditLogger | None = None
) -> int:
    """Run the bundle pipeline and print a status line."""
    outcome = run_bundle(config.defaults, root=config.root, selection=config.selection)
    metadata = sanitize_options(config.defaults)
    result = outcome.result
    if outcome.error is not None or result is None:
        error = outcome.error or BundleError(code=INVALID_INPUT, message="the input not valid!")
        out_stream.write(f"Error: {error.message}\n")
        _log_run(audit, out_stream, "bundle", False, error.code, metadata)
        if error.code == OUTPUT_DIR_NOT_FOUND:
            return EXIT_INVALID_OUTPUT_PATH
        return EXIT_INVALID_INPUT
    metadata["files_written"] = result.files_written
    metadata["lines_written"] = result.lines_written
    out_stream.write(f"Files bundled and saved at: {result.output_path}\n")
    if not _log_run(audit, out_stream, "bundle", True, None, metadata):
        return EXIT_INVALID_INPUT
    return EXIT_OK


def create_rsp_command(
    config: AppConfig,
    *,
    in_stream: TextIO,
    out_stream: TextIO,
    audit: JsonlAuditLogger | None = None,
) -> int:
    """Prompt for options and write the response file."""
    try:
        options = prompt_for_options(config.defaults, in_stream=in_stream, out_stream=out_stream)
        write_response_file(config.root, options)
    except (OSError, ValueError) as error:
        out_stream.write(f"Error: {error}\n")
        defaults = sanitize_options(config.defaults)
        _log_run(audit, out_stream, "create-rsp", False, INVALID_INPUT, defaults)
        return EXIT_INVALID_INPUT
    out_stream.write(f"Response file created successfully: {RESPONSE_FILE_NAME}\n")
    if not _log_run(audit, out_stream, "create-rsp", True, None, sanitize_options(options)):
        return EXIT_INVALID_INPUT
    return EXIT_OK


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Entrypoint for the codefuse command."""
    in_stream = stdin if stdin is not None else sys.stdin
    out_stream = stdout if stdout is not None else sys.stdout
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    try:
        config = load_effective_config(Path(args.root), _overrides_from_args(args))
    except (OSError, ValueError) as error:
        out_stream.write(f"Error: {error}\n")
        return EXIT_INVALID_INPUT
    audit: JsonlAuditLogger | None = None
    if config.audit_log is not None:
        try:
            audit = JsonlAuditLogger(config.audit_log)
        except OSError as error:
            out_stream.write(f"Error: {error}\n")
            return EXIT_INVALID_INPUT
    if args.command == "bundle":
        return bundle_command(config, out_stream=out_stream, audit=audit)
    return create_rsp_command(config, in_stream=in_stream, out_stream=out_stream, audit=audit)


if __name__ == "__main__":
    raise SystemExit(main())
