# Copyright 2026 FinApp Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the FinApp command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from finapp.compiler.artifact import write_debug_dump
from finapp.compiler.build import CompileResult, DocumentLoadError, compile_file
from finapp.compiler.reconciler import DocumentParseError, ReconcileStrategy
from finapp.model.entities import Application
from finapp.parser.lexer import LexerError
from finapp.validation.checks import ValidationResult, validate
from finapp.workspace.config import ProjectConfig, ProjectConfigError, find_project_config, load_project_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the FinApp CLI."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", help="FinApp DSL source file")
    common.add_argument(
        "--strategy",
        choices=[s.value for s in ReconcileStrategy],
        default=None,
        help="How grammar and direct-text results are combined (default: from config, else 'extracted')",
    )
    common.add_argument(
        "--config",
        default=None,
        help="Project configuration file (default: .finapp.yaml next to the source file)",
    )
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(
        prog="finapp",
        description="FinApp - finance application description compiler",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    subparsers.add_parser(
        "check",
        parents=[common],
        help="Check a FinApp file for syntax and validation errors",
        description="Parse, reconcile and validate a FinApp DSL file.",
    )

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        parents=[common],
        help="Generate application code",
        description="Generate web, iOS and Android sources from a valid FinApp file.",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output directory (default: 'output-directory' from config, else 'generated')",
    )
    generate_parser.add_argument(
        "-p",
        "--platforms",
        default=None,
        help="Comma-separated platforms to generate, e.g. 'web,ios' (default: from config, else 'web')",
    )

    # docs subcommand
    docs_parser = subparsers.add_parser(
        "docs",
        parents=[common],
        help="Generate Markdown documentation",
        description="Write a Markdown description of models, screens, navigation and API.",
    )
    docs_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output directory (default: 'output-directory' from config, else 'generated')",
    )

    # dump subcommand
    dump_parser = subparsers.add_parser(
        "dump",
        parents=[common],
        help="Write a debug JSON dump of the application",
        description="Serialize the reconciled application to JSON for debugging.",
    )
    dump_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file (default: 'debug-dump' from config, else <file>.json)",
    )

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        parents=[common],
        help="Launch the interactive application viewer",
        description="Launch a web-based UI for browsing the compiled application.",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8050,
        help="Port to run the server on (default: 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_PIPELINE_ERRORS = (ProjectConfigError, DocumentLoadError, DocumentParseError, LexerError)


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "docs":
        return _cmd_docs(args)
    if args.command == "dump":
        return _cmd_dump(args)
    if args.command == "serve":
        return _cmd_serve(args)
    return 0


def _load_config(args: argparse.Namespace) -> tuple[ProjectConfig, Path]:
    """Return the project configuration and the directory its relative paths refer to."""
    source = Path(args.file).resolve()
    config_path = Path(args.config).resolve() if args.config else find_project_config(source)
    if config_path is None:
        return ProjectConfig(), source.parent
    return load_project_config(config_path), config_path.parent


def _compile(args: argparse.Namespace, config: ProjectConfig) -> CompileResult:
    strategy = ReconcileStrategy(args.strategy) if args.strategy else config.strategy
    result = compile_file(Path(args.file), strategy=strategy)
    for diagnostic in result.syntax_errors:
        print(f"Syntax error: {diagnostic}", file=sys.stderr)
    return result


def _report(validation: ValidationResult) -> None:
    for warning in validation.warnings:
        print(f"Warning: {warning.message}")
    for error in validation.errors:
        print(f"Error: {error.message}", file=sys.stderr)


def _print_details(app: Application, verbose: bool) -> None:
    """Print the application details, plus a structure summary when *verbose* is set."""
    print("Application details:")
    print(f"  Name: {app.display_name}")
    print(f"  ID: {app.app_id}")
    print(f"  Version: {app.version}")
    print(f"  Platforms: {', '.join(p.value for p in app.platforms)}")
    if not verbose:
        return

    endpoints = app.api.endpoints if app.api is not None else []
    print("Structure summary:")
    print(f"  Models: {len(app.models)}")
    for model in app.models:
        print(f"    - {model.name} ({len(model.properties)} properties)")
    print(f"  Screens: {len(app.screens)}")
    for screen in app.screens:
        print(f"    - {screen.name}{' (initial)' if screen.is_initial else ''}")
    print(f"  API endpoints: {len(endpoints)}")
    for endpoint in endpoints:
        print(f"    - {endpoint.method} {endpoint.path}")
    if app.navigation is not None:
        print(f"  Navigation: {app.navigation.type.value} ({len(app.navigation.items)} items)")
    else:
        print("  Navigation: none")
    print(f"  Mock data: {'yes' if app.mock_data is not None else 'no'}")


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    print(f"Checking '{args.file}'...")
    try:
        config, base = _load_config(args)
        result = _compile(args, config)
    except _PIPELINE_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    validation = validate(result.application)
    _report(validation)

    if config.debug_dump:
        target = base / config.debug_dump
        try:
            write_debug_dump(result.application, target)
        except OSError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"Debug dump written to '{target}'.")

    if validation.has_errors:
        return 1

    _print_details(result.application, args.verbose)

    warning_count = len(validation.warnings) + len(result.syntax_errors)
    if warning_count and config.fail_on_warnings:
        print(f"Error: {warning_count} warning(s) found and 'fail-on-warnings' is enabled.", file=sys.stderr)
        return 1
    if warning_count:
        print(f"Validation passed with {warning_count} warning(s).")
    else:
        print("No issues found.")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    from finapp.emitters import EmitterError, emit, write_outputs

    try:
        config, base = _load_config(args)
        result = _compile(args, config)
    except _PIPELINE_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    validation = validate(result.application)
    _report(validation)
    if validation.has_errors:
        print("Error: validation failed; no code generated.", file=sys.stderr)
        return 1

    if args.platforms:
        platforms = [p.strip() for p in args.platforms.split(",") if p.strip()]
    else:
        platforms = [p.value for p in config.platforms]
    output = Path(args.output) if args.output else base / config.output_directory

    for platform in platforms:
        try:
            files = emit(result.application, platform)
        except EmitterError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        target = output / platform
        try:
            write_outputs(files, target)
        except OSError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"Generated {len(files)} {platform} file(s) in '{target}'.")
    return 0


def _cmd_docs(args: argparse.Namespace) -> int:
    """Handle the docs subcommand."""
    from finapp.docs.markdown import write_markdown

    try:
        config, base = _load_config(args)
        result = _compile(args, config)
    except _PIPELINE_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    output = Path(args.output) if args.output else base / config.output_directory
    try:
        target = write_markdown(result.application, output)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Documentation generated: '{target}'.")
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    """Handle the dump subcommand."""
    try:
        config, base = _load_config(args)
        result = _compile(args, config)
    except _PIPELINE_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        target = Path(args.output)
    elif config.debug_dump:
        target = base / config.debug_dump
    else:
        target = Path(args.file).with_suffix(".json")
    try:
        write_debug_dump(result.application, target)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Debug dump written to '{target}'.")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve subcommand."""
    try:
        config, _ = _load_config(args)
        result = _compile(args, config)
    except _PIPELINE_ERRORS as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    from finapp.webui.app import create_app

    print(f"Serving application view at http://{args.host}:{args.port}/")
    app = create_app(application=result.application)
    app.run(host=args.host, port=args.port, debug=False)
    return 0
