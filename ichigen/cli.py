# File: ichigen/cli.py
"""
ichigen - Command-Line Interface
================================

Usage examples::

    # One component
    ichigen g controller product --domain=catalog

    # Whole stack, with CRUD operations
    ichigen g full product --domain=catalog --crud

    # Generate into another project root
    ichigen generate f order_item --domain=sales -C ../shop-api

Exit codes:
    0 — success
    1 — input error (missing domain/name, unknown type or command, bad config)
    2 — generation error (template, directory or file failure)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence

from ichigen.errors import GenerationError, InputError
from ichigen.models import ComponentKind, ComponentType, GenerationSpec

# ---------------------------------------------------------------------------
# Logger (configured in _setup_logging)
# ---------------------------------------------------------------------------
logger: logging.Logger = logging.getLogger("ichigen")


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_SUCCESS: int = 0
EXIT_INPUT_ERROR: int = 1
EXIT_GENERATION_ERROR: int = 2


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(verbosity: int) -> None:
    """
    Configure the ichigen logger.

    Args:
        verbosity: -1 = silent, 0 = WARNING, 1 = INFO, 2+ = DEBUG.
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity >= 1:
        level = logging.INFO
    elif verbosity == 0:
        level = logging.WARNING
    else:
        level = logging.CRITICAL + 1

    handler: logging.StreamHandler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root_logger: logging.Logger = logging.getLogger("ichigen")
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.propagate = False


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

_TYPES_HELP: str = """\
Types:
  controller, c     Generate HTTP controller
  service, s        Generate service layer
  repository, r     Generate repository (alias: repo)
  validator, v      Generate validator
  dto, d            Generate DTOs
  full, f           Generate complete stack
"""

_EXAMPLES: str = """\
Examples:
  ichigen g controller product --domain=catalog
  ichigen g full product --domain=catalog --crud
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors (unknown command, missing argument) as input errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_INPUT_ERROR, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    from ichigen import __version__

    parser: argparse.ArgumentParser = _ArgumentParser(
        prog="ichigen",
        description="Go schematic generator for layered applications.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_TYPES_HELP + "\n" + _EXAMPLES,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"ichigen v{__version__}",
    )

    commands = parser.add_subparsers(dest="command", metavar="<command>")

    generate = commands.add_parser(
        "generate",
        aliases=["g"],
        help="Generate one component or the full stack.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_TYPES_HELP + "\n" + _EXAMPLES,
    )
    generate.add_argument("type", metavar="<type>", help="Component type or alias.")
    generate.add_argument("name", metavar="<name>", help="Entity name, e.g. order_item.")
    generate.add_argument(
        "--domain",
        default="",
        metavar="DOMAIN",
        help="Domain/module name (required).",
    )
    generate.add_argument(
        "--crud",
        action="store_true",
        default=False,
        help="Generate CRUD operations.",
    )

    output_group = generate.add_argument_group("output")
    output_group.add_argument(
        "-C", "--output-root",
        default=None,
        metavar="DIR",
        help="Project root to generate into (default: from config, else '.').",
    )
    output_group.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="Settings file (default: ./.ichigen.yaml if present).",
    )

    verbosity_group = generate.add_argument_group("verbosity")
    verbosity_group.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v for INFO, -vv for DEBUG).",
    )
    verbosity_group.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Suppress log output.",
    )

    commands.add_parser("help", help="Show this help message.")
    return parser


# ---------------------------------------------------------------------------
# Generate command
# ---------------------------------------------------------------------------


def _print_created(kind: ComponentKind, path: Path) -> None:
    print(f"  Created: {path}")


def _run_generate(args: argparse.Namespace) -> int:
    """
    Run one generation request.

    Returns the appropriate exit code.
    """
    from ichigen.config import apply_overrides, load_settings, resolve_module_path
    from ichigen.generator import ScaffoldGenerator
    from ichigen.templates import TemplateBundle, TemplateRenderer

    try:
        spec = GenerationSpec.from_request(args.type, args.name, args.domain, args.crud)
        settings = apply_overrides(load_settings(args.config), output_root=args.output_root)
        module_path = resolve_module_path(settings)
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    logger.info("Output root: %s", settings.output_root)
    logger.info("Module path: %s", module_path)

    try:
        bundle = TemplateBundle.from_directory(settings.templates_dir)
        generator = ScaffoldGenerator(
            TemplateRenderer(bundle),
            output_root=settings.output_root,
            module_path=module_path,
            on_file_written=_print_created,
        )
        report = generator.generate(spec)
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except GenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_GENERATION_ERROR

    if spec.component_type is ComponentType.FULL:
        print(report.summary())
    print(f"✓ Generated {args.type}: {args.name} in domain {args.domain}")
    return EXIT_SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def cli_main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """
    Main CLI entry point.

    Args:
        argv: Optional argument list (defaults to sys.argv[1:]).
    """
    parser: argparse.ArgumentParser = _build_parser()
    args: argparse.Namespace = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(EXIT_INPUT_ERROR)

    if args.command == "help":
        parser.print_help()
        sys.exit(EXIT_SUCCESS)

    _setup_logging(-1 if args.quiet else args.verbose)

    sys.exit(_run_generate(args))


def main() -> NoReturn:
    """Console-script entry point."""
    cli_main()


__all__: List[str] = [
    "cli_main",
    "main",
    "EXIT_SUCCESS",
    "EXIT_INPUT_ERROR",
    "EXIT_GENERATION_ERROR",
]
