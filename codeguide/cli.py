"""CLI entrypoints for codeguide commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Tuple

from .config import ConfigError, SiteConfig, load_config
from .content_scanner import ContentScanner
from .export import render_generator_config, write_generator_config
from .fingerprint import fingerprint
from .logging import configure_logging, get_logger
from .models import ContentTree
from .navigation import NavigationError, resolve_navbar
from .validators import ValidationContext, run_validators

DEFAULT_SITE_PATH = "guide"

logger = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write log records to this file.",
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_SITE_PATH,
        help=f"Content root or site descriptor (defaults to {DEFAULT_SITE_PATH}).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeguide",
        description="Check and export the code guide's site configuration and content tree.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Validate navbar targets, documents, links and configured paths.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_log_file_option(check_parser, suppress_default=True)
    _add_path_argument(check_parser)
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as failures.",
    )

    routes_parser = subparsers.add_parser(
        "routes",
        help="List every document with the route it is served under.",
    )
    _add_verbose_option(routes_parser, suppress_default=True)
    _add_log_file_option(routes_parser, suppress_default=True)
    _add_path_argument(routes_parser)

    export_parser = subparsers.add_parser(
        "export",
        help="Write the site generator's config.js from the descriptor.",
    )
    _add_verbose_option(export_parser, suppress_default=True)
    _add_log_file_option(export_parser, suppress_default=True)
    _add_path_argument(export_parser)
    export_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated config.js instead of writing it.",
    )

    fingerprint_parser = subparsers.add_parser(
        "fingerprint",
        help="Print a digest of the descriptor and every document.",
    )
    _add_verbose_option(fingerprint_parser, suppress_default=True)
    _add_log_file_option(fingerprint_parser, suppress_default=True)
    _add_path_argument(fingerprint_parser)

    return parser


def _load_site(path: str) -> Tuple[SiteConfig, ContentTree]:
    config = load_config(Path(path))
    tree = ContentScanner().scan(config.root, config=config)
    return config, tree


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for codeguide commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "export":
        try:
            config = load_config(Path(args.path))
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        if not config.root.is_dir():
            parser.exit(1, f"Content root not found: {args.path}\n")
        if args.dry_run:
            sys.stdout.write(render_generator_config(config))
            return
        written = write_generator_config(config)
        print("Generator config updated" if written else "Generator config already up to date")
        return

    try:
        config, tree = _load_site(args.path)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "check":
        logger.debug("Checking %d document(s) under %s", len(tree), tree.root)
        issues = run_validators(ValidationContext(config=config, tree=tree))
        for issue in issues:
            print(issue)
        errors = sum(1 for issue in issues if issue.is_error)
        warnings = len(issues) - errors
        print(f"{len(tree)} document(s) checked: {errors} error(s), {warnings} warning(s)")
        if errors or (args.strict and warnings):
            parser.exit(1)
    elif args.command == "routes":
        for document in tree:
            sidebar = "" if document.shows_sidebar else "  (no sidebar)"
            print(f"{document.route}\t{document.path}{sidebar}")
        try:
            navbar = resolve_navbar(config, tree)
        except NavigationError as exc:
            parser.exit(1, f"{exc}\n")
        for item in navbar:
            print(f"navbar\t{item.label}\t{item.route}")
    elif args.command == "fingerprint":
        print(fingerprint(config, tree))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
