"""CLI entrypoints for dcgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .errors import DcgenError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .render import ReportRenderer


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


def _add_workspace_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-w",
        "--workspace",
        default=".",
        help="Workspace root path (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dcgen",
        description="Generate and patch devcontainer.json files from plain-text requests.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a devcontainer.json from a description of the environment.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_workspace_option(generate_parser)
    generate_parser.add_argument("prompt", help="Description of the development environment.")
    generate_parser.add_argument(
        "-t",
        "--template",
        default=None,
        help="Base template to use instead of automatic selection.",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview the configuration without writing it.",
    )

    modify_parser = subparsers.add_parser(
        "modify",
        help="Patch the existing devcontainer.json from a change request.",
    )
    _add_verbose_option(modify_parser, suppress_default=True)
    _add_workspace_option(modify_parser)
    modify_parser.add_argument("request", help="Description of the changes to apply.")
    modify_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview the patch without writing it.",
    )

    templates_parser = subparsers.add_parser(
        "templates",
        help="List available templates.",
    )
    _add_verbose_option(templates_parser, suppress_default=True)
    _add_workspace_option(templates_parser)
    templates_parser.add_argument("-c", "--category", default=None, help="Filter by category.")

    status_parser = subparsers.add_parser(
        "status",
        help="Show what the workspace devcontainer.json configures.",
    )
    _add_verbose_option(status_parser, suppress_default=True)
    _add_workspace_option(status_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for dcgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()
    renderer = ReportRenderer()

    if args.command == "generate":
        try:
            result = orchestrator.run_generate(
                args.prompt,
                args.workspace,
                template=args.template,
                dry_run=bool(args.dry_run),
            )
        except (DcgenError, ConfigError) as exc:
            parser.exit(1, f"{exc}\n")
        except Exception as exc:  # pragma: no cover - defensive guard
            parser.exit(1, f"dcgen generate failed: {exc}\nRun with --verbose for more details.\n")
        sys.stdout.write(renderer.generation(result, display_path=_relativize(result.path)))
    elif args.command == "modify":
        try:
            result = orchestrator.run_modify(
                args.request,
                args.workspace,
                dry_run=bool(args.dry_run),
            )
        except (DcgenError, ConfigError) as exc:
            parser.exit(1, f"{exc}\n")
        except Exception as exc:  # pragma: no cover - defensive guard
            parser.exit(1, f"dcgen modify failed: {exc}\nRun with --verbose for more details.\n")
        sys.stdout.write(renderer.generation(result, display_path=_relativize(result.path)))
    elif args.command == "templates":
        try:
            templates, categories = orchestrator.list_templates(
                args.workspace, category=args.category
            )
        except (DcgenError, ConfigError) as exc:
            parser.exit(1, f"{exc}\n")
        sys.stdout.write(renderer.templates(templates, categories, category=args.category))
    elif args.command == "status":
        status = orchestrator.run_status(args.workspace)
        sys.stdout.write(renderer.status(status, display_path=_relativize(status.config_path)))
        if not status.config_exists or status.error:
            raise SystemExit(1)
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
