"""CLI entry point: ``vagueparse resolve`` and ``vagueparse serve``."""

from __future__ import annotations

import os

# Step 1: quiet unless LOG_LEVEL asks otherwise, before litellm loads
from vagueparse.logging_config import setup_logging

setup_logging(os.environ.get("LOG_LEVEL") or "WARNING")

import argparse  # noqa: E402
import asyncio  # noqa: E402
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

from pydantic import ValidationError  # noqa: E402

from vagueparse import __version__  # noqa: E402
from vagueparse.config import Settings  # noqa: E402
from vagueparse.constants import FALLBACK_INTERPRETATION  # noqa: E402
from vagueparse.logging_config import (  # noqa: E402
    cleanup_third_party_handlers,
)
from vagueparse.resilience.errors import (  # noqa: E402
    EmptyInputError,
    EngineFailure,
)
from vagueparse.resolution.engine import VagueIntentResolver  # noqa: E402
from vagueparse.resolution.schemas import (  # noqa: E402
    AIPersonality,
    Preferences,
    ProjectContext,
    ResolutionResult,
)

# Step 2: drop litellm's duplicate handlers after all imports
cleanup_third_party_handlers()


def main() -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args()

    if args.version:
        print(f"vagueparse {__version__}")
        return

    if args.command == "resolve":
        _run_resolve(args)
    elif args.command == "serve":
        _run_serve(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="vagueparse",
        description=(
            "Turns vague programming requests into ranked, "
            "explainable interpretations."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    resolve = sub.add_parser(
        "resolve",
        help="Interpret a single request",
    )
    resolve.add_argument(
        "text",
        type=str,
        help='The request, e.g. "make the thing work"',
    )
    resolve.add_argument(
        "--context",
        "-c",
        default=None,
        help="Path to a project context JSON file",
    )
    resolve.add_argument(
        "--sass",
        type=int,
        default=None,
        help="Sass level 1-10 for the AI prompt",
    )
    resolve.add_argument(
        "--verbosity",
        default=None,
        help="Verbosity hint for the AI prompt (default: detailed)",
    )
    resolve.add_argument(
        "--no-ai",
        action="store_true",
        help="Use the rule table only",
    )
    resolve.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )

    serve = sub.add_parser(
        "serve",
        help="Start the HTTP API",
    )
    serve.add_argument(
        "--host",
        default="127.0.0.1",
        help="Bind address (default: 127.0.0.1)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=8003,
        help="Port (default: 8003)",
    )

    return parser


def _load_context(path: str | None) -> ProjectContext | None:
    if path is None:
        return None
    context_path = Path(path)
    if not context_path.exists():
        print(f"Error: {context_path} does not exist", file=sys.stderr)
        sys.exit(1)
    try:
        return ProjectContext.model_validate_json(
            context_path.read_text(encoding="utf-8")
        )
    except ValidationError as exc:
        print(f"Error: invalid context file: {exc}", file=sys.stderr)
        sys.exit(1)


def _build_preferences(args: argparse.Namespace) -> Preferences | None:
    if args.sass is None and args.verbosity is None:
        return None
    personality: dict[str, object] = {}
    if args.sass is not None:
        personality["sass_level"] = args.sass
    if args.verbosity is not None:
        personality["verbosity"] = args.verbosity
    try:
        return Preferences(
            ai_personality=AIPersonality.model_validate(personality)
        )
    except ValidationError:
        print("Error: --sass must be between 1 and 10", file=sys.stderr)
        sys.exit(1)


def _run_resolve(args: argparse.Namespace) -> None:
    """Execute the resolve command."""
    context = _load_context(args.context)
    preferences = _build_preferences(args)

    settings = Settings()
    if args.no_ai:
        settings = settings.model_copy(update={"ai_enabled": False})
    resolver = VagueIntentResolver(settings)

    try:
        result = asyncio.run(
            resolver.resolve(args.text, context, preferences)
        )
    except EmptyInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except EngineFailure:
        print(FALLBACK_INTERPRETATION, file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(result.model_dump_json(by_alias=True, indent=2))
    else:
        print(_format_result(result))


def _format_result(result: ResolutionResult) -> str:
    """Human-readable summary of a resolution."""
    lines = [
        f"Interpretation: {result.interpretation}",
        f"Action:         {result.specific_action}",
        f"Confidence:     {result.confidence:.2f}",
        f"AI:             {result.ai_status}",
    ]
    if result.suggested_actions:
        lines.append("Suggested actions:")
        lines.extend(f"  - {a}" for a in result.suggested_actions)
    if result.assumptions:
        lines.append("Assumptions:")
        lines.extend(f"  - {a}" for a in result.assumptions)
    if result.alternative_interpretations:
        lines.append("Alternatives:")
        lines.extend(
            f"  - {c.description} ({c.final_score:.2f}, {c.source})"
            for c in result.alternative_interpretations
        )
    if result.needs_more_info:
        lines.append("Need more info:")
        lines.extend(f"  ? {q}" for q in result.clarifying_questions)
    return "\n".join(lines)


def _run_serve(args: argparse.Namespace) -> None:
    """Start the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "vagueparse.main:app",
        host=args.host,
        port=args.port,
    )


if __name__ == "__main__":
    main()
