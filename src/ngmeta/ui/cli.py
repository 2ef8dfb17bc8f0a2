# ruff: noqa: T201

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from dataclasses import fields
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from ngmeta.config import (
    ConfigurationError,
    ResolverConfig,
    configure_logging,
    get_resolver_config,
)
from ngmeta.domain import DirectiveResolver, ResolutionError
from ngmeta.domain.model import QueryDescriptor

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from ngmeta.domain.model import DirectiveMetadata, QueryTarget

log = logging.getLogger(__name__)

DEFAULT_INDENT = 2


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect directive metadata")
    parser.add_argument(
        "--indent",
        type=int,
        default=DEFAULT_INDENT,
        help="JSON indentation (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Print the merged metadata of a class")
    resolve.add_argument("target", help="Class to resolve, as module:QualName")
    resolve.add_argument(
        "--keep-duplicates",
        action="store_true",
        help="Do not de-duplicate inputs/outputs/attrs by property name",
    )

    requires = subparsers.add_parser(
        "requires", help="Print the directive lookup expressions of a class constructor"
    )
    requires.add_argument("target", help="Class to inspect, as module:QualName")
    return parser.parse_args(list(argv))


def _load_class(target: str) -> type[object]:
    module_name, separator, qualname = target.partition(":")
    if not separator or not module_name or not qualname:
        raise ValueError(f"Invalid target {target!r}; expected module:QualName")
    obj: object = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        raise ValueError(f"Target {target!r} is not a class")
    return obj


def _render_target(target: QueryTarget) -> str:
    if isinstance(target, str):
        return target
    return f"{target.__module__}.{target.__qualname__}"


def _render_query(query: QueryDescriptor) -> dict[str, str]:
    return {"kind": str(query.kind), "target": _render_target(query.target)}


def _json_default(value: object) -> object:
    if isinstance(value, QueryDescriptor):
        return _render_query(value)
    if isinstance(value, type):
        return _render_target(value)
    return repr(value)


def render_metadata(metadata: DirectiveMetadata) -> dict[str, Any]:
    """Return a JSON-ready view of resolved metadata."""

    rendered: dict[str, Any] = {
        "kind": "component" if metadata.is_component else "directive",
    }
    for field_info in fields(metadata):
        rendered[field_info.name] = getattr(metadata, field_info.name)
    rendered["queries"] = {name: _render_query(query) for name, query in metadata.queries.items()}
    for name in ("inputs", "outputs", "attrs"):
        rendered[name] = list(rendered[name])
    return rendered


def _dump(value: object, *, indent: int) -> str:
    return json.dumps(value, indent=indent if indent > 0 else None, default=_json_default)


def _resolver_config(args: argparse.Namespace) -> ResolverConfig:
    if args.command == "resolve" and args.keep_duplicates:
        return ResolverConfig(dedupe_bindings=False)
    return get_resolver_config()


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        configure_logging()
        parsed_args = _parse_args(args_list)
        resolver = DirectiveResolver(config=_resolver_config(parsed_args))
        type_ = _load_class(parsed_args.target)
    except (ValueError, ImportError, AttributeError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "resolve":
            output = render_metadata(resolver.resolve(type_))
        elif parsed_args.command == "requires":
            output = resolver.get_required_directives_map(type_)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (ResolutionError, ValueError):
        log.exception("Resolution failed for %s", parsed_args.target)
        sys.exit(1)

    print(_dump(output, indent=parsed_args.indent))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Abort an inspection on Ctrl+C without a traceback."""
    log.info("Inspection interrupted")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
