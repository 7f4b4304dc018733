"""Example gallery CLI.

Lists the built-in ThiingsGrid examples or prints one example's source
verbatim, either human-readable or as JSON (via `--json`).

Exit codes:
 - 0: success
 - 2: unknown example name

Example:
  python -m cli.examples list
  python -m cli.examples show EmojiFun --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from gallery.catalog import get_registry
from gallery.registry import ExampleNotFoundError, ExampleRegistry

_log = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable text")
    p = argparse.ArgumentParser(description="Browse the ThiingsGrid example gallery")
    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("list", parents=[common], help="List example names with their index")
    show = sub.add_parser("show", parents=[common], help="Print the source of one example")
    show.add_argument("name", help="Example name (e.g. ColorfulGrid)")
    return p.parse_args(argv)


def _list(registry: ExampleRegistry, as_json: bool) -> int:
    if as_json:
        payload = [{"index": i, "name": name} for i, (name, _src) in enumerate(registry.all())]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0
    print(f"Examples ({registry.count()}):")
    for i, (name, _src) in enumerate(registry.all()):
        print(f"  {i}: {name}")
    return 0


def _show(registry: ExampleRegistry, name: str, as_json: bool) -> int:
    try:
        index = registry.index_of_name(name)
    except ExampleNotFoundError as exc:
        _log.debug("show failed: %s", exc)
        print(f"{exc}. Available: {', '.join(registry.names())}", file=sys.stderr)
        return 2
    source = registry.source_at(index)
    if as_json:
        print(json.dumps({"index": index, "name": name, "source": source}, ensure_ascii=False, indent=2))
    else:
        print(source)
    return 0


def main(argv: list[str] | None = None, registry: ExampleRegistry | None = None) -> int:
    args = parse_args(argv)
    registry = registry if registry is not None else get_registry()
    if args.command == "list":
        return _list(registry, args.json)
    return _show(registry, args.name, args.json)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
