"""ConfigRepl: interactive shell over a JSON config file.

Also provides the ``jsonconfig-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import IO

from .config import JsonConfig
from .errors import JsonConfigError
from .logging_config import configure_logging, get_log_level_from_flags
from .model import JArray, JObject, Node, from_builtin, to_builtin

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# ConfigRepl class (programmatic use)
# ---------------------------------------------------------------------------

class ConfigRepl:
    """Stateful shell around one JsonConfig.

    Usage::

        repl = ConfigRepl(JsonConfig("data.json"))
        repl.set("server.ports[0]", "8080")
        repl.get("server.ports")   # → JArray([JNumber(8080)])
        repl.config.save()
    """

    def __init__(self, config: JsonConfig) -> None:
        self.config = config
        self.active_batches: set[Path] = set()  # ?<< files being executed

    def get(self, path: str) -> Node:
        return self.config.get(path)

    def set(self, path: str, raw: str) -> None:
        """Parse *raw* as a JSON value and store it at *path*."""
        try:
            value = from_builtin(json.loads(raw))
        except ValueError as exc:
            raise ValueError(f"Not a JSON value: {raw!r}") from exc
        self.config.set(path, value)


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inline(node: Node) -> str:
    """Format a node as compact one-line JSON."""
    return json.dumps(to_builtin(node), ensure_ascii=False)


def _fmt_inspect(node: Node) -> str:
    """Pretty-print a node for inspect() / i()."""
    if isinstance(node, (JObject, JArray)) and len(node) == 0:
        return _fmt_inline(node)
    return json.dumps(to_builtin(node), ensure_ascii=False, indent=2)


def _show_keys(repl: ConfigRepl, dest: IO[str]) -> None:
    """Print the top-level keys with a one-line preview of each value."""
    entries = repl.config.root.entries
    if not entries:
        print("  (document is empty)", file=dest)
        return
    width = max(len(k) for k in entries)
    for key, value in entries.items():
        print(f"  {key:<{width}} : {_fmt_inline(value)}", file=dest)


def _run_batch(repl: ConfigRepl, filepath: str, dest: IO[str]) -> None:
    """Run every line of *filepath*; a file already being run is refused."""
    key = Path(filepath).resolve()
    if key in repl.active_batches:
        print(f"Error: '{filepath}' is already being executed", file=sys.stderr)
        return
    repl.active_batches.add(key)
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                _process_line(repl, file_line.rstrip("\n"), dest)
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
    finally:
        repl.active_batches.discard(key)


def _process_line(repl: ConfigRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    try:
        # ── Control commands ──────────────────────────────────────────────
        if line == ":keys":
            _show_keys(repl, dest)
            return True

        if line == ":show":
            print(_fmt_inspect(repl.config.root), file=dest)
            return True

        if line == ":save":
            repl.config.save()
            print(f"  saved {repl.config.file}", file=dest)
            return True

        if line == ":reload":
            repl.config.reload()
            return True

        # ── inspect() / i() ───────────────────────────────────────────────
        for prefix in ("inspect(", "i("):
            if line.startswith(prefix) and line.endswith(")"):
                path = line[len(prefix):-1].strip()
                print(_fmt_inspect(repl.get(path)), file=dest)
                return True

        # ── Batch file ────────────────────────────────────────────────────
        if line.startswith("?<< "):
            _run_batch(repl, line[4:].strip(), dest)
            return True

        # ── get / set ─────────────────────────────────────────────────────
        command, _, rest = line.partition(" ")
        if command == "get" and rest.strip():
            print(_fmt_inline(repl.get(rest.strip())), file=dest)
            return True

        if command == "set":
            path, _, raw = rest.strip().partition(" ")
            if path and raw.strip():
                repl.set(path, raw.strip())
                return True

        print(f"Unknown command: {line}", file=sys.stderr)
    except (JsonConfigError, ValueError, OSError) as exc:
        logger.debug("Command %r failed", line, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonconfig-repl",
        description="Inspect and edit a JSON file with dotted/indexed paths.",
    )
    parser.add_argument("file", type=Path, help="JSON file (created if missing)")
    parser.add_argument("-q", "--quiet", action="store_true", help="only log errors")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress")
    parser.add_argument("-d", "--debug", action="store_true", help="log everything")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Interactive shell (``jsonconfig-repl FILE`` / ``python -m jsonconfig.repl``)."""
    args = _build_parser().parse_args(argv)
    configure_logging(get_log_level_from_flags(args.quiet, args.verbose, args.debug))

    try:
        repl = ConfigRepl(JsonConfig(args.file))
    except (JsonConfigError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("JSON config REPL  (:q to quit  |  :keys  :show  :save  :reload  |  get <path>  set <path> <json>)")

    while True:
        try:
            line = input("json> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not _process_line(repl, line, sys.stdout):
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
