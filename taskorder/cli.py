from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import default_delimiter, default_log_level, unescape_delimiter
from .loader import TaskFileError, load_tasks
from .models import Schedule
from .ordering import contains_cycle, resolve

logger = logging.getLogger(__name__)


def _delimiter_from_args(ns: argparse.Namespace) -> str:
    if getattr(ns, "delimiter", None):
        return unescape_delimiter(ns.delimiter)
    return default_delimiter()


def _build_schedule(ns: argparse.Namespace) -> Schedule:
    graph, tasks = load_tasks(Path(ns.file).expanduser(), delimiter=_delimiter_from_args(ns))
    result = resolve(graph)
    steps = [[tasks.name_of(v) for v in group] for group in result.groups]
    return Schedule(source=ns.file, cyclic=result.cyclic, steps=steps)


def _print_schedule(schedule: Schedule) -> None:
    if schedule.cyclic:
        print(f'The file "{schedule.source}" contains mutually dependent tasks. You must:')
    else:
        print(f'The file "{schedule.source}" contains no mutually dependent tasks. You must:')
    for i, step in enumerate(schedule.steps, start=1):
        print(f"\t{i}. {', '.join(step)}")


def cmd_order(ns: argparse.Namespace) -> int:
    schedule = _build_schedule(ns)
    _print_schedule(schedule)
    return 0


def cmd_check(ns: argparse.Namespace) -> int:
    graph, _ = load_tasks(Path(ns.file).expanduser(), delimiter=_delimiter_from_args(ns))
    if contains_cycle(graph):
        print(f'The file "{ns.file}" contains mutually dependent tasks.')
        return 1
    print(f'The file "{ns.file}" contains no mutually dependent tasks.')
    return 0


def cmd_export(ns: argparse.Namespace) -> int:
    schedule = _build_schedule(ns)
    out = Path(ns.out).expanduser().resolve()
    out.write_text(json.dumps(schedule.to_dict(), indent=2), encoding="utf-8")
    print(f"Exported to: {out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="taskorder",
        description="TaskOrder: order tasks by their prerequisites, grouping mutually dependent ones.",
    )
    p.add_argument(
        "--delimiter",
        help="Field separator in task files (default: tab or TASKORDER_DELIMITER env var)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("order", help="Print an order in which the tasks can be done.")
    s.add_argument("file", help="Task file: one task per line, followed by its prerequisites.")
    s.set_defaults(func=cmd_order)

    s = sub.add_parser("check", help="Report whether any tasks are mutually dependent.")
    s.add_argument("file", help="Task file.")
    s.set_defaults(func=cmd_check)

    s = sub.add_parser("export", help="Write the task order to JSON.")
    s.add_argument("file", help="Task file.")
    s.add_argument("--out", required=True, help="Output JSON file path.")
    s.set_defaults(func=cmd_export)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else default_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(ns.func(ns))
    except TaskFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
