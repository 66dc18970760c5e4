from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .graph import DirectedGraph
from .models import TaskTable

logger = logging.getLogger(__name__)


class TaskFileError(ValueError):
    def __init__(self, message: str, source: str = "<input>", line: Optional[int] = None) -> None:
        where = f"{source}:{line}" if line is not None else source
        super().__init__(f"{where}: {message}")
        self.source = source
        self.line = line


def parse_lines(
    lines: Iterable[str],
    delimiter: str = "\t",
    source: str = "<input>",
) -> Tuple[DirectedGraph, TaskTable]:
    """
    Each record is: new_task<TAB>prereq1<TAB>prereq2 ...
    meaning: new_task depends on every prereq.

    Edges run prereq -> new_task, so a prerequisite always finishes (and is
    listed) before the tasks that depend on it.
    """
    graph = DirectedGraph()
    tasks = TaskTable()

    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        tokens = [t.strip() for t in line.split(delimiter)]
        # trailing delimiters leave no task behind them
        while tokens and not tokens[-1]:
            tokens.pop()
        if any(not t for t in tokens):
            raise TaskFileError("empty task name in record", source, lineno)

        ids = []
        for name in tokens:
            task_id, is_new = tasks.intern(name)
            if is_new:
                graph.add_vertex(task_id)
            ids.append(task_id)

        task_id = ids[0]
        for prereq_id in ids[1:]:
            graph.add_edge(prereq_id, task_id, 1.0)

    logger.info("Loaded %d tasks and %d dependencies from %s",
                graph.count_vertices(), graph.count_edges(), source)
    return graph, tasks


def load_tasks(
    path: Path,
    delimiter: str = "\t",
    encoding: str = "utf-8",
) -> Tuple[DirectedGraph, TaskTable]:
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise TaskFileError(f"cannot read task file ({e})", str(path)) from e
    return parse_lines(text.splitlines(), delimiter=delimiter, source=str(path))
