from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass
class TaskTable:
    """
    Task names indexed by vertex id; ids are handed out densely on first sight.
    """
    names: List[str] = field(default_factory=list)
    _ids: Dict[str, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        for task_id, name in enumerate(self.names):
            self._ids.setdefault(name, task_id)

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def intern(self, name: str) -> Tuple[int, bool]:
        """Return (id, is_new)."""
        if name in self._ids:
            return self._ids[name], False
        task_id = len(self.names)
        self.names.append(name)
        self._ids[name] = task_id
        return task_id, True

    def id_of(self, name: str) -> int:
        return self._ids[name]

    def name_of(self, task_id: int) -> str:
        return self.names[task_id]


@dataclass(frozen=True)
class Schedule:
    source: str
    cyclic: bool
    steps: List[List[str]]  # each step: tasks done together

    def to_dict(self) -> dict:
        return {"file": self.source, "cyclic": self.cyclic, "steps": self.steps}
