"""Project data model produced by the todo file parser."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .task import Task, TaskStatus


@dataclass(frozen=True)
class Project:
    """A named collection of tasks, in source order."""

    name: str
    tasks: List[Task] = field(default_factory=list)

    @property
    def total_tasks(self) -> int:
        return len(self.tasks)

    @property
    def active_tasks(self) -> int:
        return sum(1 for task in self.tasks if task.is_active)

    @property
    def completed_tasks(self) -> int:
        return sum(1 for task in self.tasks if task.is_done)

    def tasks_with_status(self, status: TaskStatus) -> List[Task]:
        """Return the tasks in the given status, keeping source order."""
        return [task for task in self.tasks if task.status == status]

    def to_dict(self) -> Dict[str, Any]:
        """Convert project to dictionary for serialization."""
        return {
            "name": self.name,
            "tasks": [task.to_dict() for task in self.tasks],
            "stats": {
                "total_tasks": self.total_tasks,
                "active_tasks": self.active_tasks,
                "completed_tasks": self.completed_tasks,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        """Create project from dictionary."""
        return cls(
            name=data.get("name", ""),
            tasks=[Task.from_dict(item) for item in data.get("tasks", [])],
        )
