"""Task data model produced by the todo file parser."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from .utils.dates import parse_iso_date, today


class Priority(Enum):
    """Task priority levels."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskStatus(Enum):
    """Task status states."""
    TODO = "todo"
    DONE = "done"


@dataclass(frozen=True)
class Task:
    """A single work item inside a project."""

    status: TaskStatus
    title: str

    # Singular attributes: the last occurrence in the source wins
    priority: Optional[Priority] = None
    due_date: Optional[str] = None  # YYYY-MM-DD, kept verbatim
    assignee: Optional[str] = None  # without the leading '@'
    depends_on: Optional[str] = None  # title of another task, not checked

    # Accumulates across every @tag occurrence
    tags: List[str] = field(default_factory=list)

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.DONE

    @property
    def is_active(self) -> bool:
        return self.status == TaskStatus.TODO

    def due(self) -> Optional[date]:
        """Return the due date as a date, or None if absent or not a real day."""
        return parse_iso_date(self.due_date)

    def is_overdue(self, on: Optional[date] = None) -> bool:
        """Check if the task is still open past its due date."""
        due = self.due()
        if due is None or self.is_done:
            return False
        return due < (on or today())

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Task to a plain dictionary."""
        return {
            "status": self.status.value,
            "title": self.title,
            "priority": self.priority.value if self.priority else None,
            "due_date": self.due_date,
            "assignee": self.assignee,
            "depends_on": self.depends_on,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Create a Task from a dictionary."""
        priority = data.get("priority")
        return cls(
            status=TaskStatus(data.get("status", "todo")),
            title=data.get("title", ""),
            priority=Priority(priority) if priority else None,
            due_date=data.get("due_date"),
            assignee=data.get("assignee"),
            depends_on=data.get("depends_on"),
            tags=list(data.get("tags", [])),
        )
