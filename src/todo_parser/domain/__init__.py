"""Domain models for todo-parser."""

from ..task import Task, TaskStatus, Priority
from ..project import Project

__all__ = [
    "Task",
    "TaskStatus",
    "Priority",
    "Project",
]
