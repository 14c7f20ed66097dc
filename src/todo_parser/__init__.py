"""Todo Parser - parse project and task descriptions written in the todo language."""

__version__ = "1.0.0"
__author__ = "Todo Parser Team"

from .domain import (
    Task,
    TaskStatus,
    Priority,
    Project,
)
from .errors import ParseError, IoFailure, SyntaxFailure
from .parser import TodoParser, parse, parse_from_source, parse_project

__all__ = [
    "Task",
    "TaskStatus",
    "Priority",
    "Project",
    "ParseError",
    "IoFailure",
    "SyntaxFailure",
    "TodoParser",
    "parse",
    "parse_from_source",
    "parse_project",
    "__version__",
]
