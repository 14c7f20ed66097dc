"""Terminal rendering of parsed projects and raw parse trees."""

from datetime import date
from typing import List, Optional

from lark import Token, Tree
from rich.console import Console
from rich.markup import escape

from .config import ConfigModel
from .project import Project
from .task import Priority, Task, TaskStatus

STATUS_EMOJI = {
    TaskStatus.TODO: "⏳",
    TaskStatus.DONE: "✅",
}

STATUS_BOXES = {
    TaskStatus.TODO: "[ ]",
    TaskStatus.DONE: "[x]",
}

PRIORITY_COLORS = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "dim",
}


def format_summary(project: Project) -> str:
    """Summary line with total, active and completed counts."""
    return (f"Total: {project.total_tasks} | Active: {project.active_tasks} | "
            f"Completed: {project.completed_tasks}")


def format_task_lines(task: Task, config: Optional[ConfigModel] = None,
                      on: Optional[date] = None) -> List[str]:
    """Format a task as rich markup: the task line, then dependency and tag lines."""
    config = config or ConfigModel()

    marker = STATUS_EMOJI[task.status] if config.use_emoji else escape(STATUS_BOXES[task.status])
    title = escape(task.title)
    parts = [marker, f"[strike]{title}[/strike]" if task.is_done else f"[bold]{title}[/bold]"]

    if task.priority:
        color = PRIORITY_COLORS[task.priority]
        parts.append(f"[{color}]({task.priority.value})[/{color}]")

    if task.due_date:
        color = "red" if task.is_overdue(on) else "blue"
        parts.append(f"[{color}]due {task.due_date}[/{color}]")

    if task.assignee:
        parts.append(f"[green]@{escape(task.assignee)}[/green]")

    lines = [" ".join(parts)]
    if task.depends_on:
        lines.append(f"    [magenta]depends on: {escape(task.depends_on)}[/magenta]")
    for tag in task.tags:
        lines.append(f"    [cyan]#{escape(tag)}[/cyan]")
    return lines


def render_project(project: Project, console: Console,
                   config: Optional[ConfigModel] = None) -> None:
    """Print a project, its tasks and the summary line."""
    config = config or ConfigModel()

    console.print(f"[bold underline]Project: {escape(project.name)}[/bold underline]")
    if not project.tasks:
        console.print("  [dim]No tasks.[/dim]")
    for task in project.tasks:
        for line in format_task_lines(task, config):
            console.print(f"  {line}")

    if config.show_summary:
        console.print(f"[dim]{format_summary(project)}[/dim]")


def format_tree(tree: Tree, indent: int = 2) -> List[str]:
    """Render a parse tree as lines, one rule per line, indented by depth.

    Rules whose children are all tokens are shown with their matched text.
    """
    lines: List[str] = []

    def visit(node: Tree, depth: int) -> None:
        pad = " " * (indent * depth)
        if node.children and all(isinstance(child, Token) for child in node.children):
            text = " ".join(str(child) for child in node.children)
            lines.append(f"{pad}{node.data}: {text}")
            return
        lines.append(f"{pad}{node.data}")
        for child in node.children:
            if isinstance(child, Tree):
                visit(child, depth + 1)
            else:
                lines.append(f"{pad}{' ' * indent}{child.type}: {child}")

    visit(tree, 0)
    return lines


def dump_tree(tree: Tree, console: Console, indent: int = 2) -> None:
    """Print a parse tree for debugging."""
    for line in format_tree(tree, indent):
        console.print(line, markup=False, highlight=False)
