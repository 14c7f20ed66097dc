"""Builds Project and Task objects from the grammar's parse tree."""

import logging
from typing import Any, Dict, List, Optional

from lark import Token, Tree

from .project import Project
from .task import Priority, Task, TaskStatus

logger = logging.getLogger(__name__)

PRIORITY_KEYWORDS = {
    "@high": Priority.HIGH,
    "@medium": Priority.MEDIUM,
    "@low": Priority.LOW,
}

TASK_INTRODUCERS = {
    "todo_task": TaskStatus.TODO,
    "done_task": TaskStatus.DONE,
}


def strip_quotes(raw: str) -> str:
    """Drop the delimiting quotes of a quoted token; escapes are left alone."""
    return raw[1:-1]


def _subtrees(node: Tree, rule: str) -> List[Tree]:
    return [child for child in node.children
            if isinstance(child, Tree) and child.data == rule]


def _first_subtree(node: Tree, rule: str) -> Optional[Tree]:
    for child in node.children:
        if isinstance(child, Tree) and child.data == rule:
            return child
    return None


def _token_text(node: Tree) -> str:
    """Text of the single token under a leaf rule such as quoted or date."""
    for child in node.children:
        if isinstance(child, Token):
            return str(child)
    return ""


class AstBuilder:
    """Walks a rule-tagged parse tree and builds the domain objects.

    The grammar guarantees that every required piece is present, so nothing
    here raises on a tree the parser accepted.
    """

    def build_projects(self, tree: Tree) -> List[Project]:
        """Build every project under a file root, or the one project given."""
        if tree.data == "project":
            return [self.build_project(tree)]
        projects = [self.build_project(node) for node in _subtrees(tree, "project")]
        logger.debug(f"Built {len(projects)} project(s)")
        return projects

    def build_project(self, node: Tree) -> Project:
        name = strip_quotes(_token_text(_first_subtree(node, "quoted")))
        tasks = [self.build_task(child) for child in _subtrees(node, "task")]
        return Project(name=name, tasks=tasks)

    def build_task(self, node: Tree) -> Task:
        """Build a task from a 'task' node or directly from its introducer."""
        introducer = node
        if node.data == "task":
            introducer = next(child for child in node.children
                              if isinstance(child, Tree) and child.data in TASK_INTRODUCERS)
        status = TASK_INTRODUCERS[introducer.data]
        return Task(status=status, **self._task_details(introducer))

    def _task_details(self, node: Tree) -> Dict[str, Any]:
        details: Dict[str, Any] = {
            "title": strip_quotes(_token_text(_first_subtree(node, "quoted"))),
            "tags": [],
        }
        attribute_list = _first_subtree(node, "attribute_list")
        if attribute_list is not None:
            self._apply_attributes(attribute_list, details)
        return details

    def _apply_attributes(self, attribute_list: Tree, details: Dict[str, Any]) -> None:
        for attribute in _subtrees(attribute_list, "attribute"):
            kind = attribute.children[0]
            if kind.data == "priority":
                details["priority"] = PRIORITY_KEYWORDS.get(_token_text(kind))
            elif kind.data == "due_date":
                details["due_date"] = _token_text(_first_subtree(kind, "date"))
            elif kind.data == "assignee":
                details["assignee"] = _token_text(_first_subtree(kind, "identifier"))
            elif kind.data == "depends_on":
                details["depends_on"] = strip_quotes(_token_text(_first_subtree(kind, "quoted")))
            elif kind.data == "tag":
                for quoted in kind.iter_subtrees_topdown():
                    if quoted.data == "quoted":
                        details["tags"].append(strip_quotes(_token_text(quoted)))


def build_projects(tree: Tree) -> List[Project]:
    """Build projects from a parse tree rooted at 'file' or 'project'."""
    return AstBuilder().build_projects(tree)
