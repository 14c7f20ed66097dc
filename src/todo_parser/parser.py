"""Entry points for parsing todo files into projects."""

import logging
from pathlib import Path
from typing import List, Union

from lark import Tree

from .builder import AstBuilder
from .errors import IoFailure
from .grammar import parse_project_tree, parse_tree
from .project import Project

logger = logging.getLogger(__name__)


class TodoParser:
    """Parses todo source text into Project objects."""

    def __init__(self, builder: AstBuilder = None):
        self.builder = builder or AstBuilder()

    def parse(self, text: str) -> List[Project]:
        """Parse a whole todo file.

        Raises:
            SyntaxFailure: At the first point where the text stops matching
        """
        projects = self.builder.build_projects(parse_tree(text))
        logger.debug(f"Parsed {len(projects)} project(s), "
                     f"{sum(p.total_tasks for p in projects)} task(s)")
        return projects

    def parse_project(self, text: str) -> Project:
        """Parse a single project fragment."""
        return self.builder.build_project(parse_project_tree(text))

    def parse_tree(self, text: str) -> Tree:
        """Return the raw parse tree for a whole file, without building objects."""
        return parse_tree(text)

    def read_source(self, path: Union[str, Path], encoding: str = "utf-8") -> str:
        """Read source text from disk.

        Raises:
            IoFailure: If the file is missing, unreadable or not valid text
        """
        try:
            text = Path(path).read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to read {path}: {e}")
            raise IoFailure(str(path), str(e)) from e
        logger.info(f"Loaded {len(text)} characters from {path}")
        return text

    def parse_from_source(self, path: Union[str, Path], encoding: str = "utf-8") -> List[Project]:
        """Read a file and parse it."""
        return self.parse(self.read_source(path, encoding))


def parse(text: str) -> List[Project]:
    """Parse todo source text into a list of projects."""
    return TodoParser().parse(text)


def parse_from_source(path: Union[str, Path], encoding: str = "utf-8") -> List[Project]:
    """Load a todo file and parse it; read errors surface as IoFailure."""
    return TodoParser().parse_from_source(path, encoding)


def parse_project(text: str) -> Project:
    """Parse a single project fragment such as ``project "X" { ... }``."""
    return TodoParser().parse_project(text)
