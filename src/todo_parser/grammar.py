"""Grammar for todo files and the engine that turns text into a parse tree.

The grammar is written in lark's EBNF dialect and parsed with Earley and the
dynamic lexer, so keyword prefixes such as ``@high`` and ``@`` followed by an
identifier are resolved by what the parser expects at each point.
Whitespace and ``//`` line comments are ignored between any two tokens.
"""

import logging
from typing import List, Optional

from lark import Lark, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput

from .errors import SyntaxFailure

logger = logging.getLogger(__name__)


TODO_GRAMMAR = r"""
    file: project+

    project: "project" quoted "{" task* "}"

    // Every task ends with a comma, including the last one in a project
    task: (todo_task | done_task) ","
    todo_task: "todo:" quoted attribute_list?
    done_task: "done:" quoted attribute_list?

    attribute_list: ("," attribute)+
    attribute: priority
             | due_date
             | assignee
             | depends_on
             | tag

    !priority: "@high" | "@medium" | "@low"
    due_date: "due:" date
    assignee: "assign:" "@" identifier
    depends_on: "depends_on:" quoted
    tag: "@tag:" quoted

    date: DATE
    identifier: IDENTIFIER
    quoted: QUOTED

    DATE: /[0-9]{4}-[0-9]{2}-[0-9]{2}/
    IDENTIFIER: /[A-Za-z0-9_-]+/
    QUOTED: /"[^"]*"/
    COMMENT: /\/\/[^\n]*/

    %import common.WS
    %ignore WS
    %ignore COMMENT
"""

# Rules that can be used as an entry point with parse_rule()
START_RULES = [
    "file",
    "project",
    "task",
    "todo_task",
    "done_task",
    "attribute_list",
    "attribute",
    "priority",
    "due_date",
    "assignee",
    "depends_on",
    "tag",
    "date",
    "identifier",
    "quoted",
]

# Friendlier names for the regex terminals in error messages
TERMINAL_DESCRIPTIONS = {
    "QUOTED": "quoted string",
    "DATE": "date (YYYY-MM-DD)",
    "IDENTIFIER": "identifier",
}

_parser: Optional[Lark] = None


def get_parser() -> Lark:
    """Return the shared lark parser, building it on first use.

    The parser keeps no state between calls, so one instance serves every
    parse.
    """
    global _parser
    if _parser is None:
        logger.debug("Building todo grammar parser")
        _parser = Lark(
            TODO_GRAMMAR,
            start=START_RULES,
            parser="earley",
            lexer="dynamic",
            propagate_positions=True,
        )
    return _parser


def parse_rule(text: str, rule: str = "file") -> Tree:
    """Parse text starting from the given grammar rule.

    Args:
        text: Source text
        rule: Name of the start rule, one of START_RULES

    Returns:
        The rule-tagged parse tree

    Raises:
        ValueError: If rule is not an entry point of the grammar
        SyntaxFailure: If the text does not match the rule
    """
    if rule not in START_RULES:
        raise ValueError(f"Unknown grammar rule: {rule}")

    parser = get_parser()
    try:
        tree = parser.parse(text, start=rule)
    except UnexpectedInput as e:
        failure = _to_syntax_failure(parser, e, text)
        logger.debug(f"Syntax error in rule '{rule}': {failure}")
        raise failure from e

    logger.debug(f"Parsed {len(text)} characters with rule '{rule}'")
    return tree


def parse_tree(text: str) -> Tree:
    """Parse a whole todo file into a tree whose root is tagged 'file'."""
    return parse_rule(text, "file")


def parse_project_tree(text: str) -> Tree:
    """Parse a single project fragment into a tree tagged 'project'."""
    return parse_rule(text, "project")


def describe_terminal(parser: Lark, name: str) -> str:
    """Turn a terminal name into something a user can read."""
    if name in TERMINAL_DESCRIPTIONS:
        return TERMINAL_DESCRIPTIONS[name]
    try:
        terminal = parser.get_terminal(name)
    except KeyError:
        return name
    if terminal.pattern.type == "str":
        return f'"{terminal.pattern.value}"'
    return name


def _to_syntax_failure(parser: Lark, error: UnexpectedInput, text: str) -> SyntaxFailure:
    """Translate a lark error into a SyntaxFailure."""
    if isinstance(error, UnexpectedCharacters):
        expected_names = error.allowed or set()
    else:
        expected_names = getattr(error, "expected", None) or []
    expected = sorted({describe_terminal(parser, name) for name in expected_names})

    rules: List[str] = []
    for item in getattr(error, "considered_rules", None) or []:
        name = str(item.rule.origin.name)
        # Helper rules generated by lark for repetitions start with '_'
        if not name.startswith("_") and name not in rules:
            rules.append(name)

    if isinstance(error, UnexpectedEOF):
        # Lark does not report a position when the input simply runs out
        line = text.count("\n") + 1
        column = len(text) - (text.rfind("\n") + 1) + 1
        return SyntaxFailure(line, column, offset=len(text), expected=expected,
                             rules=sorted(rules), context="")

    return SyntaxFailure(
        error.line,
        error.column,
        offset=error.pos_in_stream,
        expected=expected,
        rules=sorted(rules),
        context=error.get_context(text),
    )
