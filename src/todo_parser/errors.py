"""Error types raised while loading and parsing todo files."""

from typing import List, Optional


class ParseError(Exception):
    """Base exception for everything that can go wrong while parsing."""
    pass


class IoFailure(ParseError):
    """The source text could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read '{path}': {reason}")


class SyntaxFailure(ParseError):
    """The input does not match the grammar.

    Position and expectation details come straight from the grammar engine
    and are kept as reported.
    """

    def __init__(self, line: int, column: int, offset: Optional[int] = None,
                 expected: List[str] = None, rules: List[str] = None,
                 context: str = ""):
        self.line = line
        self.column = column
        self.offset = offset
        self.expected = expected or []
        self.rules = rules or []
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        message = f"line {self.line}, column {self.column}"
        if self.expected:
            message += f": expected {', '.join(self.expected)}"
        if self.rules:
            message += f" (while matching {', '.join(self.rules)})"
        return message
