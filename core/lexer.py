"""
Command lexer for splitting a raw command line into tokens.
"""
from dataclasses import dataclass
from typing import List


@dataclass
class Token:
    """Represents a single token of a command line."""
    value: str
    char_start: int
    char_end: int

    def __str__(self):
        return self.value


class CommandLexer:
    """Tokenizes one command line.

    The line is trimmed and split on single spaces. Consecutive spaces are not
    collapsed, so they yield empty tokens which still count as arguments.
    """

    SEPARATOR = ' '

    def tokenize(self, line: str) -> List[Token]:
        """Tokenize a command line. Always returns at least one token."""
        stripped = line.strip()
        offset = len(line) - len(line.lstrip())

        tokens = []
        pos = 0
        for part in stripped.split(self.SEPARATOR):
            start = offset + pos
            tokens.append(Token(part, start, start + len(part)))
            pos += len(part) + len(self.SEPARATOR)

        return tokens

    def split_verb(self, tokens: List[Token]):
        """Return the lowercase verb and the argument tokens."""
        return tokens[0].value.lower(), tokens[1:]
