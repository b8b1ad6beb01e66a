"""
Command parser: resolves the verb and validates arguments against the grammar.
"""
from dataclasses import dataclass, field
from typing import List, Tuple, Any

from core.grammar import CommandSpec, Param, ArgType, CONVERTERS, PEN_COLORS, lookup
from core.lexer import CommandLexer, Token
from utils.errors import UnknownCommandError, InvalidArgumentsError


@dataclass
class Command:
    """A validated command: the verb, its raw arguments and their typed values."""
    verb: str
    arguments: Tuple[str, ...]
    values: Tuple[Any, ...]
    spec: CommandSpec

    # Position tracking for error reporting
    tokens: List[Token] = field(default_factory=list)

    def __str__(self):
        return ' '.join((self.verb,) + self.arguments)


class CommandParser:
    """Turns a command line into a validated Command or raises CommandError."""

    def __init__(self, lexer: CommandLexer = None):
        self.lexer = lexer or CommandLexer()

    def parse(self, line: str) -> Command:
        """Tokenize and validate a line. Nothing is executed."""
        tokens = self.lexer.tokenize(line)
        return self.parse_tokens(tokens)

    def parse_tokens(self, tokens: List[Token]) -> Command:
        verb, arg_tokens = self.lexer.split_verb(tokens)

        spec = lookup(verb)
        if spec is None:
            raise UnknownCommandError(
                f"Unknown command: '{verb}'.",
                verb=verb,
                char_start=tokens[0].char_start,
                char_end=tokens[0].char_end
            )

        if len(arg_tokens) != spec.arity:
            raise InvalidArgumentsError(
                f"Invalid syntax for {verb}: expected {self._describe_arity(spec)}, "
                f"got {len(arg_tokens)}. Correct syntax: '{spec.usage}'.",
                verb=verb,
                char_start=tokens[0].char_start,
                char_end=tokens[-1].char_end
            )

        values = tuple(self._convert(spec, param, token)
                       for param, token in zip(spec.params, arg_tokens))

        return Command(
            verb=verb,
            arguments=tuple(token.value for token in arg_tokens),
            values=values,
            spec=spec,
            tokens=list(tokens)
        )

    def _convert(self, spec: CommandSpec, param: Param, token: Token) -> Any:
        """Convert one argument token, raising if it does not fit its slot."""
        value = CONVERTERS[param.arg_type](token.value)
        if value is not None:
            return value

        if param.arg_type == ArgType.INTEGER:
            problem = f"'{token.value}' is not a valid integer for {param.name}"
        elif param.arg_type == ArgType.COLOR:
            problem = (f"'{token.value}' is not a supported color "
                       f"(choose from {', '.join(PEN_COLORS)})")
        else:
            problem = f"'{token.value}' is not a valid {param.name}, use 'on' or 'off'"

        raise InvalidArgumentsError(
            f"Invalid syntax for {spec.verb}: {problem}. "
            f"Correct syntax: '{spec.usage}'.",
            verb=spec.verb,
            char_start=token.char_start,
            char_end=token.char_end
        )

    @staticmethod
    def _describe_arity(spec: CommandSpec) -> str:
        if spec.arity == 0:
            return "no parameters"
        names = ', '.join(param.name for param in spec.params)
        noun = "parameter" if spec.arity == 1 else "parameters"
        return f"{spec.arity} {noun} ({names})"
