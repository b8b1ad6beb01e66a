"""
The command grammar: every recognized verb with its typed argument slots.

Both the executing path and the syntax checker validate against this table,
so they always accept exactly the same language.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Optional

from core.drawing_state import PenColor


# Range of the 32-bit signed integers accepted as numeric arguments
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')

# Colors a pen command may select. Black is the starting pen only.
PEN_COLORS: Dict[str, PenColor] = {
    'red': PenColor.RED,
    'green': PenColor.GREEN,
    'blue': PenColor.BLUE,
}

FILL_SWITCHES: Dict[str, bool] = {
    'on': True,
    'off': False,
}


class ArgType(Enum):
    INTEGER = "integer"
    COLOR = "color"
    SWITCH = "switch"


@dataclass(frozen=True)
class Param:
    """One typed argument slot of a verb."""
    name: str
    arg_type: ArgType


@dataclass(frozen=True)
class CommandSpec:
    """Grammar entry for a single verb."""
    verb: str
    params: Tuple[Param, ...]
    description: str

    @property
    def arity(self) -> int:
        return len(self.params)

    @property
    def usage(self) -> str:
        """Correct form of the command, e.g. ``moveto x y``."""
        return ' '.join([self.verb] + [self._placeholder(p) for p in self.params])

    def _placeholder(self, param: Param) -> str:
        if param.arg_type == ArgType.COLOR:
            return '|'.join(PEN_COLORS)
        if param.arg_type == ArgType.SWITCH:
            return '|'.join(FILL_SWITCHES)
        return param.name


def _int(name: str) -> Param:
    return Param(name, ArgType.INTEGER)


GRAMMAR: Dict[str, CommandSpec] = {
    spec.verb: spec for spec in (
        CommandSpec('moveto', (_int('x'), _int('y')),
                    "Move the pen to (x, y) and mark the position"),
        CommandSpec('drawto', (_int('x'), _int('y')),
                    "Draw a line from the pen position to (x, y)"),
        CommandSpec('rectangle', (_int('width'), _int('height')),
                    "Draw a rectangle with its top-left corner at the pen"),
        CommandSpec('circle', (_int('radius'),),
                    "Draw a circle centered at the pen"),
        CommandSpec('triangle', (_int('base'), _int('side1'), _int('side2')),
                    "Draw a triangle standing on the pen position"),
        CommandSpec('pen', (Param('color', ArgType.COLOR),),
                    "Change the pen color"),
        CommandSpec('fill', (Param('mode', ArgType.SWITCH),),
                    "Turn filling of shapes on or off"),
        CommandSpec('clear', (), "Clear the drawing area"),
        CommandSpec('reset', (), "Move the pen back to the origin"),
    )
}


def lookup(verb: str) -> Optional[CommandSpec]:
    """Find the grammar entry for a verb (case-insensitive)."""
    return GRAMMAR.get(verb.lower())


def help_text() -> str:
    """One 'usage  description' line per verb, in table order."""
    width = max(len(spec.usage) for spec in GRAMMAR.values())
    return '\n'.join(f"{spec.usage.ljust(width)}  {spec.description}"
                     for spec in GRAMMAR.values())


def convert_integer(raw: str) -> Optional[int]:
    """Parse a 32-bit signed integer token, or None if it is not one."""
    if not INTEGER_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def convert_color(raw: str) -> Optional[PenColor]:
    return PEN_COLORS.get(raw.lower())


def convert_switch(raw: str) -> Optional[bool]:
    return FILL_SWITCHES.get(raw.lower())


CONVERTERS = {
    ArgType.INTEGER: convert_integer,
    ArgType.COLOR: convert_color,
    ArgType.SWITCH: convert_switch,
}
