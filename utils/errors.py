"""
Error definitions and handling for the drawing command interpreter.
"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional, List


class ErrorType(Enum):
    UNKNOWN_COMMAND = "unknown_command"
    INVALID_ARGUMENTS = "invalid_arguments"


class ErrorSeverity(Enum):
    WARNING = "warning"
    ERROR = "error"


class CommandError(Exception):
    """Base class for commands rejected by the interpreter."""

    error_type: ErrorType = ErrorType.INVALID_ARGUMENTS

    def __init__(self, message: str, verb: str = "",
                 char_start: int = 0, char_end: int = 0):
        super().__init__(message)
        self.message = message
        self.verb = verb
        self.char_start = char_start
        self.char_end = char_end


class UnknownCommandError(CommandError):
    """The verb does not match any grammar entry."""

    error_type = ErrorType.UNKNOWN_COMMAND


class InvalidArgumentsError(CommandError):
    """The verb matched but its arguments did not."""

    error_type = ErrorType.INVALID_ARGUMENTS


@dataclass
class CommandErrorRecord:
    """Represents an error in a program with position information."""
    line_number: int
    char_start: int
    char_end: int
    message: str
    error_type: ErrorType
    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __str__(self):
        return f"Line {self.line_number}: {self.message}"


class ErrorCollector:
    """Collects and manages errors while running or checking programs."""

    def __init__(self):
        self.errors: List[CommandErrorRecord] = []

    def add_error(self, line_number: int, char_start: int, char_end: int,
                  message: str, error_type: ErrorType,
                  severity: ErrorSeverity = ErrorSeverity.ERROR):
        """Add an error to the collection."""
        error = CommandErrorRecord(line_number, char_start, char_end, message,
                                   error_type, severity)
        self.errors.append(error)

    def add_command_error(self, line_number: int, error: CommandError):
        """Record a rejected command against the line it came from."""
        self.add_error(line_number, error.char_start, error.char_end,
                       error.message, error.error_type)

    def get_errors_for_line(self, line_number: int) -> List[CommandErrorRecord]:
        """Get all errors for a specific line."""
        return [error for error in self.errors if error.line_number == line_number]

    def get_first_error(self) -> Optional[CommandErrorRecord]:
        errors = self.get_all_errors()
        return errors[0] if errors else None

    def has_errors(self) -> bool:
        """Check if there are any errors (excluding warnings)."""
        return any(error.severity == ErrorSeverity.ERROR for error in self.errors)

    def clear(self):
        """Clear all errors."""
        self.errors.clear()

    def get_all_errors(self) -> List[CommandErrorRecord]:
        """Get all errors sorted by line number."""
        return sorted(self.errors, key=lambda e: (e.line_number, e.char_start))
