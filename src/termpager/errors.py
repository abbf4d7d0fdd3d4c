"""Centralized error handling for termpager.

This module provides:
- The exception taxonomy raised by pagers
- Standard error codes
- Error envelope format for --json output
- Helper functions for consistent error reporting
"""

import json
import sys
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


# =============================================================================
# Exceptions
# =============================================================================


class PagerError(Exception):
    """Base class for all termpager errors."""


# Short alias matching the name used in messages and docs.
Error = PagerError


class ConfigurationError(PagerError):
    """Raised when no usable pager executable can be found."""


class InvalidArgument(PagerError, ValueError):
    """Raised when mutually exclusive inputs are given together."""


class PagerClosed(PagerError):
    """Raised when the pager was closed before all text was written.

    Either the user asked to quit at a page break or the external pager
    process exited while text was still being sent to it.
    """


# =============================================================================
# Error Codes
# =============================================================================

CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
INVALID_ARGUMENT = "INVALID_ARGUMENT"
FILE_NOT_FOUND = "FILE_NOT_FOUND"
PAGER_CLOSED = "PAGER_CLOSED"
INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Error Envelope
# =============================================================================


@dataclass
class TermPagerError:
    """Error report printed by the command line, as text or as JSON."""

    code: str
    message: str
    hints: List[str] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """The ``{"error": {...}}`` envelope."""
        return {"error": asdict(self)}

    def print_json(self, file=None) -> None:
        file = file or sys.stderr
        print(json.dumps(self.to_dict(), indent=2), file=file)

    def print_text(self, file=None) -> None:
        file = file or sys.stderr
        print(f"Error: {self.message}", file=file)
        for hint in self.hints:
            print(f"  Hint: {hint}", file=file)


# =============================================================================
# Factory Functions
# =============================================================================


def configuration_error(message: str) -> TermPagerError:
    """Create error for a missing pager executable."""
    return TermPagerError(
        code=CONFIGURATION_ERROR,
        message=message,
        hints=[
            "Install a pager such as 'less'",
            "Set the PAGER environment variable",
            "Run: termpager --basic <file>",
        ],
    )


def invalid_argument(arg_name: str, value: str, reason: str = "") -> TermPagerError:
    """Create error for invalid argument."""
    msg = f"Invalid argument '{arg_name}': {value}"
    if reason:
        msg += f" ({reason})"
    return TermPagerError(
        code=INVALID_ARGUMENT,
        message=msg,
        hints=["Run: termpager --help"],
        details={"argument": arg_name, "value": value, "reason": reason},
    )


def file_not_found(path: str) -> TermPagerError:
    """Create error for missing file."""
    return TermPagerError(
        code=FILE_NOT_FOUND,
        message=f"File not found: {path}",
        hints=["Check that the file path is correct"],
        details={"path": path},
    )


def pager_closed(message: str) -> TermPagerError:
    """Create error for a pager that closed early."""
    return TermPagerError(code=PAGER_CLOSED, message=message)


def internal_error(message: str, details: Optional[dict] = None) -> TermPagerError:
    """Create internal error."""
    return TermPagerError(
        code=INTERNAL_ERROR,
        message=f"Internal error: {message}",
        hints=["Please report this issue"],
        details=details or {},
    )


def from_exception(exc: BaseException) -> TermPagerError:
    """Map an exception raised by the library to an error envelope."""
    if isinstance(exc, ConfigurationError):
        return configuration_error(str(exc))
    if isinstance(exc, InvalidArgument):
        return TermPagerError(code=INVALID_ARGUMENT, message=str(exc))
    if isinstance(exc, PagerClosed):
        return pager_closed(str(exc))
    if isinstance(exc, FileNotFoundError):
        return file_not_found(exc.filename or str(exc))
    return internal_error(str(exc), details={"type": type(exc).__name__})


# =============================================================================
# Output Helper
# =============================================================================


def print_error(
    error: TermPagerError,
    json_mode: bool = False,
    file=None,
) -> None:
    """Print error in appropriate format.

    Args:
        error: The error to print.
        json_mode: If True, print as JSON envelope. If False, print as text.
        file: Output file (default: stderr).
    """
    if json_mode:
        error.print_json(file)
    else:
        error.print_text(file)
