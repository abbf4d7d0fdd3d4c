"""Shared pager contract.

Every pager strategy (null, basic, system) implements the same small
interface:

    write(*texts)       send text, raising PagerClosed if the pager closed
    write_line(*texts)  same, terminating each text with a newline
    try_write(*texts)   same as write, returning False instead of raising
    close()             finish paging, True on success (idempotent)
    page(text)          write then close, stopping silently on PagerClosed

Concrete pagers implement ``_send`` which reports a closed pager through a
``WriteResult`` rather than an exception; ``write`` turns that outcome into
``PagerClosed`` for callers that want to react to it.
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..errors import InvalidArgument, PagerClosed


class WriteStatus(Enum):
    """Outcome of sending text to a pager."""

    WRITTEN = "written"
    CLOSED = "closed"


@dataclass(frozen=True)
class WriteResult:
    """Result of a single send.

    Attributes:
        status: Whether the text was written or the pager had closed.
        reason: Why the pager closed (empty when written).
    """

    status: WriteStatus
    reason: str = ""

    @classmethod
    def written(cls) -> "WriteResult":
        return cls(WriteStatus.WRITTEN)

    @classmethod
    def closed(cls, reason: str) -> "WriteResult":
        return cls(WriteStatus.CLOSED, reason)

    @property
    def is_closed(self) -> bool:
        return self.status is WriteStatus.CLOSED

    def raise_for_status(self) -> None:
        """Raise PagerClosed if the pager was closed."""
        if self.is_closed:
            raise PagerClosed(self.reason)


def terminate_line(text: str) -> str:
    """Add a trailing newline unless text already ends with one."""
    return text if text.endswith("\n") else text + "\n"


def validate_arguments(text=None, path=None, callback=None) -> None:
    """Reject mutually exclusive page() inputs before any I/O happens.

    Raises:
        InvalidArgument: If more than one of text, path and callback is given.
    """
    message = None
    if text is not None and callback is not None:
        message = "Cannot give text argument and callback at the same time."
    elif text is not None and path is not None:
        message = "Cannot give text and path arguments at the same time."
    elif path is not None and callback is not None:
        message = "Cannot give path argument and callback at the same time."

    if message:
        raise InvalidArgument(message)


class Pager(ABC):
    """Base class for all pager strategies."""

    def __init__(self, *, input=None, output=None, enabled: bool = True):
        """Create a pager.

        Args:
            input: Stream user answers are read from (default: sys.stdin).
            output: Stream text is written to (default: sys.stdout).
            enabled: Whether paging is enabled.
        """
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self._enabled = enabled

    @classmethod
    def run(
        cls,
        text: Optional[str] = None,
        *,
        path=None,
        callback: Optional[Callable[["Pager"], None]] = None,
        **options,
    ) -> None:
        """Paginate text, a file, or whatever a callback writes.

        Args:
            text: Text to page.
            path: File whose lines should be paged.
            callback: Called with the pager instance to stream text into it.
            **options: Passed to the pager constructor.

        Raises:
            InvalidArgument: If more than one of text, path, callback is given.
        """
        validate_arguments(text, path, callback)
        instance = cls(**options)
        try:
            if callback is not None:
                callback(instance)
            else:
                instance.page(text, path=path)
        except PagerClosed:
            pass
        finally:
            instance.close()

    @property
    def enabled(self) -> bool:
        return bool(self._enabled)

    @abstractmethod
    def _send(
        self, text: str, *, newline: bool = False, final: bool = False
    ) -> WriteResult:
        """Send one piece of text to the pager.

        Args:
            text: Text to send.
            newline: Terminate the text with a newline.
            final: Nothing else follows in this paging session.
        """

    @abstractmethod
    def close(self) -> bool:
        """Stop paging. Returns True if the pager finished successfully."""

    def write(self, *texts: str):
        """Write texts to the pager.

        Raises:
            PagerClosed: If the pager was closed by the user or exited.
        """
        for text in texts:
            self._send(text).raise_for_status()
        return self

    def write_line(self, *texts: str):
        """Write texts to the pager, each followed by a newline.

        Raises:
            PagerClosed: If the pager was closed by the user or exited.
        """
        for text in texts or ("",):
            self._send(text, newline=True).raise_for_status()
        return self

    puts = write_line

    def try_write(self, *texts: str) -> bool:
        """Write texts, returning False if the pager was closed."""
        return all(not self._send(text).is_closed for text in texts)

    def try_write_line(self, *texts: str) -> bool:
        """Write lines, returning False if the pager was closed."""
        return all(
            not self._send(text, newline=True).is_closed for text in texts or ("",)
        )

    def page(self, text: Optional[str] = None, *, path=None) -> None:
        """Write text (or the lines of a file) and close the pager.

        A pager closed by the user or by the external process simply stops
        the output; it is not an error here.
        """
        try:
            if path is not None:
                with open(path, "r", encoding="utf-8") as f:
                    line = f.readline()
                    while line:
                        following = f.readline()
                        if self._send(line, final=not following).is_closed:
                            break
                        line = following
            elif text is not None:
                self._send(text, final=True)
        finally:
            self.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return isinstance(exc, PagerClosed)
