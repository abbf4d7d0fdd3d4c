"""Passthrough used when paging is disabled.

Text is written straight to an interactive output. When the output is not
a terminal nothing is written and the text is only handed back, so callers
that compose output themselves don't print it twice.
"""

from .. import screen
from .abstract import Pager, WriteResult, terminate_line


class NullPager(Pager):
    """Pager that doesn't paginate."""

    def write(self, *texts: str) -> str:
        """Write texts directly to the output.

        Returns:
            The texts joined together, unmodified.
        """
        for text in texts:
            self._send(text)
        return "".join(texts)

    def write_line(self, *texts: str) -> str:
        """Write texts directly to the output, each ending with a newline.

        Returns:
            The newline-terminated texts joined together.
        """
        texts = texts or ("",)
        for text in texts:
            self._send(text, newline=True)
        return "".join(terminate_line(text) for text in texts)

    puts = write_line

    def _send(
        self, text: str, *, newline: bool = False, final: bool = False
    ) -> WriteResult:
        if newline:
            text = terminate_line(text)
        if screen.is_tty(self.output):
            self.output.write(text)
        return WriteResult.written()

    def close(self) -> bool:
        return True
