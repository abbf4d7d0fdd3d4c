"""Software pagination engine.

Used where no system pager is available. Text is re-flowed to the
terminal width and, each time a screenful has been shown, a prompt is
printed and a line of input is awaited before continuing:

    --- Page -1- Press enter/return to continue (or q to quit) ---

Answering with "q" (any case) closes the pager. The prompt's own height is
subtracted from the screen height once, at construction.

Streamed writes prompt as soon as a page fills up. When page() is given
text or a file, a page filled by the very last line isn't followed by a
prompt since nothing is left to show.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from .. import screen
from ..wrap import fit_row, line_count, split_lines, wrap, wrap_line
from .abstract import Pager, WriteResult, terminate_line

PAGE_BREAK = "\n--- Page -{page}- Press enter/return to continue (or q to quit) ---"

CLOSED_MESSAGE = "The pager tool was closed"

# Page number the prompt is rendered for when measuring its height.
PROMPT_SAMPLE_PAGE = 100


def default_prompt(page: int) -> str:
    """Render the default page break prompt."""
    return PAGE_BREAK.format(page=page)


@dataclass
class PageCursor:
    """Position within the current paging session."""

    page_height: int
    page_num: int = 1
    lines_left: int = 0
    break_pending: bool = False

    def __post_init__(self):
        self.lines_left = self.page_height

    def consume(self, count: int) -> None:
        self.lines_left -= count
        if self.lines_left == 0:
            self.break_pending = True

    def advance(self) -> None:
        self.page_num += 1
        self.lines_left = self.page_height
        self.break_pending = False


class BasicPager(Pager):
    """Pager that paginates text itself without any external program."""

    def __init__(
        self,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        prompt: Optional[Callable[[int], str]] = None,
        **options,
    ):
        """Create a basic pager.

        Args:
            width: Screen width (default: terminal width).
            height: Screen height including the prompt (default: terminal height).
            prompt: Function from page number to prompt text.
            **options: input, output and enabled, see Pager.
        """
        super().__init__(**options)
        self._width = width if width is not None else screen.page_width()
        self._prompt = prompt if prompt is not None else default_prompt

        screen_height = height if height is not None else screen.page_height()
        # An empty prompt still ends with a newline
        prompt_height = max(
            line_count(wrap(self._prompt(PROMPT_SAMPLE_PAGE), self._width)), 1
        )
        self._height = max(screen_height - prompt_height, 0)

        self.reset()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        """Lines of text shown per page, the prompt excluded."""
        return self._height

    @property
    def prompt(self) -> Callable[[int], str]:
        return self._prompt

    @property
    def page_num(self) -> int:
        return self._cursor.page_num

    def reset(self) -> None:
        """Start a new paging session."""
        self._cursor = PageCursor(self._height)
        self._leftover: List[str] = []

    def close(self) -> bool:
        self.reset()
        return True

    def _send(
        self, text: str, *, newline: bool = False, final: bool = False
    ) -> WriteResult:
        if newline:
            text = terminate_line(text)

        for line in split_lines(text):
            rows = [fit_row(row, self._width) for row in wrap_line(line, self._width)]
            self._leftover.extend(row + "\n" for row in rows[:-1])
            self._leftover.append(rows[-1])

            result = self._flush_leftover()
            if result.is_closed:
                return result

        if self._cursor.break_pending and not final:
            return self._resolve_break()
        return WriteResult.written()

    def _flush_leftover(self) -> WriteResult:
        """Emit pending rows, breaking pages as they fill up."""
        if self._height < 1:
            # The prompt doesn't fit on screen
            self._emit("".join(self._leftover))
            self._leftover = []
            return WriteResult.written()

        while self._leftover:
            if self._cursor.break_pending:
                result = self._resolve_break()
                if result.is_closed:
                    return result

            lines_left = self._cursor.lines_left
            chunk = self._leftover[:lines_left]
            self._leftover = self._leftover[lines_left:]
            self._cursor.consume(len(chunk))
            self._emit("".join(chunk))

        return WriteResult.written()

    def _resolve_break(self) -> WriteResult:
        """Prompt at a full page, moving on to the next page unless quit."""
        if not self._continue_paging():
            self._leftover = []
            return WriteResult.closed(CLOSED_MESSAGE)
        self._cursor.advance()
        return WriteResult.written()

    def _continue_paging(self) -> bool:
        """Show the prompt and wait for an answer. False means quit."""
        prompt = wrap(self._prompt(self._cursor.page_num), self._width)
        if not prompt.endswith("\n"):
            prompt += "\n"
        self._emit(prompt)

        answer = self.input.readline()
        return not answer[:1].lower() == "q"

    def _emit(self, text: str) -> None:
        if not text:
            return
        self.output.write(text)
        flush = getattr(self.output, "flush", None)
        if flush is not None:
            flush()
