"""Tests for the basic (in-process) pager.

Expected outputs are full transcripts: text rows and prompts exactly as
they reach the output stream.
"""

import io

import pytest

from termpager import PagerClosed
from termpager.pagers import BasicPager, PageCursor, default_prompt


LINE = "I try all things, I achieve what I can.\n"

PROMPT_1 = "--- Page -1- Press enter/return to continue (or q to quit) ---"
PROMPT_2 = "--- Page -2- Press enter/return to continue (or q to quit) ---"
PROMPT_3 = "--- Page -3- Press enter/return to continue (or q to quit) ---"


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


def make_input(answers: str) -> io.StringIO:
    return io.StringIO(answers)


class TestConstruction:
    """Tests for width/height/prompt setup."""

    def test_default_prompt_takes_two_lines(self, output):
        """Default prompt is a blank line plus the prompt line."""
        pager = BasicPager(output=output, width=80, height=5)

        assert pager.height == 3

    def test_custom_multiline_prompt_height(self, output):
        """Prompt height is measured from the rendered prompt."""
        prompt = lambda page: f"Page {page}\non multiline\n"
        pager = BasicPager(output=output, width=80, height=30, prompt=prompt)

        assert pager.width == 80
        assert pager.height == 28
        assert pager.prompt is prompt

    def test_prompt_height_counts_wrapped_rows(self, output):
        """A prompt wider than the screen takes more lines."""
        pager = BasicPager(output=output, width=40, height=5)

        assert pager.height == 2

    def test_empty_prompt_takes_one_line(self, output):
        """The newline after an empty prompt still uses a line."""
        pager = BasicPager(output=output, width=80, height=5, prompt=lambda page: "")

        assert pager.height == 4

    def test_defaults_to_terminal_size(self, output, monkeypatch):
        """Width and height come from the terminal when not given."""
        monkeypatch.setattr("termpager.screen.terminal_size", lambda: (120, 40))

        pager = BasicPager(output=output)

        assert pager.width == 120
        assert pager.height == 38

    def test_default_prompt_text(self):
        """Default prompt renders the page number."""
        assert default_prompt(7) == (
            "\n--- Page -7- Press enter/return to continue (or q to quit) ---"
        )


class TestPageCursor:
    """Tests for page cursor transitions."""

    def test_starts_with_full_page(self):
        cursor = PageCursor(5)

        assert cursor.page_num == 1
        assert cursor.lines_left == 5
        assert not cursor.break_pending

    def test_filling_page_marks_break(self):
        cursor = PageCursor(3)
        cursor.consume(2)
        assert not cursor.break_pending

        cursor.consume(1)
        assert cursor.lines_left == 0
        assert cursor.break_pending

    def test_advance_resets_lines(self):
        cursor = PageCursor(3)
        cursor.consume(3)
        cursor.advance()

        assert cursor.page_num == 2
        assert cursor.lines_left == 3
        assert not cursor.break_pending


class TestPage:
    """Transcript tests for BasicPager.page."""

    def test_empty_string(self, output):
        """Empty text writes nothing and doesn't prompt."""
        pager = BasicPager(output=output, input=make_input(""), width=80, height=5)

        pager.page("")

        assert output.getvalue() == ""

    def test_text_fitting_on_screen(self, output):
        """Short text is written unchanged."""
        pager = BasicPager(output=output, width=100, height=10)

        pager.page(LINE)

        assert output.getvalue() == LINE

    def test_exactly_one_page_has_no_prompt(self, output):
        """A page filled by the last line isn't followed by a prompt."""
        answers = make_input("")
        pager = BasicPager(output=output, input=answers, width=100, height=5)

        pager.page(LINE * 3)

        assert output.getvalue() == LINE * 3
        assert answers.tell() == 0

    def test_one_line_past_a_page_prompts_once(self, output):
        """The prompt comes right after the last row of the page."""
        pager = BasicPager(output=output, input=make_input("\n"), width=100, height=5)

        pager.page(LINE * 4)

        assert output.getvalue() == (LINE * 3 + "\n" + PROMPT_1 + "\n" + LINE)

    def test_long_text_without_newlines(self, output):
        """Long lines are wrapped and leftover rows carried to the next pages."""
        text = (
            "The more so, I say, because truly to enjoy bodily warmth, "
            "some small part of you must be cold, for there is no quality "
            "in this world that is not what it is merely by contrast.\n"
            "Nothing exists in itself.\n"
        )
        pager = BasicPager(
            output=output, input=make_input("\n\n"), width=40, height=5
        )

        pager.page(text)

        assert output.getvalue() == "\n".join(
            [
                "The more so, I say, because truly to ",
                "enjoy bodily warmth, some small part of ",
                "",
                "--- Page -1- Press enter/return to ",
                "continue (or q to quit) ---",
                "you must be cold, for there is no ",
                "quality in this world that is not what ",
                "",
                "--- Page -2- Press enter/return to ",
                "continue (or q to quit) ---",
                "it is merely by contrast.",
                "Nothing exists in itself.\n",
            ]
        )

    def test_lines_matching_page_height(self, output):
        """Text without a trailing newline keeps it that way."""
        pager = BasicPager(output=output, input=make_input("\n"), width=80, height=5)

        pager.page("one\ntwo\nthree\nfour\nfive")

        assert output.getvalue() == "\n".join(
            ["one", "two", "three", "", PROMPT_1, "four", "five"]
        )

    def test_prompt_wider_than_screen(self, output):
        """When the prompt can't fit, text is wrapped without page breaks."""
        text = "It is not down on any map; true places never are.\n"
        pager = BasicPager(output=output, input=make_input("\n"), width=10, height=6)

        pager.page(text)

        assert output.getvalue() == "\n".join(
            ["It is not ", "down on ", "any map; ", "true ", "places ", "never are.\n"]
        )

    def test_continues_when_enter_pressed(self, output):
        """Each page break waits for enter and shows all content."""
        pager = BasicPager(
            output=output, input=make_input("\n\n\n"), width=100, height=5
        )

        pager.page(LINE * 10)

        page = LINE * 3
        assert output.getvalue() == (
            page + "\n" + PROMPT_1 + "\n"
            + page + "\n" + PROMPT_2 + "\n"
            + page + "\n" + PROMPT_3 + "\n"
            + LINE
        )

    def test_stops_when_q_pressed(self, output):
        """Quitting at the second prompt ends the output right there."""
        pager = BasicPager(output=output, input=make_input("\nq"), width=100, height=5)

        pager.page(LINE * 10)

        page = LINE * 3
        assert output.getvalue() == (
            page + "\n" + PROMPT_1 + "\n" + page + "\n" + PROMPT_2 + "\n"
        )

    def test_uppercase_q_quits(self, output):
        """Quit answers are case-insensitive."""
        pager = BasicPager(output=output, input=make_input("Q\n"), width=100, height=5)

        pager.page(LINE * 10)

        assert output.getvalue() == LINE * 3 + "\n" + PROMPT_1 + "\n"

    def test_end_of_input_continues(self, output):
        """No more answers means keep going."""
        pager = BasicPager(output=output, input=make_input(""), width=100, height=5)

        pager.page(LINE * 4)

        assert output.getvalue().endswith(PROMPT_1 + "\n" + LINE)

    def test_custom_prompt(self, output):
        """A prompt function replaces the default prompt."""
        pager = BasicPager(
            output=output,
            input=make_input("\n"),
            width=100,
            height=5,
            prompt=lambda page: f"Page -{page}-",
        )

        pager.page(LINE * 5)

        assert output.getvalue() == LINE * 4 + "Page -1-\n" + LINE

    def test_preserves_newlines_when_breaking(self, output):
        """Line terminators are kept across page breaks."""
        pager = BasicPager(
            output=output, input=make_input("\n\n\n"), width=80, height=5
        )

        pager.page("a\na\na\na\na\na\na\na\na\na")

        assert output.getvalue() == "\n".join(
            [
                "a", "a", "a", "", PROMPT_1,
                "a", "a", "a", "", PROMPT_2,
                "a", "a", "a", "", PROMPT_3,
                "a",
            ]
        )

    def test_page_from_path(self, output, tmp_path):
        """Lines of a file are paged."""
        path = tmp_path / "text.txt"
        path.write_text("one\ntwo\nthree\n", encoding="utf-8")
        pager = BasicPager(output=output, width=80, height=10)

        pager.page(path=path)

        assert output.getvalue() == "one\ntwo\nthree\n"

    def test_file_filling_last_page_has_no_prompt(self, output, tmp_path):
        """The last line of a file completing a page isn't followed by a prompt."""
        path = tmp_path / "text.txt"
        path.write_text(LINE * 6, encoding="utf-8")
        answers = make_input("\n\n")
        pager = BasicPager(output=output, input=answers, width=100, height=5)

        pager.page(path=path)

        assert output.getvalue() == LINE * 3 + "\n" + PROMPT_1 + "\n" + LINE * 3
        assert answers.tell() == 1

    def test_empty_prompt(self, output):
        """An empty prompt still breaks pages one line before the screen ends."""
        pager = BasicPager(
            output=output,
            input=make_input("\n"),
            width=100,
            height=5,
            prompt=lambda page: "",
        )

        pager.page(LINE * 5)

        assert output.getvalue() == LINE * 4 + "\n" + LINE

    def test_wide_characters_paged_by_columns(self, output):
        """Rows of wide characters are counted by terminal columns."""
        pager = BasicPager(
            output=output,
            input=make_input("\n"),
            width=6,
            height=3,
            prompt=lambda page: "--",
        )

        pager.page("日本語日本語日本語\n")

        assert output.getvalue() == "日本語\n日本語\n--\n日本語\n"

    def test_rows_rejoin_to_original(self, output):
        """Removing prompts and wrap breaks gives back the text."""
        text = "word " * 60 + "end\n"
        pager = BasicPager(
            output=output,
            input=make_input("\n" * 10),
            width=23,
            height=6,
            prompt=lambda page: f"[{page}]",
        )

        pager.page(text)

        rows = [
            row
            for row in output.getvalue().split("\n")
            if row and not row.startswith("[")
        ]
        assert "".join(rows) == text.rstrip("\n")


class TestStreaming:
    """Tests for write/write_line streaming."""

    def test_write_line_appends_newline(self, output):
        pager = BasicPager(output=output, width=100, height=5)

        pager.write_line("one")
        pager.puts("two")

        assert output.getvalue() == "one\ntwo\n"

    def test_write_line_keeps_single_newline(self, output):
        pager = BasicPager(output=output, width=100, height=5)

        pager.write_line("one\n")

        assert output.getvalue() == "one\n"

    def test_write_returns_pager(self, output):
        pager = BasicPager(output=output, width=100, height=5)

        assert pager.write("text") is pager

    def test_quit_raises_pager_closed(self, output):
        """Streaming past a page and quitting raises PagerClosed."""
        pager = BasicPager(output=output, input=make_input("q"), width=100, height=5)

        with pytest.raises(PagerClosed, match="The pager tool was closed"):
            for _ in range(3):
                pager.puts("I try all things, I achieve what I can.")

        assert output.getvalue() == LINE * 3 + "\n" + PROMPT_1 + "\n"

    def test_full_page_prompts_right_away(self, output):
        """The write that fills a page shows the prompt and reads the answer."""
        answers = make_input("\n")
        pager = BasicPager(output=output, input=answers, width=100, height=5)

        for _ in range(3):
            pager.write(LINE)
        assert output.getvalue() == LINE * 3 + "\n" + PROMPT_1 + "\n"
        assert answers.tell() == 1

        pager.write(LINE)
        assert output.getvalue() == LINE * 3 + "\n" + PROMPT_1 + "\n" + LINE
        assert pager.page_num == 2

    def test_try_write_returns_false_on_quit(self, output):
        pager = BasicPager(output=output, input=make_input("q"), width=100, height=5)

        assert pager.try_write(LINE * 2) is True
        assert pager.try_write(LINE) is False

    def test_writes_across_calls_share_page(self, output):
        """Pages are counted across separate writes."""
        pager = BasicPager(
            output=output, input=make_input("\n\n"), width=100, height=5
        )

        pager.write(LINE * 2)
        pager.write(LINE * 2)
        pager.write(LINE * 3)

        assert output.getvalue().count("--- Page -") == 2
        assert pager.page_num == 3

    def test_close_resets_session(self, output):
        pager = BasicPager(output=output, input=make_input("\n"), width=100, height=5)
        pager.write(LINE * 4)
        assert pager.page_num == 2

        assert pager.close() is True
        assert pager.page_num == 1

    def test_close_is_idempotent(self, output):
        pager = BasicPager(output=output, width=100, height=5)

        assert pager.close() is True
        assert pager.close() is True
        assert output.getvalue() == ""


class TestRun:
    """Tests for BasicPager.run."""

    def test_callback_output_is_paged(self, output):
        def produce(pager):
            pager.write(LINE)

        BasicPager.run(callback=produce, output=output, width=100, height=5)

        assert output.getvalue() == LINE

    def test_quit_in_callback_is_swallowed(self, output):
        written = []

        def produce(pager):
            for _ in range(10):
                pager.write(LINE)
                written.append(LINE)

        BasicPager.run(
            callback=produce,
            output=output,
            input=make_input("q"),
            width=100,
            height=5,
        )

        assert len(written) == 2
        assert output.getvalue() == LINE * 3 + "\n" + PROMPT_1 + "\n"

    def test_context_manager_swallows_quit(self, output):
        with BasicPager(
            output=output, input=make_input("q"), width=100, height=5
        ) as pager:
            for _ in range(10):
                pager.write(LINE)

        assert output.getvalue() == LINE * 3 + "\n" + PROMPT_1 + "\n"
