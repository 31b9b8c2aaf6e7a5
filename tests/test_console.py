"""Tests for console backend selection and output."""

from __future__ import annotations

import io

import pytest

from challenge_tester import console as console_mod
from challenge_tester.console import configure, console, get_console
from challenge_tester.console._plain import PlainBackend
from challenge_tester.console._rich import RichBackend


class TestConfigure:
    def test_default_is_plain(self) -> None:
        assert isinstance(get_console(), PlainBackend)

    def test_rich_backend(self) -> None:
        configure(backend="rich", stream=io.StringIO())
        assert isinstance(get_console(), RichBackend)

    def test_auto_without_tty_is_plain(self) -> None:
        configure(backend="auto", stream=io.StringIO())
        assert isinstance(get_console(), PlainBackend)

    def test_unknown_backend_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown console backend 'fancy'"):
            configure(backend="fancy")

    def test_proxy_follows_configure(self) -> None:
        stream = io.StringIO()
        configure(backend="plain", stream=stream)
        console.write("hello")
        assert stream.getvalue() == "hello\n"
        assert console_mod.get_console() is console_mod._backend


class TestPlainBackend:
    def test_separator_has_blank_lines(self) -> None:
        stream = io.StringIO()
        PlainBackend(stream).separator("----")
        assert stream.getvalue() == "\n----\n\n"

    def test_every_line_kind_is_verbatim(self) -> None:
        stream = io.StringIO()
        backend = PlainBackend(stream)
        backend.heading("h")
        backend.success("s")
        backend.failure("f")
        backend.write("w")
        assert stream.getvalue() == "h\ns\nf\nw\n"


class TestRichBackend:
    def test_markup_is_not_interpreted(self) -> None:
        stream = io.StringIO()
        RichBackend(stream).failure("Tests failed for '[red]x[/red]':")
        assert stream.getvalue() == "Tests failed for '[red]x[/red]':\n"

    def test_separator(self) -> None:
        stream = io.StringIO()
        RichBackend(stream).separator("----------------")
        assert stream.getvalue() == "\n----------------\n\n"

    def test_report_through_rich(self) -> None:
        from challenge_tester.cases import ChallengeTestCases

        stream = io.StringIO()
        configure(backend="rich", stream=stream)
        ChallengeTestCases(abs, [(-2, 2)], title="Absolute").evaluate().print_failures()
        assert stream.getvalue() == "All tests passed for 'Absolute'!\n\n"

    def test_block_lines_keep_tabs(self) -> None:
        from challenge_tester.cases import ChallengeTestCases

        stream = io.StringIO()
        configure(backend="rich", stream=stream)
        ChallengeTestCases(lambda x: x, [(2, 3)], title="t").evaluate().print_failures()
        out = stream.getvalue()
        assert out.startswith("Tests failed for 't':\n")
        assert "Input:        \t2\n" in out
        assert "Expected:     \t[3]\n" in out
        assert "Actual output:\t2\n" in out
        assert out.endswith("\n----------------\n\n")

    def test_write_is_verbatim(self) -> None:
        stream = io.StringIO()
        RichBackend(stream).write("Time to solve:\t0.5")
        assert stream.getvalue() == "Time to solve:\t0.5\n"
