import pytest

from minishell.lexer import TokenType
from minishell.parser import Redirect
from minishell.redirections import (
    RedirectionError,
    Streams,
    open_redirections,
    read_heredoc,
)


def reader(*lines):
    feed = iter(lines)

    def read_line(prompt):
        return next(feed, None)

    return read_line


def test_read_heredoc_stops_at_delimiter():
    assert read_heredoc("EOF", reader("a", "b", "EOF", "c")) == "a\nb\n"


def test_read_heredoc_stops_at_end_of_input():
    assert read_heredoc("EOF", reader("only")) == "only\n"


def test_read_heredoc_passes_prompt():
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        return "END"

    assert read_heredoc("END", read_line) == ""
    assert prompts == ["> "]


def test_read_heredoc_interrupt():
    def read_line(prompt):
        raise KeyboardInterrupt

    with pytest.raises(RedirectionError):
        read_heredoc("END", read_line)


def test_no_redirections():
    with open_redirections([]) as streams:
        assert streams.stdin is None
        assert streams.stdout is None


def test_output_truncates(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("old content")
    with open_redirections([Redirect(TokenType.RED_OUT, filename=str(target))]) as streams:
        streams.stdout.write("new")
    assert target.read_text() == "new"


def test_append_appends(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("a")
    with open_redirections([Redirect(TokenType.APPEND, filename=str(target))]) as streams:
        streams.stdout.write("b")
    assert target.read_text() == "ab"


def test_last_output_wins_but_all_are_created(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    redirections = [
        Redirect(TokenType.RED_OUT, filename=str(first)),
        Redirect(TokenType.RED_OUT, filename=str(second)),
    ]
    with open_redirections(redirections) as streams:
        streams.stdout.write("data")
    assert first.read_text() == ""
    assert second.read_text() == "data"


def test_input_file(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("content\n")
    with open_redirections([Redirect(TokenType.RED_IN, filename=str(source))]) as streams:
        assert streams.stdin.read() == "content\n"


def test_missing_input_file(tmp_path):
    with pytest.raises(RedirectionError):
        open_redirections([Redirect(TokenType.RED_IN, filename=str(tmp_path / "none"))])


def test_heredoc_becomes_input():
    redirect = Redirect(TokenType.HEREDOC, delimiter="END")
    with open_redirections([redirect], reader("x", "y", "END")) as streams:
        assert streams.stdin.read() == "x\ny\n"
    assert redirect.filename is None


def test_streams_close_on_exit(tmp_path):
    target = tmp_path / "out"
    with open_redirections([Redirect(TokenType.RED_OUT, filename=str(target))]) as streams:
        opened = streams.stdout
    assert opened.closed is True


def test_streams_close_empty():
    streams = Streams()
    streams.close()
    assert streams.stdin is None and streams.stdout is None