"""The interactive read-and-run loop."""

from __future__ import annotations

import signal
from typing import Any, Iterable, Iterator

from minishell.builtins import ShellExit
from minishell.executor import Shell
from minishell.parser import parse

try:
    import readline  # noqa: F401  enables line editing and history for input()
except ImportError:
    readline = None

PROMPT = "minishell$ "


def run(shell: Shell, lines: Iterable[str]) -> int:
    """Run each non-empty line; return the status the shell should exit with.

    ``exit`` ends the loop with its status; running out of input prints
    ``exit`` and yields 1.
    """
    for line in lines:
        if not line:
            continue
        try:
            shell.execute(parse(line, shell.environ))
        except ShellExit as exc:
            return exc.status
        except KeyboardInterrupt:
            shell.stdout.write("\n")
            shell.exit_status = 130
    shell.stdout.write("exit\n")
    return 1


def _prompt_lines(shell: Shell) -> Iterator[str]:
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            return
        except KeyboardInterrupt:
            shell.stdout.write("\n")
            continue
        yield line


def _ignore(signum: int, frame: Any) -> None:
    """Swallow the signal in the shell; started programs keep the default."""


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on the process environment.

    Command-line arguments are ignored. Returns the exit status.
    """
    shell = Shell()
    quit_signal = getattr(signal, "SIGQUIT", None)
    previous = signal.signal(quit_signal, _ignore) if quit_signal is not None else None
    try:
        return run(shell, _prompt_lines(shell))
    finally:
        if quit_signal is not None:
            signal.signal(quit_signal, previous)