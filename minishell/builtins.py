"""Commands the shell carries out itself rather than by starting a program."""

from __future__ import annotations

import os
from functools import cmp_to_key
from typing import Callable, Protocol, Sequence, TextIO

from minishell.environ import Environment, byte_compare, is_valid_identifier
from minishell.text import atoi, is_digit


class ShellLike(Protocol):
    """What a builtin needs from the shell running it."""

    environ: Environment
    stdout: TextIO
    stderr: TextIO


class ShellExit(Exception):
    """Raised by the ``exit`` builtin to end the shell with a status."""

    def __init__(self, status: int) -> None:
        super().__init__(f"exit {status}")
        self.status = status


def _newline_flags(argv: Sequence[str]) -> int:
    """Index of the first argument that is not an ``-n``/``-nnn`` flag."""
    index = 1
    while index < len(argv):
        arg = argv[index]
        if not arg.startswith("-n") or arg[2:].strip("n"):
            break
        index += 1
    return index


def echo(shell: ShellLike, argv: Sequence[str]) -> int:
    """Print the arguments separated by spaces; ``-n`` drops the newline."""
    start = _newline_flags(argv)
    shell.stdout.write(" ".join(argv[start:]))
    if start == 1:
        shell.stdout.write("\n")
    return 0


def _cd_target(shell: ShellLike, arg: str | None) -> str | None:
    if arg is None or arg == "~":
        path = shell.environ.get("HOME")
        if path is None:
            shell.stderr.write("minishell: cd: HOME not set\n")
        return path
    if arg == "-":
        path = shell.environ.get("OLDPWD")
        if path is None:
            shell.stderr.write("minishell: cd: OLDPWD not set\n")
        else:
            shell.stdout.write(f"{path}\n")
        return path
    return arg


def cd(shell: ShellLike, argv: Sequence[str]) -> int:
    """Change the working directory and update PWD and OLDPWD."""
    path = _cd_target(shell, argv[1] if len(argv) > 1 else None)
    if path is None:
        return 1
    try:
        previous = os.getcwd()
    except OSError:
        shell.stderr.write("minishell: cd: error retrieving current directory\n")
        return 1
    try:
        os.chdir(path)
    except OSError as exc:
        shell.stderr.write(f"minishell: cd: {path}: {exc.strerror}\n")
        return 1
    shell.environ.set("OLDPWD", previous)
    try:
        shell.environ.set("PWD", os.getcwd())
    except OSError:
        shell.stderr.write("minishell: cd: warning: could not update PWD\n")
    return 0


def pwd(shell: ShellLike, argv: Sequence[str]) -> int:
    """Print the working directory, falling back on PWD."""
    try:
        shell.stdout.write(f"{os.getcwd()}\n")
        return 0
    except OSError as exc:
        saved = shell.environ.get("PWD")
        if saved is not None:
            shell.stdout.write(f"{saved}\n")
            return 0
        shell.stderr.write(f"minishell: pwd: {exc.strerror}\n")
        return 1


def _print_exports(shell: ShellLike) -> None:
    for entry in sorted(shell.environ.entries(), key=cmp_to_key(byte_compare)):
        name, sep, value = entry.partition("=")
        if sep:
            shell.stdout.write(f'declare -x {name}="{value}"\n')
        else:
            shell.stdout.write(f"declare -x {entry}\n")


def export(shell: ShellLike, argv: Sequence[str]) -> int:
    """Set variables, or list them all sorted when given no arguments."""
    if len(argv) < 2:
        _print_exports(shell)
    status = 0
    for arg in argv[1:]:
        if not is_valid_identifier(arg):
            shell.stderr.write(f"minishell: export: `{arg}': not a valid identifier\n")
            status = 1
            continue
        name, sep, value = arg.partition("=")
        if sep:
            shell.environ.set(name, value)
        elif shell.environ.get(name) is None and name not in shell.environ.entries():
            shell.environ.add(name)
    return status


def unset(shell: ShellLike, argv: Sequence[str]) -> int:
    """Remove variables from the environment."""
    status = 0
    for arg in argv[1:]:
        if not is_valid_identifier(arg):
            shell.stderr.write(f"minishell: unset: `{arg}': not a valid identifier\n")
            status = 1
        else:
            shell.environ.remove(arg)
    return status


def env(shell: ShellLike, argv: Sequence[str]) -> int:
    """Print every variable that has a value."""
    if len(argv) > 1:
        shell.stderr.write("minishell: env: too many arguments\n")
        return 1
    for entry in shell.environ.entries():
        if "=" in entry:
            shell.stdout.write(f"{entry}\n")
    return 0


def _is_number(text: str) -> bool:
    body = text[1:] if text[:1] in ("+", "-") else text
    return all(is_digit(char) for char in body)


def exit_builtin(shell: ShellLike, argv: Sequence[str]) -> int:
    """End the shell by raising ShellExit with the requested status."""
    if len(argv) < 2:
        raise ShellExit(0)
    if len(argv) > 2:
        shell.stderr.write("minishell: exit : too many arguments\n")
        return 1
    if not _is_number(argv[1]):
        shell.stderr.write(f"minishell: exit: `{argv[1]}' numeric argument required\n")
        raise ShellExit(255)
    raise ShellExit(atoi(argv[1]) % 256)


_BUILTINS: dict[str, Callable[[ShellLike, Sequence[str]], int]] = {
    "echo": echo,
    "cd": cd,
    "pwd": pwd,
    "export": export,
    "unset": unset,
    "env": env,
    "exit": exit_builtin,
}


def is_builtin(name: str) -> bool:
    """True when *name* is one of the shell's own commands."""
    return name in _BUILTINS


def run_builtin(shell: ShellLike, argv: Sequence[str]) -> int:
    """Run the builtin named by ``argv[0]``; an unknown name does nothing."""
    func = _BUILTINS.get(argv[0])
    if func is None:
        return 0
    return func(shell, argv)