"""Running commands and pipelines."""

from __future__ import annotations

import io
import os
import subprocess
import sys
import threading
from typing import Callable, Iterable, TextIO

from minishell.builtins import ShellExit, is_builtin, run_builtin
from minishell.environ import Environment
from minishell.parser import Command
from minishell.redirections import ReadLine, RedirectionError, open_redirections

Waiter = Callable[[], int]


def _done(status: int) -> Waiter:
    return lambda: status


def _fileno(stream: TextIO) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _status(returncode: int) -> int:
    return 128 - returncode if returncode < 0 else returncode


def _write_all(fd: int, data: bytes) -> None:
    try:
        view = memoryview(data)
        while view:
            view = view[os.write(fd, view):]
    except BrokenPipeError:
        pass
    finally:
        os.close(fd)


class Shell:
    """The state of a running shell: its environment, streams and last status."""

    def __init__(
        self,
        environ: Environment | Iterable[str] | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        read_line: ReadLine | None = None,
    ) -> None:
        if not isinstance(environ, Environment):
            environ = Environment(environ)
        self.environ = environ
        self.stdout = sys.stdout if stdout is None else stdout
        self.stderr = sys.stderr if stderr is None else stderr
        self.read_line = read_line
        self.exit_status = 0

    def find_command(self, name: str) -> str | None:
        """Return the first executable ``dir/name`` along PATH, or None."""
        search = self.environ.get("PATH")
        if search is None:
            return None
        for directory in (part for part in search.split(":") if part):
            candidate = f"{directory}/{name}"
            if os.access(candidate, os.X_OK):
                return candidate
        return None

    def execute(self, commands: Iterable[Command]) -> int:
        """Run one command or a pipeline and record its status."""
        commands = list(commands)
        if not commands:
            return 0
        if len(commands) > 1:
            status = self.execute_pipeline(commands)
        else:
            status = self.execute_command(commands[0])
        self.exit_status = status
        return status

    def execute_command(self, command: Command) -> int:
        """Run a single command and return its status."""
        if not command.argv:
            try:
                with open_redirections(command.redirections, self.read_line):
                    return 0
            except RedirectionError:
                return 1
        if is_builtin(command.argv[0]):
            return self._run_builtin(command)
        return self._start_external(command, None, None)()

    def execute_pipeline(self, commands: Iterable[Command]) -> int:
        """Run commands connected by pipes, wait for all of them, return 0."""
        commands = list(commands)
        waiters: list[Waiter] = []
        upstream: int | None = None
        for index, command in enumerate(commands):
            read_end = write_end = None
            if index < len(commands) - 1:
                read_end, write_end = os.pipe()
            try:
                waiters.append(self._start_stage(command, upstream, write_end))
            finally:
                for fd in (upstream, write_end):
                    if fd is not None:
                        os.close(fd)
            upstream = read_end
        for wait in reversed(waiters):
            wait()
        return 0

    def _run_builtin(self, command: Command) -> int:
        try:
            streams = open_redirections(command.redirections, self.read_line)
        except RedirectionError:
            return 1
        with streams:
            saved = self.stdout
            if streams.stdout is not None:
                self.stdout = streams.stdout
            try:
                return run_builtin(self, command.argv)
            finally:
                self.stdout = saved

    def _start_stage(self, command: Command, stdin_fd: int | None, stdout_fd: int | None) -> Waiter:
        if command.argv and is_builtin(command.argv[0]):
            return self._start_builtin_stage(command, stdout_fd)
        if not command.argv:
            return _done(self.execute_command(command))
        return self._start_external(command, stdin_fd, stdout_fd)

    def _start_builtin_stage(self, command: Command, stdout_fd: int | None) -> Waiter:
        """Run a builtin on a copy of the shell, as a pipeline member would."""
        buffer = io.StringIO()
        child = Shell(Environment(self.environ.entries()), buffer, self.stderr, self.read_line)
        cwd = os.getcwd()
        try:
            status = child.execute_command(command)
        except ShellExit as exc:
            status = exc.status
        finally:
            os.chdir(cwd)
        if stdout_fd is None:
            self.stdout.write(buffer.getvalue())
            return _done(status)
        writer = threading.Thread(
            target=_write_all, args=(os.dup(stdout_fd), buffer.getvalue().encode()), daemon=True
        )
        writer.start()

        def wait() -> int:
            writer.join()
            return status

        return wait

    def _start_external(self, command: Command, stdin_fd: int | None, stdout_fd: int | None) -> Waiter:
        name = command.argv[0]
        path = self.find_command(name)
        if path is None:
            self.stderr.write(f"minishell: {name}cmd not found\n")
            return _done(127)
        try:
            streams = open_redirections(command.redirections, self.read_line)
        except RedirectionError:
            return _done(1)
        with streams:
            stdin = streams.stdin if streams.stdin is not None else stdin_fd
            capture_out = capture_err = False
            if streams.stdout is not None:
                stdout = streams.stdout
            elif stdout_fd is not None:
                stdout = stdout_fd
            else:
                stdout = _fileno(self.stdout)
                if stdout is None:
                    stdout, capture_out = subprocess.PIPE, True
                else:
                    self.stdout.flush()
            stderr = _fileno(self.stderr)
            if stderr is None:
                stderr, capture_err = subprocess.PIPE, True
            else:
                self.stderr.flush()
            try:
                process = subprocess.Popen(
                    command.argv,
                    executable=path,
                    stdin=stdin,
                    stdout=stdout,
                    stderr=stderr,
                    env=self.environ.as_dict(),
                )
            except OSError:
                self.stderr.write("minishell: execve\n")
                return _done(126)

        def wait() -> int:
            out, err = process.communicate()
            if capture_out and out:
                self.stdout.write(out.decode(errors="replace"))
            if capture_err and err:
                self.stderr.write(err.decode(errors="replace"))
            return _status(process.returncode)

        return wait