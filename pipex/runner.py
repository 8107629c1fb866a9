"""Run two commands joined by a pipe, reading from one file and writing to another."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from pipex.fmt import printf
from pipex.lookup import resolve_command
from pipex.words import split_command

_USAGE_MESSAGE = "No found word E/error, please, check it."
_NOT_FOUND_STATUS = 127


class UsageError(ValueError):
    """Raised when the arguments or the commands given are unusable."""

    def __init__(self, message: str = _USAGE_MESSAGE) -> None:
        super().__init__(message)


def validate_arguments(argv: Sequence[str]) -> tuple[str, str, str, str]:
    """Check for exactly four non-empty arguments and return them.

    The arguments are the input file, the first command, the last command
    and the output file.
    """
    if len(argv) != 4 or not all(argv):
        raise UsageError()
    infile, first, last, outfile = argv
    return infile, first, last, outfile


def check_commands(commands: Sequence[str]) -> list[list[str]]:
    """Split every command into words; raise UsageError if one has none."""
    split = [split_command(command) for command in commands]
    if any(not words for words in split):
        raise UsageError()
    return split


def _report(name: str, error: OSError) -> None:
    sys.stderr.write(f"{name}: {error.strerror}\n")
    sys.stderr.flush()


def _open(path: str, flags: int, mode: int = 0o644) -> int | None:
    try:
        return os.open(path, flags, mode)
    except OSError as error:
        _report(path, error)
        return None


def _close(*fds: int | None) -> None:
    for fd in fds:
        if fd is not None:
            os.close(fd)


def _launch(
    command: str, stdin: int, stdout: int, env: Mapping[str, str] | None
) -> subprocess.Popen | int:
    """Start ``command``; return the process, or an exit status if it could not start."""
    words = split_command(command)
    name = words[0]
    try:
        path = resolve_command(name, env)
    except FileNotFoundError:
        sys.stderr.write(f"{name}: No such file or directory\n")
        sys.stderr.flush()
        return _NOT_FOUND_STATUS
    if path is None or not os.access(path, os.X_OK):
        sys.stderr.write(f"{name}: command not found\n")
        sys.stderr.flush()
        return _NOT_FOUND_STATUS
    try:
        return subprocess.Popen(
            words,
            executable=path,
            stdin=stdin,
            stdout=stdout,
            env=None if env is None else dict(env),
        )
    except OSError as error:
        _report("execve", error)
        return 1


def _status(started: subprocess.Popen | int) -> int:
    """Wait for a started command; a command killed by a signal counts as 0."""
    if isinstance(started, int):
        return started
    code = started.wait()
    return code if code >= 0 else 0


def _run_last_only(last: str, out_fd: int, env: Mapping[str, str] | None) -> int:
    read_fd, write_fd = os.pipe()
    os.close(write_fd)
    try:
        started = _launch(last, read_fd, out_fd, env)
    finally:
        _close(read_fd, out_fd)
    return _status(started)


def _run_first_only(first: str, in_fd: int, env: Mapping[str, str] | None) -> int:
    read_fd, write_fd = os.pipe()
    try:
        started = _launch(first, in_fd, write_fd, env)
    finally:
        _close(in_fd, read_fd, write_fd)
    _status(started)
    return 1


def _run_both(
    first: str, last: str, in_fd: int, out_fd: int, env: Mapping[str, str] | None
) -> int:
    read_fd, write_fd = os.pipe()
    try:
        first_started = _launch(first, in_fd, write_fd, env)
        os.close(write_fd)
        write_fd = None
        last_started = _launch(last, read_fd, out_fd, env)
    finally:
        _close(read_fd, write_fd, in_fd, out_fd)
    _status(first_started)
    return _status(last_started)


def run_pipeline(
    infile: str,
    first: str,
    last: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``first < infile | last > outfile`` and return the last command's status.

    The output file is created or truncated before the input file is
    opened.  If only the input file cannot be opened, the last command
    runs on empty input.  If the output file cannot be opened, the first
    command still runs and the result is 1.  If neither opens, nothing
    runs and the result is 1.
    """
    check_commands([first, last])
    out_fd = _open(outfile, os.O_CREAT | os.O_WRONLY | os.O_TRUNC)
    in_fd = _open(infile, os.O_RDONLY)
    if in_fd is None and out_fd is None:
        return 1
    if in_fd is None:
        return _run_last_only(last, out_fd, env)
    if out_fd is None:
        return _run_first_only(first, in_fd, env)
    return _run_both(first, last, in_fd, out_fd, env)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        infile, first, last, outfile = validate_arguments(argv)
        return run_pipeline(infile, first, last, outfile, os.environ)
    except UsageError as error:
        printf("%s\n", str(error))
        return 1