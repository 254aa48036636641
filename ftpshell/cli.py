"""Interactive command shell for the FTP client."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

from ftpshell.client import FTPClient, FTPError

PROMPT = "ftp> "
USAGE = "Usage: ftp <host> <user> <password>"


class UsageError(Exception):
    """Raised when a shell command is unknown or given the wrong arguments."""


class _UnknownCommandError(UsageError):
    pass


@dataclass(frozen=True)
class _Command:
    method: str
    arity: int
    usage: str


_COMMANDS = {
    "CWD": _Command("cwd", 1, "CWD <remote-dir>"),
    "RETR": _Command("retr", 2, "RETR <remote-file> <local-file>"),
    "STOR": _Command("stor", 2, "STOR <local-file> <remote-file>"),
    "APPE": _Command("appe", 2, "APPE <local-file> <remote-file>"),
    "DELE": _Command("dele", 1, "DELE <filename>"),
    "MKD": _Command("mkd", 1, "MKD <directory>"),
    "RMD": _Command("rmd", 1, "RMD <directory>"),
}


def split_words(line: str) -> list[str]:
    """Split an input line on whitespace."""
    return line.split()


def run_command(ftp: FTPClient, words: Sequence[str], out: TextIO) -> None:
    """Run one shell command; raise UsageError or FTPError on failure."""
    name, args = words[0], list(words[1:])
    if name == "PWD":
        ftp.pwd()
        return
    if name == "LIST":
        ftp.list(out)
        return
    command = _COMMANDS.get(name)
    if command is None:
        raise _UnknownCommandError("Unknown command")
    if len(args) != command.arity:
        raise UsageError(f"Wrong argument for {name}\n{command.usage}")
    getattr(ftp, command.method)(*args)


def interact(
    ftp: FTPClient, lines: Iterable[str], out: TextIO, err: TextIO
) -> None:
    """Read commands from ``lines`` until QUIT or end of input."""
    out.write(PROMPT)
    out.flush()
    for line in lines:
        words = split_words(line)
        if not words:
            continue
        if words[0] == "QUIT":
            return
        try:
            run_command(ftp, words, out)
        except _UnknownCommandError as exc:
            err.write(f"{exc}\n")
        except UsageError as exc:
            err.write(f"{exc}\n")
            err.write(f"Failed to: {words[0]}\n")
        except FTPError:
            err.write(f"Failed to: {words[0]}\n")
        out.write(PROMPT)
        out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        sys.stderr.write(f"{USAGE}\n")
        return 1
    host, user, password = args

    try:
        ftp = FTPClient(host, control_stream=sys.stdout)
    except FTPError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    with ftp:
        try:
            ftp.connect()
        except FTPError:
            sys.stderr.write("Failed to connect\n")
            return 1
        try:
            ftp.login(user, password)
        except FTPError:
            sys.stderr.write("Failed to login\n")
            return 1
        interact(ftp, sys.stdin, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())