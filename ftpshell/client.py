"""A minimal passive-mode FTP client."""

from __future__ import annotations

import codecs
import re
import socket
from collections.abc import Callable
from contextlib import contextmanager
from typing import BinaryIO, Iterator, TextIO

CONTROL_BUFFER_LEN = 4084
DATA_BUFFER_LEN = 4084 * 1024
DEFAULT_PORT = 21

_PASV_PATTERN = re.compile(r"(\d+),(\d+),(\d+),(\d+),(\d+),(\d+)")


class FTPError(Exception):
    """Raised when an FTP operation fails."""

    def __init__(self, message: str, reply: str | None = None) -> None:
        super().__init__(message)
        self.reply = reply


@contextmanager
def _os_errors(action: str) -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        raise FTPError(f"{action}: {exc}") from exc


def parse_pasv_port(response: str) -> int:
    """Return the data port announced in a ``227`` PASV reply."""
    match = _PASV_PATTERN.search(response)
    if match is None:
        raise FTPError("malformed PASV reply", response)
    high, low = int(match.group(5)), int(match.group(6))
    return (high << 8) + low


class FTPClient:
    """Client for one FTP server, using passive mode for data transfers.

    Server replies are echoed to ``control_stream`` when one is given.
    """

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        control_stream: TextIO | None = None,
    ) -> None:
        self.host = host
        self.port = port
        self.control_stream = control_stream
        try:
            self._address = socket.gethostbyname(host)
        except OSError as exc:
            raise FTPError("Could not resolve hostname") from exc
        self._sock: socket.socket | None = None
        self._reader: BinaryIO | None = None
        self.last_reply = ""

    def __enter__(self) -> FTPClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()

    def connect(self) -> str:
        """Open the control connection and return the server greeting."""
        with _os_errors("connect to control port"):
            self._sock = socket.create_connection((self._address, self.port))
        self._reader = self._sock.makefile("rb")
        return self._read_reply()

    def login(self, user: str, password: str) -> str:
        self._command(f"USER {user}", echo=False)
        self._expect("331")
        self._command(f"PASS {password}")
        return self._expect("230")

    def cwd(self, directory: str) -> str:
        self._command(f"CWD {directory}")
        return self._expect("250")

    def pwd(self) -> str:
        self._command("PWD")
        return self._expect("257")

    def list(self, out: TextIO) -> str:
        """Write the remote directory listing to the text stream ``out``."""
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        with self._transfer("LIST") as data:
            self._receive(data, lambda chunk: out.write(decoder.decode(chunk)))
            out.write(decoder.decode(b"", final=True))
        return self._read_reply()

    def retr(self, remote_file: str, local_file: str) -> str:
        """Download ``remote_file`` into ``local_file``."""
        with self._transfer(f"RETR {remote_file}") as data:
            try:
                handle = open(local_file, "wb")
            except OSError as exc:
                self._echo(f"Can't create {local_file} file\n")
                raise FTPError(f"cannot create {local_file}") from exc
            with handle:
                self._receive(data, handle.write)
        return self._read_reply()

    def stor(self, local_file: str, remote_file: str) -> str:
        """Upload ``local_file`` as ``remote_file``."""
        return self._upload("STOR", local_file, remote_file, "Can't open {} file\n")

    def appe(self, local_file: str, remote_file: str) -> str:
        """Append the contents of ``local_file`` to ``remote_file``."""
        return self._upload(
            "APPE", local_file, remote_file, "Can't open local file: {}\n"
        )

    def dele(self, filename: str) -> str:
        self._command(f"DELE {filename}")
        return self._expect("250")

    def mkd(self, directory: str) -> str:
        self._command(f"MKD {directory}")
        return self._expect("257")

    def rmd(self, directory: str) -> str:
        self._command(f"RMD {directory}")
        return self._expect("250")

    def disconnect(self) -> None:
        """Send QUIT and close the control connection; safe to call twice."""
        if self._sock is None:
            return
        self._echo("\n")
        try:
            self._command("QUIT")
        except FTPError:
            pass
        finally:
            if self._reader is not None:
                self._reader.close()
            self._sock.close()
            self._reader = None
            self._sock = None

    def _echo(self, text: str) -> None:
        if self.control_stream is not None:
            self.control_stream.write(text)

    def _command(self, command: str, echo: bool = True) -> str:
        if self._sock is None:
            raise FTPError("not connected")
        with _os_errors("send command"):
            self._sock.sendall(f"{command}\r\n".encode())
        return self._read_reply(echo)

    def _read_line(self) -> str:
        assert self._reader is not None
        with _os_errors("control response"):
            raw = self._reader.readline(CONTROL_BUFFER_LEN)
        if not raw:
            raise FTPError("control connection closed by server")
        return raw.decode("utf-8", errors="replace")

    def _read_reply(self, echo: bool = True) -> str:
        first = self._read_line()
        lines = [first]
        if len(first) >= 4 and first[3] == "-":
            terminator = first[:3] + " "
            while not lines[-1].startswith(terminator):
                lines.append(self._read_line())
        self.last_reply = "".join(lines)
        if echo:
            self._echo(self.last_reply)
        return self.last_reply

    def _expect(self, code: str) -> str:
        if not self.last_reply.startswith(code):
            raise FTPError(
                f"expected {code}, got: {self.last_reply.strip()}", self.last_reply
            )
        return self.last_reply

    def _pasv(self) -> socket.socket:
        self._command("PASV")
        reply = self._expect("227")
        port = parse_pasv_port(reply)
        with _os_errors("connect data"):
            return socket.create_connection((self._address, port))

    def _transfer(self, command: str) -> socket.socket:
        data = self._pasv()
        try:
            self._command(command)
            self._expect("150")
        except BaseException:
            data.close()
            raise
        return data

    def _upload(
        self, verb: str, local_file: str, remote_file: str, failure: str
    ) -> str:
        with self._transfer(f"{verb} {remote_file}") as data:
            try:
                handle = open(local_file, "rb")
            except OSError as exc:
                self._echo(failure.format(local_file))
                raise FTPError(f"cannot open {local_file}") from exc
            with handle, _os_errors("send data"):
                for chunk in iter(lambda: handle.read(DATA_BUFFER_LEN), b""):
                    data.sendall(chunk)
        return self._read_reply()

    @staticmethod
    def _receive(data: socket.socket, sink: Callable[[bytes], object]) -> None:
        with _os_errors("receive data"):
            for chunk in iter(lambda: data.recv(DATA_BUFFER_LEN), b""):
                sink(chunk)