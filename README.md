# ftpshell

A small interactive FTP client. It connects to a server on port 21, logs
in, and then reads commands line by line from standard input. Every data
transfer uses passive mode (`PASV`).

## Installation

```
pip install .
```

## Usage

```
ftpshell <host> <user> <password>
```

The same shell can be started with `python -m ftpshell.cli`.

With the wrong number of arguments the command prints
`Usage: ftp <host> <user> <password>` and exits with status 1. It also
exits with status 1 when the host name cannot be resolved, when the
connection fails (`Failed to connect`) or when the login is refused
(`Failed to login`).

Once logged in, the shell echoes the server's replies and shows the
prompt `ftp> `. Commands are written in upper case:

| Command                           | Action                                   |
|-----------------------------------|------------------------------------------|
| `CWD <remote-dir>`                | change the remote directory              |
| `PWD`                             | print the remote directory               |
| `LIST`                            | list the remote directory                |
| `RETR <remote-file> <local-file>` | download a file                          |
| `STOR <local-file> <remote-file>` | upload a file                            |
| `APPE <local-file> <remote-file>` | append a local file to a remote file     |
| `DELE <filename>`                 | delete a remote file                     |
| `MKD <directory>`                 | create a remote directory                |
| `RMD <directory>`                 | remove a remote directory                |
| `QUIT`                            | leave the shell                          |

Empty lines are ignored. An unknown command prints `Unknown command`.
A command given the wrong number of arguments prints its usage line and
`Failed to: <command>`; a command the server refuses, or whose transfer
fails, prints `Failed to: <command>`. In every case the shell keeps going.
`QUIT` or end of input (Ctrl-D) ends the session; the client then sends
`QUIT` to the server and closes the connection.

## Library use

`ftpshell.client.FTPClient` can be used on its own. Each method sends one
FTP command, checks the reply code and returns the server's reply text;
when something goes wrong it raises `FTPError`, whose `reply` attribute
holds the server's reply where there was one.

```python
import sys
from ftpshell.client import FTPClient, FTPError

password = "password"
with FTPClient("ftp.example.com", 21, sys.stdout) as ftp:
    ftp.connect()
    ftp.login("user", password)
    ftp.cwd("pub")
    ftp.list(sys.stdout)
    ftp.retr("readme.txt", "readme.txt")
```

- `connect()` opens the control connection and returns the greeting.
- `login(user, password)`, `cwd(directory)`, `pwd()`, `dele(filename)`,
  `mkd(directory)` and `rmd(directory)` send the matching command.
- `list(out)` writes the directory listing, decoded as UTF-8, to a text
  stream.
- `retr(remote_file, local_file)`, `stor(local_file, remote_file)` and
  `appe(local_file, remote_file)` transfer files in binary form.
- `disconnect()` sends `QUIT` and closes the connection; it is safe to
  call more than once, and leaving the `with` block calls it.

When a control stream is given, server replies are written to it.
`parse_pasv_port(response)` returns the data port announced in a `227`
reply.

## What it does not do

- Only passive mode is supported; there is no active (`PORT`) mode.
- There is no TLS, so passwords and data travel in clear text.
- The shell always uses port 21; a different port is only available
  through `FTPClient`.
- It sends no `TYPE` command, so transfers use the server's default type.
- There is no renaming, no recursive transfer and no command history.

## Tests

```
pip install ".[test]"
pytest
```