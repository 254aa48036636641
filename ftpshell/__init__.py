"""Passive-mode FTP client (ftpshell.client) and its interactive shell (ftpshell.cli)."""

__version__ = "0.1.0"