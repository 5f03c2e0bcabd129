"""Helpers for running external tools such as ``git blame``."""

import platform
import shlex
import subprocess


def subprocess_kwargs() -> dict:
    """Keyword arguments shared by every external tool invocation.

    On Windows the child is started without a console window so a blame
    per file does not flash one up for each file.
    """
    kwargs = {}
    if platform.system() == "Windows":
        kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW  # type: ignore[attr-defined]
    return kwargs


def format_command(args: list[str]) -> str:
    """Render an argument vector as a copy-pasteable shell command."""
    return " ".join(shlex.quote(arg) for arg in args)
