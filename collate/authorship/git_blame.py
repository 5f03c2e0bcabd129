"""Git blame authorship source.

Runs ``git blame -C --line-porcelain`` once per file. In line-porcelain
mode every line of the file gets a full header block; the ``author-mail``
header names the author and the TAB-prefixed line that closes the block
is the file content itself.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from loguru import logger

from collate.authorship.protocols import LineAuthorship
from collate.constants import GIT_BLAME_ARGS
from collate.types.errors import HistoryUnavailableError, InconsistentLineCountError
from collate.utils.subprocess_util import format_command, subprocess_kwargs

_AUTHOR_MAIL = "author-mail "
_CONTENT_PREFIX = "\t"


def parse_line_porcelain(output: str, file_path: str | None = None) -> list[str]:
    """Parse ``--line-porcelain`` output into one author e-mail per line.

    Args:
        output: Raw stdout of git blame.
        file_path: Used only for error context.

    Returns:
        Author e-mail addresses (angle brackets removed) in line order.

    Raises:
        HistoryUnavailableError: A content line appeared before any author.
    """
    authors: list[str] = []
    current: str | None = None
    for raw in output.split("\n"):
        if raw.startswith(_CONTENT_PREFIX):
            if current is None:
                raise HistoryUnavailableError(
                    "blame output has a content line without an author-mail header",
                    file_path=file_path,
                )
            authors.append(current)
        elif raw.startswith(_AUTHOR_MAIL):
            current = raw[len(_AUTHOR_MAIL):].strip().removeprefix("<").removesuffix(">")
    return authors


class GitBlameAuthorship:
    """LineAuthorship backed by ``git blame``.

    The command is run from the file's own directory so any path inside a
    working tree resolves, whatever the caller's cwd.
    """

    def __init__(self, git_executable: str = "git") -> None:
        self._git = git_executable

    @property
    def name(self) -> str:
        return "git_blame"

    def line_authors(self, file_path: Path) -> list[str]:
        path = Path(file_path).resolve()
        args = [self._git, *GIT_BLAME_ARGS, "--", path.name]
        logger.debug("Running {} in {}", format_command(args), path.parent)
        try:
            proc = subprocess.run(
                args,
                cwd=path.parent,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
                **subprocess_kwargs(),
            )
        except OSError as e:
            raise HistoryUnavailableError(
                f"could not run {self._git}: {e}",
                file_path=str(file_path),
                original_error=e,
            ) from e

        if proc.returncode != 0:
            raise HistoryUnavailableError(
                f"git blame exited with status {proc.returncode}: {proc.stderr.strip()}",
                file_path=str(file_path),
            )
        return parse_line_porcelain(proc.stdout, str(file_path))


def resolve_authorship(
    source: LineAuthorship,
    file_path: Path,
    line_count: int,
) -> list[str]:
    """Fetch the authorship table for a file and check it covers every line.

    Raises:
        InconsistentLineCountError: The source attributed a different
            number of lines than the file has.
    """
    authors = source.line_authors(file_path)
    if len(authors) != line_count:
        raise InconsistentLineCountError(str(file_path), expected=line_count, actual=len(authors))
    return authors
