from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from wordlestrat.engine.errors import WordListNotFoundError


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises WordListNotFoundError if the path doesn't exist or can't be read.
    """
    p = Path(p)
    if not p.is_file():
        raise WordListNotFoundError(f"Word list not found at path: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise WordListNotFoundError(f"Word list unreadable at path: {p} ({e})") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
