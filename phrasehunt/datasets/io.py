from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def split_wordlist(text: str) -> List[str]:
    """
    Turn newline-delimited word-list text into a list of words.

    Every carriage return is removed first (the published list mixes CRLF
    and LF), then the text is split on '\\n'. Blank entries are kept; the
    candidate filter drops them.
    """
    return text.replace("\r", "").split("\n")


def read_wordlist(p: Path | str) -> str:
    """
    Read a word-list file as raw text (split it with split_wordlist).

    Bytes that are not valid UTF-8 become U+FFFD instead of aborting the
    run; such entries simply fail the candidate filter.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8", errors="replace")


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
