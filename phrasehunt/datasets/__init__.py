from .validator import summarize_wordlist, pretty_summary
from .io import read_wordlist, split_wordlist, write_lines
from .fetch import fetch_wordlist, WordlistUnavailable

__all__ = [
    "summarize_wordlist", "pretty_summary",
    "read_wordlist", "split_wordlist", "write_lines",
    "fetch_wordlist", "WordlistUnavailable",
]
