# apps/cli/run.py
"""
CLI entry point for finding the secret phrase.

This script:
  1) Loads the word list (local file via --wordlist, otherwise HTTP fetch).
  2) Prints a one-line summary (entries, unique words, usable words, SHA).
  3) Runs the requested search strategy with a live progress indicator and
     prints the verified phrase, or says it could not be found.
  4) Optionally writes a JSON manifest (config, word-list summary, result).

Exit codes: 0 found, 1 not found, 2 word list unavailable.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from phrasehunt.datasets import (
    WordlistUnavailable, fetch_wordlist, pretty_summary, read_wordlist, split_wordlist,
    summarize_wordlist,
)
from phrasehunt.harness import PuzzleConfig, load_config, solve
from phrasehunt.harness.io import write_manifest, timestamp_id, git_commit_or_unknown
from phrasehunt.solvers import get_solver_ids

EXIT_FOUND, EXIT_NOT_FOUND, EXIT_UNAVAILABLE = 0, 1, 2


class Progress:
    """
    Progress sink for the search: tqdm bar, plain stderr line, or nothing.

    The search reports (done, total, word) after each first-level word.
    """

    def __init__(self, mode: str):
        if mode == "auto":
            mode = "bar" if sys.stderr.isatty() else "plain"
        self.mode = mode
        self.bar = None
        self.start = time.time()
        self.last_print = 0.0

    def __call__(self, done: int, total: int, word: str) -> None:
        if self.mode == "bar":
            if self.bar is None:
                self.bar = tqdm(total=total, ncols=80, desc="Searching", unit="word")
            self.bar.update(done - self.bar.n)
            self.bar.set_postfix_str(word, refresh=False)
        elif self.mode == "plain":
            now = time.time()
            if (now - self.last_print >= 1.0) or (done == total):
                elapsed = now - self.start
                rate = (done / elapsed) if elapsed > 0 else 0.0
                remaining = (total - done) / rate if rate > 0 else 0.0
                pct = 100.0 * done / max(1, total)
                sys.stderr.write(
                    f"\r[{done}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                self.last_print = now

    def close(self) -> None:
        if self.bar is not None:
            self.bar.close()
        elif self.mode == "plain" and self.last_print:
            sys.stderr.write("\n"); sys.stderr.flush()


def build_config(args) -> PuzzleConfig:
    """Config file (if any) first, then explicit CLI flags on top."""
    config = load_config(args.config) if args.config else PuzzleConfig()
    overrides = {
        "phrase": args.phrase,
        "digest": args.digest,
        "max_depth": args.max_depth,
        "digest_algorithm": args.digest_algorithm,
        "wordlist_url": args.url,
        "timeout": args.timeout,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    return config.validate()


def load_words(args, config: PuzzleConfig) -> str:
    """Raw word-list text from --wordlist or the configured URL."""
    if args.wordlist:
        try:
            return read_wordlist(args.wordlist)
        except FileNotFoundError as e:
            raise WordlistUnavailable(f"word list file not found: {e}") from e
    return fetch_wordlist(config.wordlist_url, timeout=config.timeout)


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--wordlist", help="read the word list from this file instead of fetching it")
    ap.add_argument("--url", help="word list URL (default: the puzzle's published list)")
    ap.add_argument("--config", help="JSON file with PuzzleConfig fields")
    ap.add_argument("--phrase", help="known anagram of the secret phrase")
    ap.add_argument("--digest", help="expected lowercase hex digest of the secret phrase")
    ap.add_argument("--digest-algorithm", help="hashlib algorithm of --digest (default md5)")
    ap.add_argument("--max-depth", type=int, help="max words per combination (default 3)")
    ap.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None) -> int:
    """
    Parse CLI args, load the word list, search, and report.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="phrasehunt: find the secret phrase")
    add_common_args(ap)
    ap.add_argument("--solver", default="frontier",
                    help=f"search strategy id (one of: {solver_choices})")
    ap.add_argument("--workers", type=int, help="process count for the parallel solver")
    ap.add_argument("--outdir", help="write a run manifest into this directory")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show search progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)
    if args.workers is not None and args.solver != "parallel":
        ap.error("--workers only applies to --solver parallel")
    setup_logging(args.log_level)

    try:
        config = build_config(args)
    except (ValueError, FileNotFoundError) as e:
        ap.error(str(e))

    # 1) Load the word list
    print("----------- STEP 1: Load word list -----------")
    try:
        text = load_words(args, config)
    except WordlistUnavailable as e:
        logging.getLogger(__name__).error("%s", e)
        print("The wordlist could not be fetched")
        return EXIT_UNAVAILABLE
    words = split_wordlist(text)

    # 2) Summarize it against the target
    print("----------- STEP 2: Filter word list -----------")
    rep = summarize_wordlist(text, config.target())
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  note: {issue}")

    # 3) Search
    print("----------- STEP 3: Find secret phrase -----------")
    solver_kwargs = {"max_workers": args.workers} if args.workers is not None else {}
    progress = Progress(args.progress) if args.progress != "off" else None
    try:
        result = solve(words, config, solver_id=args.solver, progress=progress, **solver_kwargs)
    except ValueError as e:
        ap.error(str(e))
    finally:
        if progress:
            progress.close()

    print("----------- RESULT -----------")
    if result["found"]:
        print(f"Found secret phrase: {result['phrase']} - In {result['time_ms'] / 1000.0:.2f} seconds.")
    else:
        print("Could not find the secret phrase :-(")

    # 4) Optional manifest
    if args.outdir:
        run_id = timestamp_id()
        manifest_path = Path(args.outdir) / f"run_{run_id}_manifest.json"
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": dict(config.as_dict(), solver=args.solver, wordlist=args.wordlist),
            "wordlist": rep,
            "result": result,
        }
        write_manifest(manifest, str(manifest_path))
        print(f"Wrote: {manifest_path}")

    return EXIT_FOUND if result["found"] else EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
