# apps/cli/run_multi.py
"""
Run several search strategies on one word list and compare them.

Every strategy must return the same phrase (the search order is fixed), so
this doubles as a determinism check. Writes to:
<outdir>/compare_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse, sys
from pathlib import Path

from phrasehunt.datasets import WordlistUnavailable, pretty_summary, split_wordlist, summarize_wordlist
from phrasehunt.harness import solve
from phrasehunt.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from phrasehunt.solvers import get_solver_ids

from apps.cli.run import EXIT_UNAVAILABLE, add_common_args, build_config, load_words, setup_logging


def main(argv=None) -> int:
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="phrasehunt: run many search strategies at once")
    add_common_args(ap)
    ap.add_argument("--solvers", nargs="+", default=["ALL"],
                    help=f"list of solver ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="solver ids to skip (only if --solvers ALL)")
    ap.add_argument("--repeat", type=int, default=1, help="runs per solver (checks determinism)")
    ap.add_argument("--outdir", default="reports/compare")
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = build_config(args)
    except (ValueError, FileNotFoundError) as e:
        ap.error(str(e))

    # 1) load and summarize once
    try:
        text = load_words(args, config)
    except WordlistUnavailable as e:
        print(f"The wordlist could not be fetched ({e})")
        return EXIT_UNAVAILABLE
    words = split_wordlist(text)
    rep = summarize_wordlist(text, config.target())
    print(pretty_summary(rep))

    # 2) expand solvers
    if len(args.solvers) == 1 and args.solvers[0].lower() == "all":
        todo = [s for s in registered if s not in set(args.exclude)]
    else:
        todo = args.solvers
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown solver ids: {missing}. Registered: {registered}")

    # 3) run each solver sequentially on the same words
    results = []
    for sid in todo:
        for _ in range(max(1, args.repeat)):
            r = solve(words, config, solver_id=sid)
            results.append(r)
            print(f"{sid:>10} | {r['phrase'] or '-':<30} | {r['time_ms']:10.1f} ms "
                  f"| visited={r['stats']['visited']}")

    phrases = {r["phrase"] for r in results}
    agree = len(phrases) == 1
    print(f"All runs agree: {agree}")

    # 4) outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"compare_{run_id}.csv"
    manifest_path = outdir / f"compare_{run_id}_manifest.json"
    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": dict(config.as_dict(), solvers=todo, repeat=args.repeat),
        "wordlist": rep,
        "agree": agree,
        "results": results,
    }, str(manifest_path))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0 if agree else 1


if __name__ == "__main__":
    sys.exit(main())
