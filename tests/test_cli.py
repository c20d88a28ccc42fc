import json
from pathlib import Path

import pytest

from apps.cli import run, run_multi
from phrasehunt.datasets import WordlistUnavailable

# md5 of this phrase is the default digest
PUBLISHED = "pastils turnout towy"
PUBLISHED_WORDS = ["towy", "turnout", "pastils"]


def _wordlist(tmp_path: Path, words) -> str:
    p = tmp_path / "wordlist.txt"
    p.write_text("\r\n".join(words) + "\r\n", encoding="utf-8")
    return str(p)


def test_run_finds_phrase(tmp_path: Path, capsys):
    path = _wordlist(tmp_path, ["poultry", "ants", "outwits", "trout", "pity"] + PUBLISHED_WORDS)
    code = run.main(["--wordlist", path, "--progress", "off", "--outdir", str(tmp_path / "out")])
    out = capsys.readouterr().out
    assert code == run.EXIT_FOUND
    assert f"Found secret phrase: {PUBLISHED}" in out

    manifests = list((tmp_path / "out").glob("run_*_manifest.json"))
    assert len(manifests) == 1
    data = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert data["result"]["phrase"] == PUBLISHED
    assert data["wordlist"]["usable_count"] == 8


def test_run_not_found(tmp_path: Path, capsys):
    path = _wordlist(tmp_path, ["poultry", "outwits", "trout"])
    code = run.main(["--wordlist", path, "--progress", "plain", "--solver", "nested"])
    assert code == run.EXIT_NOT_FOUND
    assert "Could not find the secret phrase" in capsys.readouterr().out


def test_run_missing_wordlist(tmp_path: Path, capsys):
    code = run.main(["--wordlist", str(tmp_path / "nope.txt"), "--progress", "off"])
    assert code == run.EXIT_UNAVAILABLE
    assert "could not be fetched" in capsys.readouterr().out


def test_run_fetch_failure(monkeypatch, capsys):
    def unavailable(url, timeout):
        raise WordlistUnavailable("offline")

    monkeypatch.setattr(run, "fetch_wordlist", unavailable)
    assert run.main(["--progress", "off"]) == run.EXIT_UNAVAILABLE


def test_run_multi_agrees(tmp_path: Path, capsys):
    path = _wordlist(tmp_path, ["poultry", "ants", "outwits", "trout"])
    code = run_multi.main(["--wordlist", path, "--solvers", "nested", "frontier",
                           "--outdir", str(tmp_path / "cmp")])
    assert code == 0
    assert "All runs agree: True" in capsys.readouterr().out
    assert len(list((tmp_path / "cmp").glob("compare_*.csv"))) == 1


def test_run_poultry_phrase_with_its_own_digest(tmp_path: Path, capsys):
    path = _wordlist(tmp_path, ["poultry", "ants", "outwits", "trout"])
    code = run.main(["--wordlist", path, "--progress", "off",
                     "--digest", "8b35bbd7ff2f5dd7c94fffbb1a3512bc"])
    assert code == run.EXIT_FOUND
    assert "Found secret phrase: poultry outwits ants" in capsys.readouterr().out


def test_run_workers_needs_parallel_solver(tmp_path: Path, capsys):
    path = _wordlist(tmp_path, PUBLISHED_WORDS)
    with pytest.raises(SystemExit) as exc:
        run.main(["--wordlist", path, "--progress", "off", "--workers", "2"])
    assert exc.value.code == 2
    assert "--workers only applies to --solver parallel" in capsys.readouterr().err


def test_run_parallel_with_workers(tmp_path: Path, capsys):
    path = _wordlist(tmp_path, ["poultry", "ants"] + PUBLISHED_WORDS)
    code = run.main(["--wordlist", path, "--progress", "off",
                     "--solver", "parallel", "--workers", "2"])
    assert code == run.EXIT_FOUND
    assert f"Found secret phrase: {PUBLISHED}" in capsys.readouterr().out


def test_run_tolerates_invalid_utf8_in_wordlist(tmp_path: Path, capsys):
    p = tmp_path / "wordlist.txt"
    p.write_bytes(b"pastils\n\xff\xfe\nturnout\npo\xe9ltry\ntowy\n")
    code = run.main(["--wordlist", str(p), "--progress", "off"])
    out = capsys.readouterr().out
    assert code == run.EXIT_FOUND
    assert f"Found secret phrase: {PUBLISHED}" in out


def test_run_rejects_mistyped_config(tmp_path: Path, capsys):
    cfg = tmp_path / "puzzle.json"
    cfg.write_text(json.dumps({"max_depth": "3"}), encoding="utf-8")
    path = _wordlist(tmp_path, PUBLISHED_WORDS)
    with pytest.raises(SystemExit) as exc:
        run.main(["--wordlist", path, "--progress", "off", "--config", str(cfg)])
    assert exc.value.code == 2
    assert "max_depth must be an integer" in capsys.readouterr().err
