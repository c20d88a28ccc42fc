import pytest
from phrasehunt.engine import Target, filter_candidates, order_candidates, md5_hex
from phrasehunt.solvers import create_solver, get_solver_ids

SECRET = "poultry outwits ants"
SECRET_MD5 = md5_hex(SECRET)
# the puzzle's published digest; its preimage is this anagram of SECRET
PUBLISHED = "pastils turnout towy"
PUBLISHED_MD5 = "4624d200580677270a54ccff86b9610e"

WORDS = [
    "trout", "ant", "poultry", "pity", "wits", "", "outs", "Poultry", "ants",
    "nuts", "tulips", "a", "zebra", "outwits", "outwitss", "ants", "sun",
]


def _candidates(words=WORDS, phrase=SECRET):
    target = Target.from_phrase(phrase)
    return order_candidates(filter_candidates(words, target)), target


def _recorder(calls):
    def digest(text):
        calls.append(text)
        return md5_hex(text)
    return digest


def test_registry_lists_all_strategies():
    assert get_solver_ids() == ["frontier", "nested", "parallel"]
    with pytest.raises(ValueError):
        create_solver("bogus")
    with pytest.raises(ValueError):
        create_solver("frontier", max_depth=0)


@pytest.mark.parametrize("solver_id", ["nested", "frontier"])
def test_finds_secret_phrase(solver_id):
    words, target = _candidates()
    r = create_solver(solver_id).search(words, target, SECRET_MD5)
    assert r.found
    assert r.phrase == SECRET
    assert sorted(r.combination) == ["ants", "outwits", "poultry"]
    assert r.stats.matches >= 1


def test_parallel_matches_frontier():
    words, target = _candidates()
    seq = create_solver("frontier").search(words, target, SECRET_MD5)
    par = create_solver("parallel", max_workers=2).search(words, target, SECRET_MD5)
    assert par.phrase == seq.phrase == SECRET
    assert par.combination == seq.combination


def test_parallel_stops_counting_at_the_winning_branch():
    words, target = _candidates()
    seq = create_solver("frontier").search(words, target, SECRET_MD5)
    par = create_solver("parallel", max_workers=2).search(words, target, SECRET_MD5)
    # branches after the winner may still be running; none of their work is merged
    for counter in ("visited", "pruned", "matches", "rejected"):
        assert getattr(par.stats, counter) == getattr(seq.stats, counter)


@pytest.mark.parametrize("solver_id", ["nested", "frontier", "parallel"])
def test_finds_phrase_for_published_digest(solver_id):
    words, target = _candidates(WORDS + ["towy", "turnout", "pastils"])
    r = create_solver(solver_id).search(words, target, PUBLISHED_MD5)
    assert r.phrase == PUBLISHED
    assert sorted(r.combination) == ["pastils", "towy", "turnout"]


@pytest.mark.parametrize("solver_id", ["nested", "frontier", "parallel"])
def test_not_found_without_the_needed_word(solver_id):
    words, target = _candidates([w for w in WORDS if w != "ants"])
    r = create_solver(solver_id).search(words, target, SECRET_MD5)
    assert not r.found
    assert r.phrase is None and r.combination is None


@pytest.mark.parametrize("solver_id", ["nested", "frontier"])
def test_overlong_combinations_never_reach_verifier(solver_id):
    calls = []
    words, target = _candidates()
    r = create_solver(solver_id, max_depth=4).search(
        words, target, "0" * 32, digest_fn=_recorder(calls))
    assert not r.found
    assert calls, "expected at least one histogram-equal combination"
    assert all(len(c.replace(" ", "")) == target.length for c in calls)


def test_frontier_terminates_on_hopeless_words():
    target = Target.from_phrase(SECRET)
    # letters outside the target: every seed is pruned at once
    r = create_solver("frontier").search(["z", "q", "x"], target, SECRET_MD5)
    assert not r.found
    assert r.stats.visited == 3 and r.stats.pruned == 3


def test_frontier_terminates_when_depth_runs_out():
    target = Target.from_phrase(SECRET)
    r = create_solver("frontier", max_depth=3).search(["a", "n", "s"], target, SECRET_MD5)
    assert not r.found
    assert r.stats.matches == 0
    # 3 seeds, 9 pairs ("a a" and "n n" pruned), 7 * 3 triples, no deeper
    assert r.stats.visited == 33


def test_frontier_depth_first_visit_order():
    # "tab cat": any pair holding one b and one c is a histogram match
    words, target = _candidates(["cat", "tab", "act", "bat"], "tab cat")
    assert words == ["act", "bat", "cat", "tab"]
    calls = []
    r = create_solver("frontier", max_depth=2).search(
        words, target, "0" * 32, digest_fn=_recorder(calls))
    assert not r.found
    # first seed first; its children from the last word back to the first
    assert calls[:4] == ["act tab", "tab act", "act bat", "bat act"]
    assert r.stats.matches == 8 and r.stats.rejected == 8


def test_frontier_rejected_match_does_not_stop_search():
    words, target = _candidates(["cat", "tab", "act", "bat"], "tab cat")
    r = create_solver("frontier", max_depth=2).search(words, target, md5_hex("bat act"))
    assert r.phrase == "bat act"
    assert r.combination == ("act", "bat")
    assert r.stats.rejected == 1


def test_nested_uses_exactly_three_words():
    words, target = _candidates(["cat", "tab", "act", "bat"], "tab cat")
    r = create_solver("nested").search(words, target, md5_hex("bat act"))
    assert not r.found


@pytest.mark.parametrize("solver_id", ["nested", "frontier"])
def test_deterministic_over_unsorted_input(solver_id):
    target = Target.from_phrase(SECRET)
    runs = []
    for words in (WORDS, list(reversed(WORDS)), WORDS):
        cands = order_candidates(filter_candidates(words, target))
        r = create_solver(solver_id).search(cands, target, SECRET_MD5)
        runs.append((r.phrase, r.combination, r.stats.visited))
    assert runs[0] == runs[1] == runs[2]


def test_progress_reports_each_first_level_word():
    words, target = _candidates([w for w in WORDS if w != "ants"])
    seen = []
    create_solver("frontier").search(words, target, SECRET_MD5,
                                     progress=lambda done, total, w: seen.append((done, total, w)))
    assert [s[2] for s in seen] == words
    assert seen[-1][0] == seen[-1][1] == len(words)
