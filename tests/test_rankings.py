import pytest

from cardwheel import rankings
from cardwheel.config import DEFAULT_CONFIG
from cardwheel.rankings import FUZZY_BASE, TIERS, Ranker, rank, rank_candidates, score_entry


def test_tier_table_order():
    assert [t.name for t in TIERS] == ["exact", "prefix", "word_start", "substring"]
    scores = [t.score for t in TIERS]
    assert scores == sorted(scores)
    assert all(s < FUZZY_BASE for s in scores)


@pytest.mark.parametrize("entry, query, expected", [
    ("lotus", "lotus", 0),
    ("lotus petal", "lotus", 10),
    ("black lotus", "lotus", 20),
    ("blotus", "lotus", 30),
    ("black lotus", "lotis", 101),
    ("lotus", "black lotis", 107),
])
def test_score_entry(entry, query, expected):
    assert score_entry(entry, query) == expected


def test_reflexive(lotus_catalog):
    for name in lotus_catalog:
        assert rank(name, lotus_catalog, 1) == [name]
        assert rank_candidates(name, lotus_catalog)[0].score == 0


def test_prefix_beats_fuzzy():
    result = rank("aard", ["Zebra", "Aardwolf", "Aardvark"], 3)
    assert result == ["Aardvark", "Aardwolf", "Zebra"]

    scored = rank_candidates("aard", ["Aardvark", "Aardwolf", "Zebra"])
    assert [c.score for c in scored[:2]] == [10, 10]
    assert scored[2].score >= FUZZY_BASE


def test_tiers_in_order(lotus_catalog):
    result = rank("lotus", lotus_catalog, 15)
    assert result == [
        "Lotus",
        "Lotus Bloom",
        "Lotus Petal",
        "Black Lotus",
        "Blotus",
        "Mox Pearl",
    ]


def test_tie_break_on_normalized_text():
    assert rank("ray", ["Beta Ray", "Alpha Ray"], 5) == ["Alpha Ray", "Beta Ray"]
    # same normalized text → original text decides
    assert rank("bside", ["b-side", "Bside"], 5) == ["Bside", "b-side"]


def test_limit_truncates(lotus_catalog):
    assert rank("lotus", lotus_catalog, 2) == ["Lotus", "Lotus Bloom"]


def test_bad_limit(lotus_catalog):
    with pytest.raises(ValueError):
        rank("lotus", lotus_catalog, 0)


@pytest.mark.parametrize("query", ["", "   ", "\t\n", "!!!"])
def test_blank_query_is_empty(query, lotus_catalog):
    assert rank(query, lotus_catalog, 5) == []
    assert Ranker(lotus_catalog).resolve(query) is None


def test_empty_catalog():
    assert rank("lotus", [], 5) == []
    assert Ranker([]).resolve("lotus") is None


def test_malformed_entries_are_skipped():
    assert rank("lotus", ["Lotus", None, 42, "", "  "], 5) == ["Lotus"]


def test_display_uses_original_text():
    assert rank("jace the mind", ["Jace, the Mind-Sculptor"], 1) == ["Jace, the Mind-Sculptor"]


def test_resolve_takes_top_result(lotus_catalog):
    ranker = Ranker(lotus_catalog)
    assert ranker.resolve("lotus") == "Lotus"
    assert ranker.resolve("black lot") == "Black Lotus"
    assert ranker.resolve("mox perl") == "Mox Pearl"


def test_cache_returns_identical_results(lotus_catalog):
    ranker = Ranker(lotus_catalog)
    first = ranker.rank("lotus")
    second = ranker.rank("lotus")
    assert first == second


def test_cache_single_slot(monkeypatch, lotus_catalog):
    calls = []
    real = rankings._rank_prepared

    def counting(query, entries):
        calls.append(query)
        return real(query, entries)

    monkeypatch.setattr(rankings, "_rank_prepared", counting)
    ranker = Ranker(lotus_catalog)

    ranker.rank("lotus")
    ranker.rank("lotus", limit=1)
    assert calls == ["lotus"]

    # a different query evicts the slot
    ranker.rank("mox")
    ranker.rank("lotus")
    assert calls == ["lotus", "mox", "lotus"]


def test_cache_slices_full_result(lotus_catalog):
    ranker = Ranker(lotus_catalog)
    assert ranker.rank("lotus", limit=1) == ["Lotus"]
    assert ranker.rank("lotus", limit=3) == ["Lotus", "Lotus Bloom", "Lotus Petal"]


def test_cached_result_not_shared(lotus_catalog):
    ranker = Ranker(lotus_catalog)
    first = ranker.rank_candidates("lotus")
    first.clear()
    assert len(ranker.rank_candidates("lotus")) == len(lotus_catalog)


def test_default_limit_matches_config():
    names = [f"Card {i:02d}" for i in range(40)]
    assert len(rank("card", names)) == DEFAULT_CONFIG.suggestion_limit
    assert len(Ranker(names).rank("card")) == DEFAULT_CONFIG.suggestion_limit


def test_catalog_captured_at_construction():
    names = ["Lotus Petal", "Black Lotus"]
    ranker = Ranker(names)
    before = ranker.rank("lotus")

    # an exact match added afterwards is never seen, cached or not
    names.append("Lotus")
    assert ranker.rank("lotus") == before
    ranker.rank("petal")
    assert ranker.rank("lotus") == before == ["Lotus Petal", "Black Lotus"]
    assert rank("lotus", names, 1) == ["Lotus"]
