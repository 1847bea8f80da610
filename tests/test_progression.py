"""Tests for the cross-mod boss progression index."""
from __future__ import annotations

from types import SimpleNamespace

from core.terraria.models import Boss
from core.terraria.progression import SENTINEL_RANK, ProgressionIndex


def test_total_order_follows_mod_priority_then_order(index):
    names = [b.name for b in index.all()]
    assert names == [
        "King Slime",
        "Eye of Cthulhu",
        "The Eater of Worlds",
        "Moon Lord",
        "Desert Scourge",
        "Supreme Witch, Calamitas",
        "The Grand Thunder Bird",
    ]


def test_rank_is_position_not_order_field(index):
    # Desert Scourge is order 1 in its mod but comes after every vanilla boss
    assert index.rank_of("Desert Scourge") == 4
    assert index.rank_of("Moon Lord") == 3


def test_empty_names_rank_last(index):
    assert index.rank_of("") == SENTINEL_RANK
    assert index.rank_of(None) == SENTINEL_RANK
    assert index.rank_of("   ") == SENTINEL_RANK


def test_exact_match_is_case_insensitive_and_trimmed(index):
    assert index.rank_of("King Slime") == 0
    assert index.rank_of("KING SLIME") == 0
    assert index.rank_of("  moon lord ") == 3
    assert index.lookup("moon lord") == (3, "exact")


def test_partial_match_both_directions(index):
    # table name contains the query
    assert index.rank_of("eater of worlds") == 2
    # query contains the table name
    assert index.rank_of("Moon Lord (second phase)") == 3
    assert index.lookup("eater of worlds") == (2, "partial")


def test_unknown_names_rank_last(index):
    assert index.rank_of("Plantera") == SENTINEL_RANK
    assert index.lookup("Plantera") == (SENTINEL_RANK, "unknown")
    assert not index.is_known("Plantera")
    assert index.is_known("eye of cthulhu")


def test_mod_priority_dominates_order():
    a = Boss(id=5, name="A", mod="vanilla", order=5)
    b = Boss(id=100001, name="B", mod="calamity", order=1)
    idx = ProgressionIndex.build({"calamity": [b], "vanilla": [a]})
    assert idx.rank_of("A") == 0
    assert idx.rank_of("B") == 1


def test_unknown_mod_sorts_after_known_mods():
    extra = Boss(id=900001, name="Abominationn", mod="fargos", order=1)
    lich = Boss(id=200009, name="Lich", mod="thorium", order=9)
    idx = ProgressionIndex.build({"fargos": [extra], "thorium": [lich]})
    assert [b.name for b in idx.all()] == ["Lich", "Abominationn"]


def test_missing_order_sorts_last_within_mod():
    rows = [
        Boss(id=1, name="No Order", mod="vanilla", order=0),
        Boss(id=2, name="Second", mod="vanilla", order=2),
    ]
    idx = ProgressionIndex.build({"vanilla": rows})
    assert [b.name for b in idx.all()] == ["Second", "No Order"]


def test_ties_keep_input_order():
    rows = [
        Boss(id=1, name="First In", mod="vanilla", order=3),
        Boss(id=2, name="Second In", mod="vanilla", order=3),
    ]
    idx = ProgressionIndex.build({"vanilla": rows})
    assert idx.rank_of("First In") == 0
    assert idx.rank_of("Second In") == 1


def test_table_key_fills_missing_mod():
    idx = ProgressionIndex.build({"calamity": [Boss(id=100002, name="Crabulon", mod="", order=2)]})
    assert [b.name for b in idx.by_mod("calamity")] == ["Crabulon"]


def test_duplicate_names_keep_last_rank():
    rows = [
        Boss(id=1, name="Twin Boss", mod="vanilla", order=1),
        Boss(id=100001, name="Twin Boss", mod="calamity", order=1),
    ]
    idx = ProgressionIndex.build({"vanilla": rows[:1], "calamity": rows[1:]})
    assert idx.rank_of("twin boss") == 1


def test_partial_match_takes_first_in_table_order():
    rows = [
        Boss(id=1, name="The Twins", mod="vanilla", order=1),
        Boss(id=2, name="Twins Remix", mod="vanilla", order=2),
    ]
    idx = ProgressionIndex.build({"vanilla": rows})
    assert idx.rank_of("twins") == 0


def test_custom_sentinel(boss_tables):
    idx = ProgressionIndex.build(boss_tables, sentinel=10_000)
    assert idx.rank_of("nobody") == 10_000
    assert idx.rank_of(None) == 10_000


def test_queries(index):
    assert len(index) == 7
    assert "king slime" in index
    assert "nobody" not in index
    assert index.find("moon lord").id == 18
    assert index.find("moon") is None
    assert index.find(None) is None
    assert [b.name for b in index.by_mod("Calamity")] == ["Desert Scourge", "Supreme Witch, Calamitas"]
    assert [b.name for b in index.by_progression("post-moonlord")] == ["Supreme Witch, Calamitas"]
    assert index.ranks()["the grand thunder bird"] == 6


def test_sort_records_by_target_boss(index):
    records = [
        {"name": "a", "target_boss": "Moon Lord"},
        {"name": "b", "target_boss": None},
        {"name": "c", "target_boss": "king slime"},
        {"name": "d"},
        {"name": "e", "target_boss": "eater of worlds"},
        {"name": "f", "target_boss": 42},
    ]
    assert [r["name"] for r in index.sort_records(records)] == ["c", "e", "a", "b", "d", "f"]


def test_sort_records_objects_and_custom_key(index):
    records = [
        SimpleNamespace(name="late", targetBoss="Desert Scourge"),
        SimpleNamespace(name="early", targetBoss="Eye of Cthulhu"),
    ]
    out = index.sort_records(records, key="targetBoss")
    assert [r.name for r in out] == ["early", "late"]


def test_position_of_duplicated_names():
    first = Boss(id=1, name="Twin Boss", mod="vanilla", order=1)
    second = Boss(id=100001, name="Twin Boss", mod="calamity", order=1)
    idx = ProgressionIndex.build({"vanilla": [first], "calamity": [second]})
    assert idx.find("twin boss") is first
    assert idx.position(first) == 0
    assert idx.position(second) == 1
    assert idx.position(Boss(id=9, name="Elsewhere", mod="vanilla")) == SENTINEL_RANK
