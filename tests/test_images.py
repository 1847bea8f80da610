"""Tests for wiki image URL generation and the fallback ladder."""
from __future__ import annotations

import pytest

from core.terraria.images import ImageResolver, encode_name
from core.terraria.models import FallbackAttemptState
from core.terraria.overrides import OverrideTables, default_override_tables

VANILLA = "https://terraria.wiki.gg/images/"
CALAMITY = "https://calamitymod.wiki.gg/images/"
THORIUM = "https://thoriummod.wiki.gg/images/"


@pytest.fixture
def resolver(empty_overrides):
    return ImageResolver(empty_overrides)


@pytest.fixture
def default_resolver():
    return ImageResolver(default_override_tables())


@pytest.mark.parametrize(
    "name, mod, expected",
    [
        ("Terra Blade", "vanilla", VANILLA + "Terra_Blade.png"),
        ("Drataliornus", "calamity", CALAMITY + "Drataliornus.png"),
        ("Mjolnir", "thorium", THORIUM + "Mjolnir.png"),
        ("Copper Shortsword", None, VANILLA + "Copper_Shortsword.png"),
        ("Auric Tesla Royal Helm", "calamity", CALAMITY + "Auric_Tesla_Royal_Helm.png"),
    ],
)
def test_resolve_item_urls(resolver, name, mod, expected):
    assert resolver.resolve(name, mod) == expected


def test_resolve_is_deterministic(resolver):
    assert resolver.resolve("Star Wrath", "calamity") == resolver.resolve("Star Wrath", "calamity")


def test_unknown_or_messy_mod_tags(resolver):
    assert resolver.resolve("Zenith", "fargos") == VANILLA + "Zenith.png"
    assert resolver.resolve("Zenith", "") == VANILLA + "Zenith.png"
    assert resolver.resolve("Murasama", " Calamity ") == CALAMITY + "Murasama.png"


def test_apostrophe_kept_and_parens_encoded(resolver):
    assert resolver.resolve("Night's Edge", "vanilla").endswith("Night's_Edge.png")
    assert resolver.resolve("Blade (Old)", "vanilla").endswith("Blade_%28Old%29.png")


def test_icon_override_ignores_mod():
    tables = OverrideTables.from_dict({"item_icons": {"Zenith": "https://example.test/zenith.png"}})
    resolver = ImageResolver(tables)
    for mod in (None, "vanilla", "calamity", "thorium", "unknown"):
        assert resolver.resolve("Zenith", mod) == "https://example.test/zenith.png"


def test_name_override_is_percent_encoded():
    tables = OverrideTables.from_dict({"item_names": {"Fiery Greatsword": "Volcano_(old)"}})
    url = ImageResolver(tables).resolve("Fiery Greatsword", "vanilla")
    assert url == VANILLA + "Volcano_%28old%29.png"


def test_builtin_item_overrides(default_resolver):
    assert default_resolver.resolve("Fabstaff", "calamity") == CALAMITY + "Sylvestaff.png"
    assert default_resolver.resolve("Enchanted Sword", "vanilla") == VANILLA + "Enchanted_Sword_%28item%29.png"


def test_boss_urls(default_resolver):
    assert default_resolver.resolve_boss("King Slime", "vanilla") == VANILLA + "King_Slime.png"
    assert default_resolver.resolve_boss("The Twins", "vanilla") == VANILLA + "The_Twins.png"
    assert default_resolver.resolve_boss("Leviathan and Anahita", "calamity") == CALAMITY + "Anahita_map.png"
    assert (
        default_resolver.resolve_boss("Providence, the Profaned Goddess", "calamity")
        == CALAMITY + "Providence_map.png"
    )
    assert default_resolver.resolve_boss("Lich", "thorium") == THORIUM + "Lich_%28Map_icon%29.png"


def test_boss_names_drop_commas(resolver):
    assert "Test_Boss_the_Great" in resolver.resolve_boss("Test Boss, the Great", "vanilla")
    # items keep commas (encoded)
    assert resolver.resolve("Test Item, the Great").endswith("Test_Item%2C_the_Great.png")


def test_custom_base_paths():
    resolver = ImageResolver(OverrideTables(), base_paths={"calamity": "https://mirror.test/cal"})
    assert resolver.resolve("Murasama", "calamity") == "https://mirror.test/cal/Murasama.png"
    assert resolver.resolve("Zenith") == VANILLA + "Zenith.png"


def test_encode_name():
    assert encode_name("A_b-c.d~e") == "A_b-c.d~e"
    assert encode_name("100%") == "100%25"
    assert encode_name("a/b") == "a%2Fb"


# ----------------- fallback ladder -----------------


def test_modded_ladder_visits_every_stage_once(resolver):
    state = FallbackAttemptState(entity_name="Auric Tesla Royal Helm", mod="calamity")
    expected = [
        (CALAMITY + "AuricTeslaRoyalHelm.png", 1),
        (CALAMITY + "Auric_Tesla_Royal_Helm_%28item%29.png", 2),
        (CALAMITY + "Auric_Tesla_Royal_Helm.gif", 3),
        (CALAMITY + "auric_tesla_royal_helm.png", 4),
    ]
    for url, stage in expected:
        got, state = resolver.next_fallback(state)
        assert got == url
        assert state.stage == stage
        assert state.final is False

    url, state = resolver.next_fallback(state)
    assert url.startswith("data:image/svg+xml,")
    assert state.stage == 4
    again, same = resolver.next_fallback(state)
    assert again == urls[4]
    assert same == state
    assert state.final is True


def test_terminal_state_is_idempotent(resolver):
    state = FallbackAttemptState(entity_name="Mjolnir", mod="thorium", stage=4)
    first_url, first_state = resolver.next_fallback(state)
    again_url, again_state = resolver.next_fallback(first_state)
    assert again_url == first_url
    assert again_state == first_state
    assert again_state.final is True


def test_vanilla_goes_straight_to_placeholder(resolver):
    for mod in ("vanilla", None, "", "fargos"):
        url, state = resolver.next_fallback(FallbackAttemptState(entity_name="Terra Blade", mod=mod))
        assert url.startswith("data:image/svg+xml,")
        assert state.stage == 4
        assert state.final is True


def test_out_of_range_stages_are_clamped(resolver):
    url, state = resolver.next_fallback(FallbackAttemptState(entity_name="Mjolnir", mod="thorium", stage=-3))
    assert url == THORIUM + "Mjolnir.png"
    assert state.stage == 1

    url, state = resolver.next_fallback(FallbackAttemptState(entity_name="Mjolnir", mod="thorium", stage=9))
    assert url.startswith("data:image/svg+xml,")
    assert (state.stage, state.final) == (4, True)


def test_placeholder_uses_state_size(resolver):
    url, _ = resolver.next_fallback(FallbackAttemptState(entity_name="Lich", mod=None, size=64))
    assert "width='64'" in url


def test_ladder_lists_primary_then_fallbacks(resolver):
    steps = resolver.ladder("Mjolnir", "thorium")
    assert [s.url for s in steps[:5]] == [
        THORIUM + "Mjolnir.png",
        THORIUM + "Mjolnir.png",
        THORIUM + "Mjolnir_%28item%29.png",
        THORIUM + "Mjolnir.gif",
        THORIUM + "mjolnir.png",
    ]
    assert len(steps) == 6
    assert steps[-1].final is True
    assert all(not s.final for s in steps[:-1])

    vanilla = resolver.ladder("Terra Blade", "vanilla")
    assert len(vanilla) == 2
    assert vanilla[-1].final is True


def test_ladder_for_boss_uses_boss_naming(resolver):
    steps = resolver.ladder("Coznix, the Fallen Beholder", "thorium", boss=True)
    assert steps[0].url == THORIUM + "Coznix_the_Fallen_Beholder.png"
    assert steps[1].url == THORIUM + "CoznixtheFallenBeholder.png"


# ----------------- empty / odd inputs -----------------


def test_empty_names_still_give_urls(resolver):
    assert resolver.resolve("") == VANILLA + ".png"
    assert resolver.resolve(None) == VANILLA + ".png"
    assert resolver.resolve_boss(None, "calamity") == CALAMITY + ".png"


def test_empty_name_walks_whole_ladder(resolver):
    state = FallbackAttemptState(entity_name="", mod="calamity")
    urls = []
    while not state.final:
        url, state = resolver.next_fallback(state)
        urls.append(url)
    assert urls[:4] == [
        CALAMITY + ".png",
        CALAMITY + "_%28item%29.png",
        CALAMITY + ".gif",
        CALAMITY + ".png",
    ]
    assert urls[4].startswith("data:image/svg+xml,")
    assert "%3E%3C/text%3E" in urls[4]
    assert state.stage == 4


def test_name_without_alphanumerics(resolver):
    url, state = resolver.next_fallback(FallbackAttemptState(entity_name="???", mod="thorium"))
    assert url == THORIUM + ".png"
    assert state.stage == 1
    url, _ = resolver.next_fallback(state)
    assert url == THORIUM + "%3F%3F%3F_%28item%29.png"
