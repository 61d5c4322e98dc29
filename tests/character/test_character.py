"""
Tests for the Character class and its cliche management.
"""

import pytest
from risus.character.cliche import Cliche
from risus.character.main import Character
from risus.core.constants import FunkyDie


@pytest.fixture
def conan():
    """A character with a couple of cliches."""
    return (
        Character("Conan", "Barbarian")
        .add_cliche("Mighty Thews", 4, True)
        .add_cliche("Sorcery", 2, funky=FunkyDie.D10)
    )


def test_new_character_has_no_cliches():
    """
    Test that a new character starts empty, with an empty description.
    """
    character = Character("Conan")
    assert character.name == "Conan"
    assert character.desc == ""
    assert character.cliches == {}
    assert len(character) == 0


def test_add_cliche_by_name(conan):
    """
    Test that add_cliche() builds the cliche and keys it by normalized name.
    """
    assert set(conan.cliches) == {"mighty_thews", "sorcery"}
    thews = conan.cliches["mighty_thews"]
    assert thews.value == 4
    assert thews.is_double is True
    assert thews.funky == "d6"


def test_add_cliche_returns_character_for_chaining():
    """
    Test that both add methods return the character itself.
    """
    character = Character("Conan")
    assert character.add_cliche("Cook") is character
    assert character.add_existing_cliche(Cliche(name="Thief")) is character


def test_add_existing_cliche(conan):
    """
    Test that an already built cliche is stored as is.
    """
    cliche = Cliche(name="Pirate Captain", value=3, funky="d8")
    conan.add_existing_cliche(cliche)
    assert conan.cliches["pirate_captain"] is cliche


def test_last_writer_wins():
    """
    Test that adding a cliche with a colliding name replaces the old one.
    """
    character = Character("Conan")
    character.add_cliche("Sword Fighting", 2)
    character.add_cliche("sword  fighting", 5, True, "d12")

    assert len(character) == 1
    cliche = character.cliches["sword_fighting"]
    assert cliche.value == 5
    assert cliche.is_double is True
    assert cliche.funky == "d12"


def test_every_cliche_is_stored_under_its_own_name(conan):
    """
    Test that keys always match the names of the cliches.
    """
    conan.add_existing_cliche(Cliche(name="Dark  Lord", value=1))
    for key, cliche in conan.cliches.items():
        assert key == cliche.name


def test_get_cliche_and_contains(conan):
    """
    Test that lookups go through name normalization.
    """
    assert conan.get_cliche("MIGHTY thews") is conan.cliches["mighty_thews"]
    assert conan.get_cliche("Cook") is None
    assert "Mighty  Thews" in conan
    assert "Cook" not in conan
    assert 42 not in conan


def test_update_cliche(conan):
    """
    Test that update_cliche() changes the value and die in place.
    """
    thews = conan.cliches["mighty_thews"]
    assert conan.update_cliche("Mighty Thews", 6, "d8") is conan
    assert conan.cliches["mighty_thews"] is thews
    assert thews.value == 6
    assert thews.funky == "d8"
    assert thews.is_double is True


def test_update_missing_cliche_is_a_no_op(conan):
    """
    Test that updating an unknown cliche changes nothing and raises nothing.
    """
    before = conan.pack()
    assert conan.update_cliche("Cook", 3) is conan
    assert conan.pack() == before


def test_remove_cliche(conan):
    """
    Test that remove_cliche() returns the removed cliche.
    """
    removed = conan.remove_cliche("sorcery")
    assert removed is not None
    assert removed.name == "sorcery"
    assert "sorcery" not in conan.cliches


def test_remove_missing_cliche_returns_none(conan):
    """
    Test that removing an unknown cliche returns None.
    """
    assert conan.remove_cliche("Cook") is None
    assert len(conan) == 2


def test_sorted_cliches():
    """
    Test that cliches are sorted by key, whatever the insertion order.
    """
    character = Character("Conan")
    character.add_cliche("Thief").add_cliche("Archer").add_cliche("Mage")
    assert [c.name for c in character.sorted_cliches()] == ["archer", "mage", "thief"]


def test_pack_example():
    """
    Test the canonical packing example.
    """
    character = Character("Conan", "Barbarian").add_cliche("Mighty Thews", 4, True)
    assert character.pack() == "Conan;Barbarian;mighty_thews:4:1:d6"


def test_unpack_example():
    """
    Test that the canonical example unpacks into an equivalent character.
    """
    character = Character.unpack("Conan;Barbarian;mighty_thews:4:1:d6")
    assert character.name == "Conan"
    assert character.desc == "Barbarian"
    assert list(character.cliches) == ["mighty_thews"]
    assert str(character.cliches["mighty_thews"]) == "Mighty Thews[4]"


def test_str(conan):
    """
    Test the plain-text summary of a character.
    """
    assert str(conan) == "Conan\nBarbarian\nCliches: Mighty Thews[4], Sorcery(2d10)"
    assert str(Character("Nobody")) == "Nobody"
    assert str(Character("Nobody", "").add_cliche("Cook", 2)) == (
        "Nobody\nCliches: Cook(2)"
    )


def test_repr(conan):
    """
    Test the debug representation of a character.
    """
    assert repr(conan) == "Character(name='Conan', desc='Barbarian', cliches=2)"
