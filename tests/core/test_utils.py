"""
Tests for the text helpers used by the aggregation engine.
"""

from charsheet.core.utils import ccapture, make_unique, title_case


def test_make_unique_keeps_first_occurrence():
    """Test that duplicates are dropped after their first position."""
    items = ["Dagger", "Mace", "Dagger", "Sling", "Mace"]
    assert make_unique(items) == ["Dagger", "Mace", "Sling"]


def test_make_unique_is_idempotent():
    """Test that deduplicating twice changes nothing."""
    items = ["b", "a", "b", "c", "a", "a"]
    once = make_unique(items)
    assert make_unique(once) == once


def test_make_unique_is_case_sensitive():
    """Test that only exact duplicates are removed."""
    assert make_unique(["Dagger", "dagger"]) == ["Dagger", "dagger"]


def test_make_unique_empty():
    assert make_unique([]) == []


def test_title_case():
    """Test that each space separated word is capitalized."""
    assert title_case("wizard") == "Wizard"
    assert title_case("eldritch KNIGHT") == "Eldritch Knight"
    assert title_case("death  knight") == "Death  Knight"


def test_ccapture_returns_text():
    assert "Hello" in ccapture("Hello")
