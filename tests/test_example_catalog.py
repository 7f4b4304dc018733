"""Tests for the built-in ThiingsGrid example catalog."""

from __future__ import annotations

import pytest

from gallery import catalog
from gallery.catalog import COMPONENT_NAMES, SOURCE_CODES, EXAMPLES, get_registry
from gallery.registry import ExampleIndexError, ExampleNotFoundError


def test_catalog_scenario():
    assert EXAMPLES.count() == 5
    assert EXAMPLES.name_at(2) == "EmojiFun"
    assert EXAMPLES.index_of_name("ColorfulGrid") == 3
    assert EXAMPLES.source_at(3) is SOURCE_CODES[3]
    assert EXAMPLES.source_at(3).endswith(
        "<ThiingsGrid gridSize={100} renderItem={colorfulCellSnippet} />"
    )


def test_catalog_failures():
    with pytest.raises(ExampleNotFoundError):
        EXAMPLES.index_of_name("Nonexistent")
    with pytest.raises(ExampleIndexError):
        EXAMPLES.name_at(5)
    with pytest.raises(ExampleIndexError):
        EXAMPLES.source_at(-1)


def test_names_in_registration_order():
    assert EXAMPLES.names() == (
        "ThiingsIcons",
        "SimpleNumbers",
        "EmojiFun",
        "ColorfulGrid",
        "CardLayout",
    )
    assert len(COMPONENT_NAMES) == len(SOURCE_CODES)


def test_get_registry_is_stable_handle():
    assert get_registry() is EXAMPLES
    assert catalog.get_registry() is get_registry()


@pytest.mark.parametrize("name", COMPONENT_NAMES)
def test_every_template_uses_thiings_grid(name):
    source = EXAMPLES.source_at(EXAMPLES.index_of_name(name))
    assert source.startswith('<script lang="ts">')
    assert 'from "$lib/ThiingsGrid.svelte"' in source
    assert "renderItem=" in source


def test_emoji_payload_is_clean_unicode():
    source = EXAMPLES.source_at(EXAMPLES.index_of_name("EmojiFun"))
    assert '"🎨", "🚀", "🌟"' in source
    assert "ð" not in source
