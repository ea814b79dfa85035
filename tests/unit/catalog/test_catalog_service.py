from __future__ import annotations

from pathlib import Path

import pytest

from src.badger.catalog.catalog_models import UNCATEGORIZED, Badge
from src.badger.catalog.catalog_service import Catalog, derive_categories
from src.badger.catalog.catalog_source import JsonFileCatalogSource
from tests.helpers.badges import make_badge


def test_derive_categories_groups_and_sorts() -> None:
    catalog = Catalog.from_badges(
        [
            make_badge("300", category="Wargames"),
            make_badge("200", category="Euro"),
            make_badge("100", category="Wargames"),
        ]
    )

    categories = derive_categories(catalog)

    assert list(categories) == ["Euro", "Wargames"]
    assert [badge.id for badge in categories["Wargames"]] == ["100", "300"]


def test_derive_categories_uses_sentinel_for_missing_category() -> None:
    catalog = Catalog.from_badges([Badge(id="1", category=""), Badge(id="2", category="  ")])

    categories = derive_categories(catalog)

    assert list(categories) == [UNCATEGORIZED]
    assert len(categories[UNCATEGORIZED]) == 2


def test_derive_categories_is_idempotent() -> None:
    catalog = Catalog.from_badges([make_badge("1"), make_badge("2", category="Other")])

    first = derive_categories(catalog)
    second = derive_categories(catalog)

    assert first == second


def test_merged_with_keeps_known_selection_vectors() -> None:
    current = Catalog.from_badges([make_badge("1", slots=[2])])
    fresh = Catalog.from_badges([Badge(id="1", category="New"), Badge(id="2")])

    merged = current.merged_with(fresh)

    assert merged.badges["1"].selected == [False, True, False, False, False]
    assert merged.badges["1"].category == "New"
    assert merged.badges["2"].selected == [False] * 5


def test_badge_normalizes_selection_length() -> None:
    assert Badge(id="1", selected=[True]).selected == [True, False, False, False, False]
    assert Badge(id="1", selected=[True] * 7).selected == [True] * 5


@pytest.mark.asyncio
async def test_catalog_load_reads_json_file(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(
        '[{"id": "7", "category": "Fun", "imageRef": "//img/7.gif"}, {"id": "8"}]',
        encoding="utf-8",
    )

    catalog = await Catalog.load(JsonFileCatalogSource(path=path))

    assert len(catalog) == 2
    assert catalog.get("7").image_ref == "//img/7.gif"
    assert catalog.get("8").category == ""
