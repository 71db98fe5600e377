"""Tests for sheet_catalogue/extraction/sheet_layout.py"""

import pytest

from sheet_catalogue.extraction.sheet_layout import (
    HeaderMarkers,
    RowOverride,
    SheetLayout,
    build_row_overrides,
)


class TestSheetLayout:
    def test_defaults(self):
        layout = SheetLayout()
        assert (layout.link, layout.image, layout.name) == (2, 3, 4)
        assert (layout.price_usd, layout.price_cny, layout.qc_photo) == (8, 9, 10)

    def test_from_config_file(self):
        assert SheetLayout.from_config() == SheetLayout()

    def test_from_columns(self):
        layout = SheetLayout.from_config({"name": 0, "image": 1})
        assert layout.name == 0
        assert layout.image == 1
        assert layout.link == 2

    def test_unknown_column_raises(self):
        with pytest.raises(ValueError, match="Unknown sheet columns"):
            SheetLayout.from_config({"colour": 5})

    def test_min_row_length_follows_name_column(self):
        assert SheetLayout().min_row_length == 5
        assert SheetLayout(name=7).min_row_length == 8


class TestBuildRowOverrides:
    def test_expands_rows(self):
        overrides = build_row_overrides([
            {"category": "Hoodies/Jackets", "default_subcategory": "Other", "rows": [21, 32]},
            {"category": "Shoes", "rows": [11, 12]},
        ])
        assert overrides == {
            21: RowOverride("Hoodies/Jackets", "Other"),
            32: RowOverride("Hoodies/Jackets", "Other"),
            11: RowOverride("Shoes"),
            12: RowOverride("Shoes"),
        }

    def test_conflicting_rows_raise(self):
        with pytest.raises(ValueError, match="overridden twice"):
            build_row_overrides([
                {"category": "Shoes", "rows": [5]},
                {"category": "Accessories", "rows": [5]},
            ])

    def test_empty_table(self):
        assert build_row_overrides([]) == {}

    def test_config_table(self):
        overrides = build_row_overrides()
        assert overrides[21] == RowOverride("Hoodies/Jackets", "Other")
        assert overrides[72] == RowOverride("Shoes")
        assert all(overrides[i].category == "Shoes" for i in range(11, 17))
        assert all(overrides[i].category == "Shoes" for i in range(33, 38))


class TestHeaderMarkers:
    @pytest.fixture
    def markers(self):
        return HeaderMarkers()

    def test_config_matches_defaults(self):
        assert HeaderMarkers.from_config() == HeaderMarkers()

    def test_noise_headers(self, markers):
        assert markers.is_noise_header("My Tiktok @repheaven")
        assert markers.is_noise_header("Click here for the discord")
        assert markers.is_noise_header("Name")
        assert not markers.is_noise_header("Names of the week")

    def test_reset_markers_case_insensitive(self, markers):
        assert markers.is_reset("🔥🔥 Best sellers 🔥🔥")
        assert markers.is_reset("QUICK LINKS")
        assert markers.is_reset("RepHeaven spreadsheet")
        assert not markers.is_reset("Sneakers")

    def test_bag_headers(self, markers):
        assert markers.is_bag_header("Designer Handbags")
        assert not markers.is_bag_header("Belts")

    def test_product_noise(self, markers):
        assert markers.is_product_noise("Item name")
        assert markers.is_product_noise("--- new drops ---")
        assert not markers.is_product_noise("Jordan 4")

    def test_placeholder_links(self, markers):
        assert markers.is_placeholder_link("LINK")
        assert markers.is_placeholder_link("#")
        assert markers.is_placeholder_link("Click HERE to buy")
        assert not markers.is_placeholder_link("https://mulebuy.com/product?id=1")

    def test_resolvable_images(self, markers):
        assert markers.is_resolvable_image("https://i.imgur.com/a.jpg")
        assert markers.is_resolvable_image("drive.google.com/open?id=abc")
        assert not markers.is_resolvable_image("no image yet")
