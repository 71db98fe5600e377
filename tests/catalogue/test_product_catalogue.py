"""Tests for sheet_catalogue/catalogue/product_catalogue.py"""

from datetime import date

import pytest

from sheet_catalogue.catalogue import ProductCatalogue


@pytest.fixture
def catalogue(sample_products):
    return ProductCatalogue(sample_products)


def names(products):
    return [p.name for p in products]


class TestReplace:
    def test_starts_empty(self):
        catalogue = ProductCatalogue()
        assert len(catalogue) == 0
        assert catalogue.version == 0
        assert catalogue.category_labels() == ["All"]

    def test_replace_swaps_whole_list(self, catalogue, sample_products):
        catalogue.replace(sample_products[:2])
        assert names(catalogue.products) == ["Jordan 4 Black Cat", "Nike Dunk Low Panda"]
        assert catalogue.version == 1

    def test_products_is_a_copy(self, catalogue):
        catalogue.products.clear()
        assert len(catalogue) == 7


class TestCategories:
    def test_labels(self, catalogue):
        assert catalogue.category_labels() == ["All", "Bags", "Shoes", "Trapstar", "Wallets"]

    def test_counts(self, catalogue):
        assert catalogue.category_counts() == {
            "All": 7, "Shoes": 2, "Trapstar": 1, "Other": 1, "Bags": 1, "Wallets": 1,
        }


class TestFilter:
    def test_all(self, catalogue):
        assert len(catalogue.filter()) == 7

    def test_shoes_by_category(self, catalogue):
        assert names(catalogue.filter("Shoes")) == ["Jordan 4 Black Cat", "Nike Dunk Low Panda"]

    def test_subcategory_exact(self, catalogue):
        assert names(catalogue.filter("Bags")) == ["L.V. Keepall"]
        assert catalogue.filter("Bag") == []

    def test_search_name(self, catalogue):
        assert names(catalogue.filter(search="  JORDAN ")) == ["Jordan 4 Black Cat"]

    def test_search_category(self, catalogue):
        assert names(catalogue.filter(search="accessories")) == ["L.V. Keepall", "Goyard Cardholder"]
        assert len(catalogue.filter(search="hoodie")) == 2

    def test_search_ignores_dots(self, catalogue):
        assert names(catalogue.filter(search="keepall.")) == ["L.V. Keepall"]

    def test_search_and_label_combine(self, catalogue):
        assert names(catalogue.filter("Wallets", search="goyard")) == ["Goyard Cardholder"]
        assert catalogue.filter("Bags", search="goyard") == []


class TestPaging:
    def test_page(self, sample_products):
        assert ProductCatalogue.page(sample_products, 3) == sample_products[:3]
        assert ProductCatalogue.page(sample_products, -1) == []

    def test_default_page_size(self, sample_products):
        assert ProductCatalogue.page(sample_products * 3) == (sample_products * 3)[:16]

    def test_next_visible_count(self):
        assert ProductCatalogue.next_visible_count(16, 40) == 32
        assert ProductCatalogue.next_visible_count(32, 20) == 32
        assert ProductCatalogue.next_visible_count(16, 16) == 16


class TestDailyBestsellers:
    DAY = date(2026, 3, 14)

    def test_empty_catalogue(self):
        assert ProductCatalogue().daily_bestsellers() == []

    def test_stable_for_a_day(self, catalogue):
        assert catalogue.daily_bestsellers(self.DAY) == catalogue.daily_bestsellers(self.DAY)

    def test_per_category_cap(self, catalogue):
        picks = catalogue.daily_bestsellers(self.DAY, limit=4, per_category=1)
        assert len({p.category for p in picks}) == 4

    def test_tops_up_when_short(self, catalogue):
        picks = catalogue.daily_bestsellers(self.DAY, limit=6, per_category=1)
        assert len(picks) == 6
        assert len(set(names(picks))) == 6

    def test_limit(self, catalogue, sample_products):
        assert len(catalogue.daily_bestsellers(self.DAY, limit=3)) == 3
        assert set(names(catalogue.daily_bestsellers(self.DAY))) == set(names(sample_products))
