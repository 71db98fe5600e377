"""Tests for sheet_catalogue/extraction/category_classifier.py"""

import pytest

from sheet_catalogue.extraction.category_classifier import CategoryClassifier, classify
from sheet_catalogue.models import CategoryMatch


class TestFootwear:
    @pytest.mark.parametrize("name, subcategory", [
        ("Jordan 4 Retro Black Cat", "Jordan"),
        ("Yeezy Boost 350 Zebra", "Yeezy"),
        ("Nike Dunk Low Panda", "Dunk"),
        ("Asics Gel Kayano 14", "Asics"),
        ("New Balance 550", "New Balance"),
        ("Crocs Classic Clog", "Slides/Crocs"),
        ("Timberland 6 Inch", None),
    ])
    def test_shoe_subcategories(self, classifier, name, subcategory):
        assert classifier.classify(name) == CategoryMatch("Shoes", subcategory)

    def test_brand_scan_order(self, classifier):
        # Jordan is checked before Yeezy, Yeezy before Slides
        assert classifier.classify("Jordan x Yeezy").subcategory == "Jordan"
        assert classifier.classify("Yeezy Slide Onyx").subcategory == "Yeezy"

    def test_footwear_beats_outerwear(self, classifier):
        assert classifier.classify("Trapstar Jordan Jacket") == CategoryMatch("Shoes", "Jordan")

    def test_case_insensitive(self, classifier):
        assert classifier.classify("JORDAN 1 CHICAGO").category == "Shoes"


class TestClothing:
    @pytest.mark.parametrize("name, subcategory", [
        ("Trapstar Irongate Hoodie", "Trapstar"),
        ("Syna World Zip Up", "Syna World"),
        ("Corteiz Alcatraz Jacket", "Corteiz"),
        ("CRTZ Fleece", "Corteiz"),
        ("Stone Island Cardigan", None),
    ])
    def test_outerwear(self, classifier, name, subcategory):
        assert classifier.classify(name) == CategoryMatch("Hoodies/Jackets", subcategory)

    def test_outerwear_brand_order(self, classifier):
        assert classifier.classify("Trapstar Syna Hoodie").subcategory == "Trapstar"

    @pytest.mark.parametrize("name", ["Essentials T-Shirt", "Polo Ralph Lauren", "Football Jersey"])
    def test_tops(self, classifier, name):
        assert classifier.classify(name) == CategoryMatch("T-Shirts/Tops", None)

    @pytest.mark.parametrize("name", ["Denim Tears Jeans", "Cargo Pants", "Eric Emanuel Shorts"])
    def test_bottoms(self, classifier, name):
        assert classifier.classify(name) == CategoryMatch("Pants/Shorts", None)


class TestAccessories:
    @pytest.mark.parametrize("name, subcategory", [
        ("LV Keepall Bag", "Bags"),
        ("Moncler Beanie", "Beanies"),
        ("Bucket Hat", "Headwear"),
        ("Gucci Belt", "Belts"),
        ("Goyard Wallet", "Wallets"),
        ("Nike Socks", "Socks"),
        ("Burberry Scarf", "Scarves"),
        ("Cartier Glasses", "Glasses"),
        ("Cuban Chain", "Jewelry"),
        ("AirPods Case", "Misc"),
    ])
    def test_accessory_families(self, classifier, name, subcategory):
        assert classifier.classify(name) == CategoryMatch("Accessories", subcategory)

    def test_bags_checked_before_belts(self, classifier):
        assert classifier.classify("Hermes Belt Bag").subcategory == "Bags"

    def test_wallets_checked_before_jewelry(self, classifier):
        assert classifier.classify("Wallet Chain").subcategory == "Wallets"


class TestNoMatch:
    def test_unknown_name_is_other(self, classifier):
        assert classifier.classify("Random Poster") == CategoryMatch("Other", None)

    def test_empty_name_is_other(self, classifier):
        assert classifier.classify("") == CategoryMatch("Other", None)
        assert classifier.classify(None) == CategoryMatch("Other", None)

    def test_deterministic(self, classifier):
        assert classifier.classify("Trapstar Jordan Jacket") == classifier.classify("Trapstar Jordan Jacket")


class TestForceOverride:
    @pytest.mark.parametrize("name, subcategory", [
        ("Gentle Monster Glasses", "Glasses"),
        ("Essentials Beanie", "Beanies"),
        ("Goyard Cardholder", "Wallets"),
        ("LV Wallet", "Wallets"),
    ])
    def test_overrides(self, classifier, name, subcategory):
        assert classifier.force_override(name) == CategoryMatch("Accessories", subcategory)

    def test_no_override(self, classifier):
        assert classifier.force_override("Jordan 4") is None
        assert classifier.force_override("") is None


class TestInjectedRules:
    def test_uses_given_rules(self, sample_rules):
        classifier = CategoryClassifier(rules=sample_rules, force_overrides=[])
        assert classifier.classify("Jordan Hoodie") == CategoryMatch("Shoes", "Jordan")
        assert classifier.classify("Zip Hoodie") == CategoryMatch("Hoodies/Jackets", None)
        assert classifier.classify("Tote Bag") == CategoryMatch("Accessories", "Bags")
        assert classifier.classify("Cap") == CategoryMatch("Other", None)

    def test_rule_order_is_precedence(self, sample_rules):
        reordered = [sample_rules[1], sample_rules[0], sample_rules[2]]
        classifier = CategoryClassifier(rules=reordered, force_overrides=[])
        assert classifier.classify("Jordan Hoodie").category == "Hoodies/Jackets"

    def test_keywords_are_lowercased(self):
        classifier = CategoryClassifier(
            rules=[{"category": "Shoes", "keywords": ["JORDAN"]}], force_overrides=[]
        )
        assert classifier.classify("jordan 1").category == "Shoes"

    def test_group_without_category_raises(self):
        with pytest.raises(ValueError, match="without category"):
            CategoryClassifier(rules=[{"keywords": ["x"]}], force_overrides=[])

    def test_rule_count(self, sample_rules):
        assert CategoryClassifier(rules=sample_rules, force_overrides=[]).rule_count == 3


class TestModuleClassify:
    def test_shared_classifier(self):
        assert classify("Nike Dunk Low") == CategoryMatch("Shoes", "Dunk")
