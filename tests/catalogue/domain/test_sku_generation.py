"""Tests for SKU id generation and option-combination expansion."""

import json
import re

from catalogue.shared.sku import (
    canonical_option_values,
    expand_option_combinations,
    generate_sku_id,
    option_hash,
)


class TestGenerateSkuId:
    def test_same_input_gives_same_id(self):
        options = {"Color": "Red", "Size": "M"}
        assert generate_sku_id("TSHIRT", options) == generate_sku_id("TSHIRT", dict(options))

    def test_different_option_value_gives_different_id(self):
        assert generate_sku_id("TSHIRT", {"Color": "Red", "Size": "M"}) != generate_sku_id(
            "TSHIRT", {"Color": "Red", "Size": "L"}
        )

    def test_insertion_order_does_not_matter(self):
        assert generate_sku_id("TSHIRT", {"Size": "M", "Color": "Red"}) == generate_sku_id(
            "TSHIRT", {"Color": "Red", "Size": "M"}
        )

    def test_layout_is_code_values_hash(self):
        sku_id = generate_sku_id("TSHIRT", {"Size": "M", "Color": "Red"})
        assert re.fullmatch(r"TSHIRT-Red-M-[0-9A-F]{8}", sku_id)

    def test_group_names_disambiguate_equal_values(self):
        assert generate_sku_id("P", {"Color": "Black"}) != generate_sku_id("P", {"Finish": "Black"})

    def test_empty_mapping_omits_option_segment(self):
        assert generate_sku_id("PRD-1A2B3C4D", {}) == f"PRD-1A2B3C4D-{option_hash({})}"


class TestCanonicalOptionValues:
    def test_keys_sorted(self):
        serialized = canonical_option_values({"Size": "M", "Color": "Red"})
        assert serialized == '{"Color": "Red", "Size": "M"}'
        assert json.loads(serialized) == {"Color": "Red", "Size": "M"}

    def test_non_ascii_values_kept(self):
        assert json.loads(canonical_option_values({"Farbe": "Grün"})) == {"Farbe": "Grün"}


class TestExpandOptionCombinations:
    def test_two_by_three_gives_six(self):
        combinations = expand_option_combinations([("Color", ["Red", "Blue"]), ("Size", ["S", "M", "L"])])

        assert len(combinations) == 6
        assert len(set(combinations)) == 6
        assert combinations[0] == (("Color", "Red"), ("Size", "S"))

    def test_no_groups_gives_single_empty_combination(self):
        assert expand_option_combinations([]) == [()]

    def test_group_without_options_gives_nothing(self):
        assert expand_option_combinations([("Color", [])]) == []
