import pytest

from fixitbot.domain.services.class_normalizer import (
    clean_label,
    is_hard_class,
    map_to_diy_key,
    normalize_class,
)


class TestNormalizeClass:
    @pytest.mark.parametrize("raw, expected", [
        ("Paint Damage!", "paint_damage"),
        ("Broken Lamp", "lamp_broken"),
        ("flat-tire", "flat_tire"),
        ("Rust spot", "rust_corrosion"),
        ("Corrosion", "rust_corrosion"),
        ("corrsion", "rust_corrosion"),
        ("deep scratch", "scratch"),
        ("Dent", "dent"),
        ("windshield crack", "crack"),
        ("Glass Shatter", "glass_shatter"),
        ("bumper damage", "bumper_damage"),
        ("door ding", "door_ding"),
    ])
    def test_canonical_labels(self, raw, expected):
        assert normalize_class(raw) == expected

    def test_first_matching_rule_wins(self):
        assert normalize_class("door paint") == "paint_damage"
        assert normalize_class("scratch dent") == "scratch"
        # "dent" is checked before "bumper" + "damage"
        assert normalize_class("front-bumper-dent") == "dent"

    def test_unknown_label_passes_through_cleaned(self):
        assert normalize_class("Mystery  Label-X") == "mystery_label_x"

    def test_clean_label_handles_none(self):
        assert clean_label(None) == ""
        assert normalize_class(None) == ""


class TestDiyKey:
    @pytest.mark.parametrize("raw, expected", [
        ("bumper scuff", "bumper_scuff"),
        ("transfer mark", "paint_transfer"),
        ("ding", "door_ding"),
        ("door ding", "door_ding"),
        ("headlight haze", "headlight_restore"),
        ("yellowed lens", "headlight_restore"),
        ("clearcoat chip", "clearcoat_chip"),
        ("scratch", "scratch"),
    ])
    def test_synonyms(self, raw, expected):
        assert map_to_diy_key(raw) == expected

    def test_class_normalization_runs_first(self):
        # "paint" wins in normalize_class, so the transfer rule never sees it
        assert map_to_diy_key("paint transfer") == "paint_damage"


class TestHardClass:
    @pytest.mark.parametrize("raw", [
        "crack", "lamp broken", "lamp_broken", "LAMPBROKEN", "Rust", "corrosion", "corrison",
        "flat tire", "glass_shatter",
    ])
    def test_hard(self, raw):
        assert is_hard_class(raw)

    @pytest.mark.parametrize("raw", ["dent", "scratch", "paint_damage", "door_ding", "", None])
    def test_not_hard(self, raw):
        assert not is_hard_class(raw)
