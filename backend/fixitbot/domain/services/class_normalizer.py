"""Canonicalization of free-text damage labels.

Both rule chains are first-match-wins: the order of the entries is part of the
behaviour (a "door paint" label must resolve to ``paint_damage``).
"""
import re
from typing import Callable, Optional, Tuple

# Tolerates the usual misspellings: corrosion, corrosoin, corrsion, corrison...
_CORROSION = r"corr?[io]?s[io]{1,2}n"

HARD_CLASSES = re.compile(
    r"(crack|lamp(_|\s)?broken|rust|" + _CORROSION + r"|flat(_|\s)?tire|glass(_|\s)?shatter)",
    re.IGNORECASE,
)


def _has(*words: str) -> Callable[[str], bool]:
    return lambda k: all(w in k for w in words)


def _matches(pattern: str) -> Callable[[str], bool]:
    rx = re.compile(pattern)
    return lambda k: rx.search(k) is not None


CLASS_RULES: Tuple[Tuple[Callable[[str], bool], str], ...] = (
    (_has("paint"), "paint_damage"),
    (_has("lamp", "broken"), "lamp_broken"),
    (_has("flat", "tire"), "flat_tire"),
    (lambda k: "rust" in k or re.search(_CORROSION, k) is not None, "rust_corrosion"),
    (_has("scratch"), "scratch"),
    (_has("dent"), "dent"),
    (_has("crack"), "crack"),
    (_has("glass", "shatter"), "glass_shatter"),
    (_has("bumper", "damage"), "bumper_damage"),
    (_has("door", "ding"), "door_ding"),
)

DIY_KEY_RULES: Tuple[Tuple[Callable[[str], bool], str], ...] = (
    (_matches(r"transfer"), "paint_transfer"),
    (_matches(r"bumper.*scuff|(^|_)scuff"), "bumper_scuff"),
    (_matches(r"door.*ding|(^|_)ding"), "door_ding"),
    (_matches(r"headlight|faro|haze|yellow"), "headlight_restore"),
    (_matches(r"clearcoat|chip"), "clearcoat_chip"),
    (_matches(r"plastic.*crack|bumper.*crack"), "plastic_bumper_crack_small"),
)


def clean_label(raw: Optional[str]) -> str:
    """Lower-case and collapse whitespace/hyphen runs into underscores."""
    return re.sub(r"[\s-]+", "_", (raw or "").lower())


def _first_match(rules, key: str) -> Optional[str]:
    for predicate, label in rules:
        if predicate(key):
            return label
    return None


def normalize_class(raw: Optional[str]) -> str:
    key = clean_label(raw)
    return _first_match(CLASS_RULES, key) or key


def map_to_diy_key(raw: Optional[str]) -> str:
    """Map a damage label to the key of the DIY guide library."""
    key = normalize_class(raw)
    return _first_match(DIY_KEY_RULES, key) or key


def is_hard_class(raw: Optional[str]) -> bool:
    """True for damage that always needs a workshop (cracks, broken lamps, rust...).

    Checked against the raw label, not the normalized one.
    """
    return HARD_CLASSES.search(raw or "") is not None
