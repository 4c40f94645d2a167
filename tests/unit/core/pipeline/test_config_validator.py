from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default injection for missing keys.
2. Lenient coercion of booleans and strings (with warnings).
3. Strict mode rejections and format normalization.
"""

import pytest

from treeseed.core.pipeline.validator import validate_config
from treeseed.domain.config import get_default_config


def test_empty_dict_yields_defaults() -> None:
    conf, warnings = validate_config({})
    assert conf == get_default_config()
    assert warnings == []


def test_non_dict_falls_back_to_defaults() -> None:
    conf, warnings = validate_config(["not", "a", "dict"])
    assert conf == get_default_config()
    assert len(warnings) == 1
    assert "expected dict" in warnings[0]


def test_non_dict_strict_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


@pytest.mark.parametrize("raw, expected", [
    ("yes", True),
    ("On", True),
    ("si", True),
    ("off", False),
    ("0", False),
    (1, True),
    (0, False),
])
def test_bool_coercion(raw, expected) -> None:
    conf, warnings = validate_config({"dry_run": raw})
    assert conf["dry_run"] is expected
    assert len(warnings) == 1


def test_unparseable_bool_uses_fallback() -> None:
    conf, warnings = validate_config({"color": "maybe"})
    assert conf["color"] is True
    assert any("expected bool" in w for w in warnings)


def test_strict_bool_rejects_strings() -> None:
    with pytest.raises(TypeError):
        validate_config({"silent": "yes"}, strict=True)


def test_strings_are_stripped() -> None:
    conf, _ = validate_config({"target_dir": "  out/dir  "})
    assert conf["target_dir"] == "out/dir"


def test_non_string_uses_fallback() -> None:
    conf, warnings = validate_config({"target_dir": 42})
    assert conf["target_dir"] == ""
    assert any("expected str" in w for w in warnings)


def test_format_is_normalized() -> None:
    conf, warnings = validate_config({"format": " JSON "})
    assert conf["format"] == "json"
    assert warnings == []


def test_unknown_format_warns_and_falls_back() -> None:
    conf, warnings = validate_config({"format": "yaml"})
    assert conf["format"] == "tree"
    assert any("Invalid format 'yaml'" in w for w in warnings)


def test_unknown_format_strict_raises() -> None:
    with pytest.raises(ValueError):
        validate_config({"format": "yaml"}, strict=True)


def test_unknown_keys_are_preserved() -> None:
    conf, _ = validate_config({"custom": 1})
    assert conf["custom"] == 1
