from __future__ import annotations

"""
Unit tests for the i18n string resolver.
"""

from dirstat.utils.i18n import I18n, i18n


def test_singleton_loads_english() -> None:
    assert i18n.is_loaded
    assert i18n.locale == "en"


def test_nested_lookup_with_interpolation() -> None:
    msg = i18n.t("cli.errors.output", destination="out.txt", reason="Permission denied")
    assert msg == "Cannot write to out.txt: Permission denied"


def test_missing_key_falls_back() -> None:
    assert i18n.t("cli.nope.missing") == "cli.nope.missing"
    assert i18n.t("cli.nope.missing", default="fallback {x}", x=1) == "fallback 1"


def test_non_leaf_key_is_not_a_translation() -> None:
    assert i18n.t("cli.errors") == "cli.errors"


def test_missing_format_variables_return_template() -> None:
    assert i18n.t("cli.errors.configuration", wrong="x") == "Configuration error: {error}"


def test_unknown_locale_degrades_gracefully() -> None:
    manager = I18n("xx")
    assert not manager.is_loaded
    assert manager.t("app.usage", default="usage") == "usage"
