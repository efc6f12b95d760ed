"""Tests for localekit.models module."""

from pathlib import Path

import pytest

from localekit.exceptions import TranslationLoadError
from localekit.models import (
    AUTO_LOCALE,
    flatten_messages,
    is_concrete_locale,
    is_data_source_reference,
    is_message_mapping,
    normalize_locale,
)
from tests.factories.i18n import make_resolver_state


class TestNormalizeLocale:
    """Tests for normalize_locale()."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("en", "en"),
            ("EN ", "en"),
            ("  Fr-CA\t", "fr-ca"),
            ("AUTO", "auto"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_normalize(self, raw, expected):
        """normalize_locale() lowercases and trims."""
        assert normalize_locale(raw) == expected


class TestIsConcreteLocale:
    """Tests for is_concrete_locale()."""

    def test_language_is_concrete(self):
        assert is_concrete_locale("en")

    def test_auto_is_not_concrete(self):
        assert not is_concrete_locale(AUTO_LOCALE)

    def test_empty_is_not_concrete(self):
        assert not is_concrete_locale("")


class TestIsMessageMapping:
    """Tests for is_message_mapping()."""

    def test_dict(self):
        assert is_message_mapping({"hello": "Hi"})

    def test_path_reference(self):
        assert not is_message_mapping(Path("languages/en.yml"))

    def test_string(self):
        assert not is_message_mapping("languages/en.yml")

    def test_none(self):
        assert not is_message_mapping(None)


class TestFlattenMessages:
    """Tests for flatten_messages()."""

    def test_flat_mapping_unchanged(self):
        data = {"hello": "Hello", "bye": "Bye"}
        assert flatten_messages(data) == data

    def test_nested_namespaces_use_dotted_keys(self):
        data = {"forecast": {"today": "Today", "week": {"monday": "Monday"}}}
        assert flatten_messages(data) == {
            "forecast.today": "Today",
            "forecast.week.monday": "Monday",
        }

    def test_mixed_levels(self):
        data = {"title": "Weather", "forecast": {"today": "Today"}}
        assert flatten_messages(data) == {
            "title": "Weather",
            "forecast.today": "Today",
        }

    def test_non_string_keys_are_stringified(self):
        assert flatten_messages({1: "one"}) == {"1": "one"}

    def test_scalar_leaves_become_strings(self):
        data = {"count": 5, "enabled": True, "ratio": 0.5, "nested": {"n": 2}}
        assert flatten_messages(data) == {
            "count": "5",
            "enabled": "True",
            "ratio": "0.5",
            "nested.n": "2",
        }

    def test_null_leaves_dropped(self):
        assert flatten_messages({"hello": "Hi", "empty": None}) == {"hello": "Hi"}

    def test_list_leaf_raises(self):
        with pytest.raises(TranslationLoadError, match="forecast.days"):
            flatten_messages({"forecast": {"days": ["Monday", "Tuesday"]}})


class TestIsDataSourceReference:
    """Tests for is_data_source_reference()."""

    def test_string_path(self):
        assert is_data_source_reference("languages/en.yml")

    def test_path_object(self):
        assert is_data_source_reference(Path("languages/en.yml"))

    @pytest.mark.parametrize("content", [{"hello": "Hi"}, ["en.yml"], 5, None])
    def test_other_values(self, content):
        assert not is_data_source_reference(content)


class TestResolverState:
    """Tests for ResolverState dataclass."""

    def test_defaults(self):
        """New state is automatic and unresolved."""
        state = make_resolver_state()
        assert state.automatic is True
        assert state.preferred_locale is None
        assert state.active_locale == "auto"
        assert state.active_content is None

    def test_activate_replaces_content_wholesale(self):
        """activate() swaps locale and content together."""
        state = make_resolver_state(
            active_locale="en", active_content={"hello": "Hello", "bye": "Bye"}
        )
        state.activate("fr", {"hello": "Bonjour"})
        assert state.active_locale == "fr"
        assert state.active_content == {"hello": "Bonjour"}
