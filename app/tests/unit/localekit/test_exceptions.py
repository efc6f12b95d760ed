"""Tests for localekit.exceptions module."""

from pathlib import Path

from localekit.exceptions import I18nError, TranslationLoadError


class TestTranslationLoadError:
    """Tests for TranslationLoadError."""

    def test_hierarchy(self):
        error = TranslationLoadError("content is not a mapping after loading")
        assert isinstance(error, I18nError)
        assert isinstance(error, ValueError)

    def test_attributes(self):
        error = TranslationLoadError("boom", locale="en", source=Path("en.yml"))
        assert error.locale == "en"
        assert error.source == Path("en.yml")

    def test_str_with_source(self):
        error = TranslationLoadError("boom", locale="en", source=Path("en.yml"))
        assert str(error) == "boom (locale='en', source='en.yml')"

    def test_str_with_locale_only(self):
        assert str(TranslationLoadError("boom", locale="en")) == "boom (locale='en')"

    def test_str_plain(self):
        assert str(TranslationLoadError("boom")) == "boom"
