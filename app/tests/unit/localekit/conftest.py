"""Feature-level fixtures for locale resolution tests.

Provides translation directories and loaders for file-backed scenarios.
"""

import json

import pytest
import yaml

from localekit import JSONTranslationLoader, YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample translation files.

    Returns a directory structure like:
    - en.yml (namespaced)
    - es.yml (flat)
    - it.json
    - broken.yml (invalid YAML)
    - scalar.yml (parses to a plain string)
    """
    languages = tmp_path / "languages"
    languages.mkdir()

    en = {
        "hello": "Hello",
        "forecast": {
            "today": "Today",
            "tomorrow": "Tomorrow",
        },
    }
    with open(languages / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en, f)

    es = {"hello": "Hola", "forecast.today": "Hoy"}
    with open(languages / "es.yml", "w", encoding="utf-8") as f:
        yaml.dump(es, f, allow_unicode=True)

    it = {"hello": "Ciao", "forecast": {"today": "Oggi"}}
    with open(languages / "it.json", "w", encoding="utf-8") as f:
        json.dump(it, f)

    with open(languages / "broken.yml", "w", encoding="utf-8") as f:
        f.write("invalid: yaml: content: [")

    with open(languages / "scalar.yml", "w", encoding="utf-8") as f:
        f.write("just a string\n")

    return languages


@pytest.fixture
def empty_translations_dir(tmp_path):
    """Directory without any translation files."""
    languages = tmp_path / "empty"
    languages.mkdir()
    return languages


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for the temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir)


@pytest.fixture
def json_loader(temp_translations_dir):
    """Create JSONTranslationLoader for the temporary translations directory."""
    return JSONTranslationLoader(temp_translations_dir)


@pytest.fixture
def empty_loader(empty_translations_dir):
    """Loader with no files behind it, for in-memory scenarios."""
    return YAMLTranslationLoader(empty_translations_dir)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "wildcard": "en-US,en;q=0.9,*;q=0.8",
        "with_auto": "auto,de;q=0.5",
    }
