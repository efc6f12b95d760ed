"""localekit - locale resolution and message translation.

Resolves the active locale of a request, either set explicitly or inferred
from the client's declared language preferences, and translates message
keys from in-memory tables or per-locale translation files.

Main components:
- models: locale normalization, ResolverState
- loader: TranslationLoader, YAMLTranslationLoader, JSONTranslationLoader
- preferences: Accept-Language parsing and preference providers
- resolver: LocaleResolver
- factory: create_resolver
"""

from localekit.exceptions import I18nError, TranslationLoadError
from localekit.factory import create_resolver
from localekit.loader import (
    FileTranslationLoader,
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
    create_loader,
)
from localekit.models import AUTO_LOCALE, ResolverState, normalize_locale
from localekit.preferences import (
    AcceptLanguagePreferences,
    LanguagePreferences,
    StaticLanguagePreferences,
    parse_accept_language,
)
from localekit.resolver import LocaleResolver

__all__ = [
    "AUTO_LOCALE",
    "ResolverState",
    "normalize_locale",
    "I18nError",
    "TranslationLoadError",
    "TranslationLoader",
    "FileTranslationLoader",
    "YAMLTranslationLoader",
    "JSONTranslationLoader",
    "create_loader",
    "LanguagePreferences",
    "StaticLanguagePreferences",
    "AcceptLanguagePreferences",
    "parse_accept_language",
    "LocaleResolver",
    "create_resolver",
]
