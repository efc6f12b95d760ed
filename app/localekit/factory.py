"""Factory functions for creating locale resolvers.

Provides a convenience function that wires a LocaleResolver with the
configured loader and a client's Accept-Language preferences.
"""

from typing import Optional

from localekit.configuration import Settings
from localekit.configuration import settings as default_settings
from localekit.loader import TranslationLoader, create_loader
from localekit.logging import get_module_logger
from localekit.models import TranslationContent
from localekit.preferences import AcceptLanguagePreferences, LanguagePreferences
from localekit.resolver import LocaleResolver

logger = get_module_logger()


def create_resolver(
    content: Optional[TranslationContent] = None,
    locale: Optional[str] = None,
    automatic: Optional[bool] = None,
    accept_language: Optional[str] = None,
    preferences: Optional[LanguagePreferences] = None,
    settings: Optional[Settings] = None,
    loader: Optional[TranslationLoader] = None,
) -> LocaleResolver:
    """Create and configure a LocaleResolver for one request or session.

    Arguments left as None are taken from ``settings.i18n``.

    Args:
        content: Initial translation content for ``locale``.
        locale: Locale to request (default: I18N_DEFAULT_LOCALE).
        automatic: Automatic mode (default: I18N_AUTOMATIC).
        accept_language: Client Accept-Language header, used when no
            explicit ``preferences`` provider is given.
        preferences: Client language preferences provider.
        settings: Settings instance (default: module singleton).
        loader: Data source collaborator (default: built from settings).

    Returns:
        LocaleResolver: Resolver with its initial locale resolved

    Raises:
        TranslationLoadError: If the initial locale's source is corrupt.

    Usage:
        # Per request, from the client's header
        resolver = create_resolver(accept_language="fr-CH, fr;q=0.9, en;q=0.8")

        # Fixed locale with in-memory messages
        resolver = create_resolver(
            content={"hello": "Hallo"}, locale="de", automatic=False
        )
    """
    settings = settings or default_settings
    i18n_settings = settings.i18n

    if loader is None:
        loader = create_loader(i18n_settings)
    if preferences is None:
        preferences = AcceptLanguagePreferences(accept_language)
    if automatic is None:
        automatic = i18n_settings.automatic
    if locale is None:
        locale = i18n_settings.default_locale

    resolver = LocaleResolver(
        content=content,
        locale=locale,
        automatic=automatic,
        loader=loader,
        preferences=preferences,
    )
    logger.info(
        "resolver_created",
        active_locale=resolver.get_locale(),
        automatic=resolver.automatic,
    )
    return resolver
