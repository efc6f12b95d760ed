"""Locale resolution and message translation.

The resolver owns a translation table (locale -> messages or data source
reference) and the resolution state: the active locale and its content,
the automatic-mode flag and the last explicitly requested locale.

Example:
    resolver = LocaleResolver(
        content={"hello": "Bonjour"},
        locale="fr",
        automatic=False,
    )
    resolver.translate("hello")  # "Bonjour"
    resolver._("missing")        # "missing"
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional, Set

from localekit.exceptions import TranslationLoadError
from localekit.loader import TranslationLoader, create_loader
from localekit.logging import get_module_logger
from localekit.models import (
    AUTO_LOCALE,
    is_data_source_reference,
    ResolverState,
    TranslationContent,
    is_concrete_locale,
    is_message_mapping,
    normalize_locale,
)
from localekit.preferences import LanguagePreferences, no_preferences

logger = get_module_logger()


class LocaleResolver:
    """Resolves the active locale and translates message keys.

    Locale selection has two modes. With automatic mode off, the requested
    locale is applied directly and "auto" falls back to the last locale the
    caller asked for. With automatic mode on, "auto" (and any request made
    while it is on) tries the client's preferred languages in order.

    Attributes:
        loader: Data source for locales not held in memory.
        preferences: Provider of the client's preferred languages.
        state: Mutable resolution state.
    """

    def __init__(
        self,
        content: Optional[TranslationContent] = None,
        locale: Optional[str] = None,
        automatic: Optional[bool] = None,
        loader: Optional[TranslationLoader] = None,
        preferences: Optional[LanguagePreferences] = None,
    ):
        """Initialize the resolver and resolve its first locale.

        Args:
            content: Initial translation content for ``locale``.
            locale: Locale requested at construction (default: "auto").
            automatic: Automatic mode; left on when not given.
            loader: Data source collaborator (default: configured file loader).
            preferences: Client language preferences (default: none).
        """
        self.loader = loader if loader is not None else create_loader()
        self.preferences = preferences if preferences is not None else no_preferences
        self.state = ResolverState()
        self._translations: Dict[str, TranslationContent] = {}

        if content is not None and locale is not None:
            self.add_translation(locale, content)

        if automatic is not None:
            self.set_automatic(automatic)

        self.set_locale(locale if locale is not None else AUTO_LOCALE)

    @property
    def automatic(self) -> bool:
        return self.state.automatic

    @property
    def preferred_locale(self) -> Optional[str]:
        return self.state.preferred_locale

    def add_translation(self, locale: str, content: TranslationContent) -> bool:
        """Add translations for a locale to the table.

        Existing translations for the locale are replaced.

        Args:
            locale: Locale identifier (normalized before use).
            content: Message mapping or data source reference.

        Returns:
            True if the entry was stored, False if locale or content is empty
            or content is neither a mapping nor a data source reference.
        """
        locale = normalize_locale(locale)
        if not locale or not content:
            logger.warning("invalid_translation_entry", locale=locale)
            return False
        if not (is_message_mapping(content) or is_data_source_reference(content)):
            logger.warning(
                "invalid_translation_content",
                locale=locale,
                content_type=type(content).__name__,
            )
            return False

        # Stored by copy; active content only changes through set_locale()
        if is_message_mapping(content):
            content = dict(content)

        self._translations[locale] = content
        logger.info(
            "translation_added",
            locale=locale,
            in_memory=is_message_mapping(content),
        )
        return True

    def get_list(self) -> Optional[Set[str]]:
        """Return the locales with non-empty translation content.

        Returns:
            Set of locale identifiers, or None if there are none.
        """
        locales = {locale for locale, content in self._translations.items() if content}
        return locales or None

    def get_locale(self) -> str:
        """Return the active locale ("auto" until one has been resolved)."""
        return self.state.active_locale

    def is_available(self, locale: str) -> bool:
        """Check if a locale can be activated.

        A locale is available when the table holds an entry for it or the
        loader has a source for it. Nothing is loaded.

        Args:
            locale: Locale identifier (normalized before use).
        """
        locale = normalize_locale(locale)
        if not is_concrete_locale(locale):
            return False
        if locale in self._translations:
            return True
        return self.loader.exists(locale)

    def set_automatic(self, automatic: bool) -> None:
        """Switch automatic mode and re-resolve the locale under it.

        Non-boolean values are ignored.
        """
        if not isinstance(automatic, bool):
            logger.warning("invalid_automatic_flag", value=repr(automatic))
            return

        self.state.automatic = automatic
        logger.info("automatic_mode_set", automatic=automatic)
        self.set_locale(AUTO_LOCALE)

    def set_locale(self, locale: str = AUTO_LOCALE) -> bool:
        """Resolve and activate a locale.

        Args:
            locale: Locale to activate, or "auto".

        Returns:
            True if a locale was activated by this call, False otherwise.
            On False the previously active locale stays in place.

        Raises:
            TranslationLoadError: If the chosen locale's data source does
                not load to a mapping.
        """
        return self._set_locale(locale, probing=False)

    def translate(self, message: Any = "") -> Any:
        """Translate a message key using the active locale.

        Args:
            message: Message key.

        Returns:
            The translated message, or the key unchanged when there is none.
        """
        if isinstance(message, str):
            content = self.state.active_content
            if is_message_mapping(content) and message in content:
                return content[message]
        return message

    def _(self, message: Any = "") -> Any:
        """Shorthand for translate()."""
        return self.translate(message)

    def _set_locale(self, locale: str, probing: bool) -> bool:
        # probing is True while trying client-preferred languages, so a
        # failed candidate never starts another round of probing
        locale = normalize_locale(locale)
        state = self.state
        concrete = is_concrete_locale(locale)

        if not probing and concrete:
            state.preferred_locale = locale

        if not state.automatic and state.preferred_locale is not None and not concrete:
            return self._set_locale(state.preferred_locale, probing=False)

        if (not state.automatic or probing) and concrete and self.is_available(locale):
            state.activate(locale, self._load_translation_data(locale))
            logger.info("locale_resolved", locale=locale, probing=probing)
            return True

        if probing:
            return False

        if state.automatic:
            candidates = list(self.preferences())
            for candidate in candidates:
                if self._set_locale(candidate, probing=True):
                    return True

            # None of the client languages is available: fall back to the
            # requested locale itself
            self._set_locale(locale, probing=True)
            logger.info(
                "automatic_probe_exhausted",
                requested=locale,
                candidates=candidates,
                active_locale=state.active_locale,
            )
            return False

        logger.info("locale_unavailable", locale=locale)
        return False

    def _load_translation_data(self, locale: str) -> Mapping:
        content = self._translations.get(locale)
        if is_message_mapping(content):
            return content

        data = self.loader.load(locale, reference=content)
        if not is_message_mapping(data):
            logger.error(
                "translation_load_failed",
                locale=locale,
                source=str(content) if content is not None else None,
                loaded_type=type(data).__name__,
            )
            raise TranslationLoadError(
                "content is not a mapping after loading",
                locale=locale,
                source=content,
            )
        return data
