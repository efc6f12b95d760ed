"""Client language preferences.

Turns a client's declared language preferences (an ``Accept-Language``
header) into the ordered list of candidate locales consumed by the
resolver in automatic mode.
"""

from typing import Callable, Iterable, List, Mapping, Optional, Sequence

from localekit.models import AUTO_LOCALE

# Anything callable with no arguments that returns candidate locales in
# preference order.
LanguagePreferences = Callable[[], Sequence[str]]

ACCEPT_LANGUAGE_ENVIRON_KEY = "HTTP_ACCEPT_LANGUAGE"
LANGUAGE_CODE_LENGTH = 2


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into language codes.

    Entries keep their header order; quality values are ignored. Each entry
    is cut to its two-letter language prefix, "auto" entries are dropped
    and duplicates keep their first position.

    Example:
        "fr-CH, fr;q=0.9, en;q=0.8, de;q=0.7" -> ["fr", "en", "de"]

    Args:
        header: Raw header value.

    Returns:
        Ordered, de-duplicated language codes.
    """
    if not header:
        return []

    languages: List[str] = []
    for part in header.split(","):
        lang_range = part.split(";")[0].strip().lower()
        if lang_range == AUTO_LOCALE:
            continue
        code = lang_range[:LANGUAGE_CODE_LENGTH]
        if not code or code in languages:
            continue
        languages.append(code)
    return languages


class StaticLanguagePreferences:
    """Preferences from a fixed list of language codes."""

    def __init__(self, languages: Iterable[str] = ()):
        self.languages = [lang for lang in languages if lang != AUTO_LOCALE]

    def __call__(self) -> List[str]:
        return list(self.languages)


class AcceptLanguagePreferences:
    """Preferences declared by a client's Accept-Language header.

    Attributes:
        header: Raw header value (may be None).
    """

    def __init__(self, header: Optional[str]):
        self.header = header

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "AcceptLanguagePreferences":
        """Build preferences from a WSGI/CGI environ mapping.

        Args:
            environ: Request environment (reads HTTP_ACCEPT_LANGUAGE).

        Returns:
            AcceptLanguagePreferences for the request.
        """
        return cls(environ.get(ACCEPT_LANGUAGE_ENVIRON_KEY))

    def __call__(self) -> List[str]:
        return parse_accept_language(self.header)


def no_preferences() -> List[str]:
    """Provider used when no client context is available."""
    return []
