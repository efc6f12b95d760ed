"""Error taxonomy for the localekit package.

Only loading problems surface as exceptions. Ordinary "locale not present"
conditions are reported through boolean returns by the resolver.
"""

from typing import Any, Optional


class I18nError(Exception):
    """Base exception for all localekit errors."""


class TranslationLoadError(I18nError, ValueError):
    """A located data source did not yield a key/message mapping.

    Raised when a translation file is missing, cannot be parsed, or parses
    to something other than a mapping.

    Attributes:
        locale: Locale whose content was being loaded.
        source: Data source reference (path) that failed, if any.
    """

    def __init__(
        self,
        message: str,
        locale: Optional[str] = None,
        source: Optional[Any] = None,
    ):
        self.locale = locale
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.source is not None:
            return f"{base} (locale={self.locale!r}, source={str(self.source)!r})"
        if self.locale is not None:
            return f"{base} (locale={self.locale!r})"
        return base
