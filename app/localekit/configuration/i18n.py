"""Translation and locale resolution settings."""

from typing import Literal

from pydantic import Field

from localekit.configuration.base import ComponentSettings


class I18nSettings(ComponentSettings):
    """Locale resolution configuration.

    Environment Variables:
        I18N_LANGUAGE_PATH: Directory holding per-locale translation files
            (default: "languages")
        I18N_FILE_FORMAT: Translation file format - 'yaml' or 'json'
        I18N_AUTOMATIC: Infer the locale from client preferences (default: True)
        I18N_DEFAULT_LOCALE: Locale requested at construction (default: "auto")

    Example:
        ```python
        from localekit.configuration import settings

        loader_dir = settings.i18n.language_path
        if settings.i18n.automatic:
            # Resolve from Accept-Language...
        ```
    """

    language_path: str = Field(
        default="languages",
        alias="I18N_LANGUAGE_PATH",
        description="Directory holding <locale>.<ext> translation files",
    )
    file_format: Literal["yaml", "json"] = Field(
        default="yaml",
        alias="I18N_FILE_FORMAT",
        description="Translation file format: 'yaml' or 'json'",
    )
    automatic: bool = Field(
        default=True,
        alias="I18N_AUTOMATIC",
        description="Infer locale from client language preferences",
    )
    default_locale: str = Field(
        default="auto",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale requested when none is given",
    )
