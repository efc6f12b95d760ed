"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale resolution settings class

Example:
    ```python
    from localekit.configuration import settings

    if settings.i18n.automatic:
        ...
    ```
"""

from localekit.configuration.i18n import I18nSettings
from localekit.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
