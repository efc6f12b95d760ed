"""Translation loading interface and implementations.

Defines the contract for the external data source of a resolver and
provides YAML and JSON file loaders.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, TextIO

import yaml

from localekit.configuration import I18nSettings, settings
from localekit.exceptions import TranslationLoadError
from localekit.logging import get_module_logger
from localekit.models import DataSourceReference, flatten_messages, is_concrete_locale

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for translation data sources.

    Implementations decide where the conventional source of a locale lives
    and how a source is read. They do not validate the shape of what they
    load; the resolver checks that the result is a mapping.
    """

    @abstractmethod
    def source_for(self, locale: str) -> Path:
        """Return the conventional source of a locale.

        Args:
            locale: Normalized locale identifier.

        Returns:
            Location loaded when the table holds no entry for the locale.
        """
        pass

    @abstractmethod
    def exists(self, locale: str) -> bool:
        """Check if the conventional source for a locale is accessible.

        Args:
            locale: Normalized locale identifier.

        Returns:
            True if the source exists and can be loaded.
        """
        pass

    @abstractmethod
    def load(
        self,
        locale: str,
        reference: Optional[DataSourceReference] = None,
    ) -> Any:
        """Load translation data for a locale.

        Args:
            locale: Normalized locale identifier.
            reference: Explicit source to load instead of the conventional one.

        Returns:
            Parsed data, normally a mapping of message key to message.

        Raises:
            TranslationLoadError: If the source is missing or cannot be parsed.
        """
        pass


class FileTranslationLoader(TranslationLoader):
    """Loader for per-locale translation files.

    The conventional source of a locale is ``<translations_dir>/<locale><extension>``,
    e.g. ``languages/en.yml``. Explicit references are paths, resolved
    against the current working directory when relative.

    Attributes:
        translations_dir: Directory holding the translation files.
        extension: File extension including the leading dot.
    """

    extension: str = ""

    def __init__(self, translations_dir: Path, extension: Optional[str] = None):
        """Initialize file translation loader.

        Args:
            translations_dir: Directory with translation files. It does not
                need to exist; nothing is available from a missing directory.
            extension: Override for the class file extension.
        """
        self.translations_dir = Path(translations_dir)
        if extension is not None:
            self.extension = extension

        logger.info(
            "initialized_file_loader",
            translations_dir=str(self.translations_dir),
            extension=self.extension,
        )

    def source_for(self, locale: str) -> Path:
        """Return the conventional source path for a locale."""
        return self.translations_dir / f"{locale}{self.extension}"

    def exists(self, locale: str) -> bool:
        if not is_concrete_locale(locale) or not _is_safe_name(locale):
            return False
        return self.source_for(locale).is_file()

    def load(
        self,
        locale: str,
        reference: Optional[DataSourceReference] = None,
    ) -> Any:
        if reference is not None:
            try:
                path = Path(reference).expanduser()
            except TypeError as e:
                logger.error(
                    "invalid_translation_reference",
                    locale=locale,
                    reference_type=type(reference).__name__,
                )
                raise TranslationLoadError(
                    "translation source reference is not a path",
                    locale=locale,
                    source=reference,
                ) from e
        elif _is_safe_name(locale):
            path = self.source_for(locale)
        else:
            raise TranslationLoadError("invalid locale identifier", locale=locale)

        if not path.is_file():
            logger.error("translation_source_missing", locale=locale, file=str(path))
            raise TranslationLoadError(
                "translation source not found", locale=locale, source=path
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = self._parse(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(
                "translation_parse_error", locale=locale, file=str(path), error=str(e)
            )
            raise TranslationLoadError(
                f"failed to parse translation source: {e}",
                locale=locale,
                source=path,
            ) from e

        if isinstance(data, dict):
            try:
                data = flatten_messages(data)
            except TranslationLoadError as e:
                logger.error(
                    "translation_message_invalid",
                    locale=locale,
                    file=str(path),
                    error=str(e),
                )
                raise TranslationLoadError(str(e), locale=locale, source=path) from e
            logger.info(
                "loaded_translations",
                locale=locale,
                file=str(path),
                message_count=len(data),
            )
        return data

    @abstractmethod
    def _parse(self, stream: TextIO) -> Any:
        """Parse an open translation file."""
        pass


class YAMLTranslationLoader(FileTranslationLoader):
    """Loader for YAML translation files (``<locale>.yml``).

    Expected format, flat or namespaced::

        title: Weather
        forecast:
          today: Today
          tomorrow: Tomorrow
    """

    extension = ".yml"

    def _parse(self, stream: TextIO) -> Any:
        return yaml.safe_load(stream)


class JSONTranslationLoader(FileTranslationLoader):
    """Loader for JSON translation files (``<locale>.json``)."""

    extension = ".json"

    def _parse(self, stream: TextIO) -> Any:
        return json.load(stream)


LOADERS_BY_FORMAT = {
    "yaml": YAMLTranslationLoader,
    "json": JSONTranslationLoader,
}


def _is_safe_name(locale: str) -> bool:
    # Locale ids become file names; keep them inside translations_dir
    return bool(locale) and "/" not in locale and "\\" not in locale and ".." not in locale


def create_loader(
    i18n_settings: Optional[I18nSettings] = None,
) -> FileTranslationLoader:
    """Create the file loader described by the i18n settings.

    Args:
        i18n_settings: I18nSettings instance (default: settings.i18n).

    Returns:
        YAML or JSON loader over the configured language path.
    """
    if i18n_settings is None:
        i18n_settings = settings.i18n

    loader_class = LOADERS_BY_FORMAT[i18n_settings.file_format]
    return loader_class(Path(i18n_settings.language_path))
