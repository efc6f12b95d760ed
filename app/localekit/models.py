"""Translation models for the locale resolver.

Defines locale normalization, translation content types and the mutable
resolution state owned by a resolver instance.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from localekit.exceptions import TranslationLoadError

AUTO_LOCALE = "auto"

# Either an in-memory {key: message} mapping or a reference to a data source
# (a file path) that loads to one.
DataSourceReference = Union[str, os.PathLike]
TranslationContent = Union[Mapping, DataSourceReference]


def normalize_locale(locale: Any) -> str:
    """Normalize a locale identifier to its lowercase, trimmed form.

    Args:
        locale: Raw locale value (e.g., " EN ").

    Returns:
        Normalized identifier (e.g., "en"). ``None`` becomes "".
    """
    if locale is None:
        return ""
    return str(locale).strip().lower()


def is_concrete_locale(locale: str) -> bool:
    """Check whether a normalized locale names an actual language.

    Returns:
        False for "" and the "auto" placeholder, True otherwise.
    """
    return bool(locale) and locale != AUTO_LOCALE


def is_message_mapping(content: Any) -> bool:
    """Check if content is already in its loaded mapping form."""
    return isinstance(content, Mapping)


def is_data_source_reference(content: Any) -> bool:
    """Check if content is a reference (path) to a translation source."""
    return isinstance(content, (str, os.PathLike))


def flatten_messages(data: Mapping, prefix: str = "") -> Dict[str, str]:
    """Flatten nested namespaces into dot-separated message keys.

    Scalar leaves (numbers, booleans) are converted to strings and empty
    (null) leaves are dropped.

    Example:
        {"incident": {"created": "Created"}, "title": "Title", "count": 5}
        -> {"incident.created": "Created", "title": "Title", "count": "5"}

    Args:
        data: Parsed translation data.
        prefix: Key prefix of the enclosing namespace.

    Returns:
        Flat mapping of message key to message.

    Raises:
        TranslationLoadError: If a leaf is a list or another non-scalar value.
    """
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_messages(value, full_key))
        elif value is None:
            continue
        elif isinstance(value, (str, int, float, bool)):
            flat[full_key] = str(value)
        else:
            raise TranslationLoadError(
                f"message {full_key!r} is not a string: {type(value).__name__}"
            )
    return flat


@dataclass
class ResolverState:
    """Resolution state of a single resolver instance.

    The four fields are read and written together by ``set_locale``; a host
    sharing a resolver across threads must guard them as one unit.

    Attributes:
        automatic: Infer the locale from client preferences on "auto".
        preferred_locale: Last explicitly requested concrete locale.
        active_locale: Currently resolved locale ("auto" until resolved).
        active_content: Loaded messages for active_locale.
    """

    automatic: bool = True
    preferred_locale: Optional[str] = None
    active_locale: str = AUTO_LOCALE
    active_content: Optional[Mapping] = None

    def activate(self, locale: str, content: Mapping) -> None:
        """Replace the active locale and its content wholesale."""
        self.active_locale = locale
        self.active_content = content
