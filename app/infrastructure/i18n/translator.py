"""Translation service for resolving and interpolating translated messages.

Resolves dotted keys against an ordered list of nested translation
dictionaries, selects plural variants with the CLDR rules of the locale and
substitutes {placeholder} tokens with replacement values.
"""

import re
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from babel.numbers import format_decimal

from core.logging import get_module_logger
from infrastructure.i18n.errors import MissingReplacementError, MissingTranslationError
from infrastructure.i18n.models import (
    ReplacementDictionary,
    RichContent,
    TranslationDictionary,
    is_primitive,
)
from infrastructure.i18n.pseudolocalize import get_transform
from infrastructure.i18n.resolvers import resolve_babel_locale

logger = get_module_logger()

SEPARATOR = "."
PLURALIZATION_KEY_NAME = "count"
PLURAL_CATEGORIES = frozenset(["zero", "one", "two", "few", "many", "other"])
EXPLICIT_PLURAL_KEYS = frozenset(["0", "1"])
REPLACE_PATTERN = re.compile(r"\{\s*(\w+)\s*\}")

Scope = Union[str, Sequence[str], None]
Translation = Union[str, RichContent]

_MISSING = object()


def normalize_identifier(key: str, scope: Scope = None) -> str:
    """Prefix a key with its scope path.

    Args:
        key: Dotted translation key (e.g., "title").
        scope: Dotted scope string or ordered sequence of scope segments.

    Returns:
        Fully scoped dotted key (e.g., "checkout.summary.title").
    """
    if not scope:
        return key
    if isinstance(scope, str):
        return f"{scope}{SEPARATOR}{key}"
    return SEPARATOR.join([*scope, key])


def is_plural_map(entry: Any) -> bool:
    """Check if a dictionary entry holds plural variants rather than keys."""
    if not isinstance(entry, Mapping) or not entry:
        return False
    return all(
        k in PLURAL_CATEGORIES or k in EXPLICIT_PLURAL_KEYS for k in entry.keys()
    ) and all(isinstance(v, str) for v in entry.values())


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _lookup(key: str, dictionary: TranslationDictionary) -> Any:
    result: Any = dictionary
    for part in key.split(SEPARATOR):
        if not isinstance(result, Mapping) or part not in result:
            return _MISSING
        result = result[part]
    return result


class Translator:
    """Service for translating keys against ordered translation dictionaries.

    Dictionaries are searched in the order given; the first one that
    resolves the key wins and later ones act as fallbacks.

    Attributes:
        translations: Ordered translation dictionaries.
        locale: BCP 47 tag driving plural rules and count formatting.
        pseudolocalize: Pseudolocalization flag applied to every result.
    """

    def __init__(
        self,
        translations: Sequence[TranslationDictionary],
        locale: str,
        pseudolocalize: Union[bool, str] = False,
    ):
        """Initialize Translator.

        Args:
            translations: Translation dictionaries in priority order.
            locale: Locale used for plural rules and number formatting.
            pseudolocalize: False, True or the name of a transform variant.

        Raises:
            ValueError: If the pseudolocalization variant is unknown.
        """
        self.translations: Tuple[TranslationDictionary, ...] = tuple(translations)
        self.locale = locale
        self.pseudolocalize = pseudolocalize
        self._transform = get_transform(pseudolocalize)

    def translate(
        self,
        key: str,
        scope: Scope = None,
        replacements: Optional[ReplacementDictionary] = None,
    ) -> Translation:
        """Resolve, pluralize and interpolate a translation.

        Args:
            key: Dotted translation key.
            scope: Optional scope narrowing the lookup to a subtree.
            replacements: Values for {placeholder} tokens. A "count" value
                selects the plural variant of plural entries.

        Returns:
            The translated string, or RichContent when a replacement value
            is not a primitive.

        Raises:
            MissingTranslationError: If no dictionary resolves the key.
            MissingReplacementError: If a placeholder, or the count of a
                plural entry, has no replacement.
        """
        replacements = replacements or {}
        identifier = normalize_identifier(key, scope)

        for dictionary in self.translations:
            resolved = dict(replacements)
            message = self._resolve(identifier, dictionary, resolved)
            if message is not _MISSING:
                return self._finalize(self._interpolate(message, resolved))

        logger.error(
            "translation_not_found",
            key=identifier,
            locale=self.locale,
            dictionary_count=len(self.translations),
        )
        raise MissingTranslationError(identifier, self.locale)

    def has_translation(self, key: str, scope: Scope = None) -> bool:
        """Check if any dictionary resolves the key.

        Args:
            key: Dotted translation key.
            scope: Optional scope narrowing the lookup.

        Returns:
            True if the key resolves to a message or a plural entry.
        """
        identifier = normalize_identifier(key, scope)
        for dictionary in self.translations:
            entry = _lookup(identifier, dictionary)
            if isinstance(entry, str) or is_plural_map(entry):
                return True
        return False

    def _resolve(
        self,
        identifier: str,
        dictionary: TranslationDictionary,
        replacements: Dict[str, Any],
    ) -> Any:
        entry = _lookup(identifier, dictionary)

        if is_plural_map(entry):
            if PLURALIZATION_KEY_NAME not in replacements:
                logger.error(
                    "missing_plural_count",
                    key=identifier,
                    available_replacements=list(replacements.keys()),
                )
                raise MissingReplacementError(
                    PLURALIZATION_KEY_NAME, replacements.keys()
                )
            count = replacements[PLURALIZATION_KEY_NAME]
            if _is_number(count):
                entry = self._pluralize(entry, count)
                replacements[PLURALIZATION_KEY_NAME] = format_decimal(
                    count, locale=resolve_babel_locale(self.locale)
                )

        return entry if isinstance(entry, str) else _MISSING

    def _pluralize(self, entry: Mapping[str, str], count: Any) -> Any:
        # Explicit 0 and 1 variants win over the locale's plural categories
        if count == 0 and "0" in entry:
            return entry["0"]
        if count == 1 and "1" in entry:
            return entry["1"]

        category = resolve_babel_locale(self.locale).plural_form(count)
        return entry.get(category, entry.get("other", _MISSING))

    def _interpolate(
        self, message: str, replacements: Mapping[str, Any]
    ) -> Translation:
        """Substitute {placeholder} tokens in a message.

        Args:
            message: Message string with {placeholder} tokens.
            replacements: Dict of placeholder name -> value.

        Returns:
            The interpolated string, or RichContent when any substituted
            value is not a primitive.

        Raises:
            MissingReplacementError: If a placeholder has no replacement.
        """
        parts: List[Any] = []
        last_offset = 0
        rich = False

        for match in REPLACE_PATTERN.finditer(message):
            name = match.group(1)
            if name not in replacements:
                logger.error(
                    "missing_interpolation_variable",
                    variable=name,
                    available_variables=list(replacements.keys()),
                )
                raise MissingReplacementError(name, replacements.keys())

            parts.append(message[last_offset : match.start()])
            value = replacements[name]
            if is_primitive(value):
                parts.append(str(value))
            else:
                rich = True
                parts.append(value)
            last_offset = match.end()

        parts.append(message[last_offset:])

        if not rich:
            return "".join(parts)

        merged: List[Any] = []
        for part in parts:
            if isinstance(part, str):
                if not part:
                    continue
                if merged and isinstance(merged[-1], str):
                    merged[-1] += part
                    continue
            merged.append(part)
        return RichContent(parts=tuple(merged))

    def _finalize(self, result: Translation) -> Translation:
        if self._transform is None:
            return result
        if isinstance(result, RichContent):
            return RichContent(
                parts=tuple(
                    self._transform(part) if isinstance(part, str) else part
                    for part in result.parts
                )
            )
        return self._transform(result)
