"""Data models for the i18n system.

Defines the locale details a context is built from, translation options,
and the structured result returned when replacements carry rich values.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

TranslationDictionary = Mapping[str, Any]
ReplacementDictionary = Mapping[str, Any]

PRIMITIVE_TYPES = (str, int, float, Decimal, bool)


class LanguageDirection(str, Enum):
    """Writing direction of a language."""

    LTR = "ltr"
    RTL = "rtl"


class NumberStyle(str, Enum):
    """Presentation of a formatted number."""

    NUMBER = "number"
    CURRENCY = "currency"
    PERCENT = "percent"


@dataclass(frozen=True)
class LocaleDetails:
    """Details an I18n context is constructed from.

    Frozen so that a context never observes its defaults changing.

    Attributes:
        locale: IETF BCP 47 language tag (e.g., "en-US", "fr-CA").
        country: Default ISO 3166 country code (e.g., "CA").
        currency: Default ISO 4217 currency code (e.g., "CAD").
        timezone: Default IANA timezone name (e.g., "America/Toronto").
        pseudolocalize: False to disable, True for the default transform,
            or the name of a transform variant.
    """

    locale: str
    country: Optional[str] = None
    currency: Optional[str] = None
    timezone: Optional[str] = None
    pseudolocalize: Union[bool, str] = False

    def __post_init__(self):
        if not self.locale:
            raise ValueError("LocaleDetails requires a locale")


@dataclass(frozen=True)
class TranslateOptions:
    """Options narrowing a translation lookup.

    Attributes:
        scope: Key path prefix, either a dotted string ("checkout.summary")
            or an ordered sequence of segments (["checkout", "summary"]).
    """

    scope: Union[str, Sequence[str], None] = None


@dataclass(frozen=True)
class RichContent:
    """Translation result containing structured replacement values.

    Parts alternate between text fragments and the structured values that
    were substituted for placeholders, in document order, so that a
    renderer can place them without string concatenation.

    Attributes:
        parts: Ordered text fragments (str) and replacement values.
    """

    parts: Tuple[Any, ...]

    def __iter__(self):
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)


def is_primitive(value: Any) -> bool:
    """Check if a replacement value can be rendered directly as text."""
    return isinstance(value, PRIMITIVE_TYPES)
