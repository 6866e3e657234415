"""Pseudolocalization transforms.

Mutates resolved strings so untranslated or truncated text stands out when
a UI is rendered with a pseudo locale.
"""

from typing import Callable, Dict, Optional, Union

DEFAULT_VARIANT = "accented"

_ACCENTED = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz",
    "ÅƁĆĐĒƑĜĦĨĴĶĹṀŃŌƤǪŔŠŦŨṼŴẊŶŽåƀćđēƒĝħĩĵķĺṁńōƥǫŕšŧũṽŵẋŷž",
)

_FLIPPED = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz",
    "∀ԐↃᗡƎℲ⅁HIſӼ⅂WNOԀÒᴚS⊥∩ɅＭX⅄Zɐqɔpǝɟƃɥıɾʞʅɯuodbɹsʇnʌʍxʎz",
)

# Share of the original length appended as padding
EXPANSION = 0.3

_RLO = "\u202e"
_PDF = "\u202c"


def _accented(text: str) -> str:
    padding = "~" * int(len(text) * EXPANSION)
    return f"[{text.translate(_ACCENTED)}{padding}]"


def _bidi(text: str) -> str:
    return f"{_RLO}{text.translate(_FLIPPED)}{_PDF}"


def _brackets(text: str) -> str:
    return f"[{text}]"


TRANSFORMS: Dict[str, Callable[[str], str]] = {
    "accented": _accented,
    "bidi": _bidi,
    "brackets": _brackets,
}


def get_transform(
    pseudolocalize: Union[bool, str],
) -> Optional[Callable[[str], str]]:
    """Resolve the transform selected by a pseudolocalize flag.

    Args:
        pseudolocalize: False to disable, True for the default variant, or
            the name of a variant.

    Returns:
        The transform function, or None when pseudolocalization is off.

    Raises:
        ValueError: If the variant name is unknown.
    """
    if pseudolocalize is False or pseudolocalize is None:
        return None
    variant = DEFAULT_VARIANT if pseudolocalize is True else pseudolocalize
    try:
        return TRANSFORMS[variant]
    except KeyError as e:
        raise ValueError(
            f"Unknown pseudolocalization variant: {variant}. "
            f"Expected one of: {sorted(TRANSFORMS)}"
        ) from e


def pseudotranslate(text: str, pseudolocalize: Union[bool, str] = True) -> str:
    """Apply the selected pseudolocalization transform to a string."""
    transform = get_transform(pseudolocalize)
    return transform(text) if transform else text
