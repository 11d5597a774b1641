"""Input normalization in front of the validation engine.

``validate`` expects an uppercase string without whitespace and performs no
normalization of its own. Interactive callers also hold back very short
inputs, which cannot tell anything useful yet.
"""

from ..utils.config import get_settings


def normalize(text: str) -> str:
    """Uppercase ``text`` and remove every whitespace character.

    >>> normalize(" gb82 west 1234 5698 7654 32 ")
    'GB82WEST12345698765432'
    """
    return "".join(text.split()).upper()


def is_ready(normalized: str, min_length: int | None = None) -> bool:
    """Whether a normalized input is long enough to be worth validating.

    Args:
        normalized: Output of ``normalize``
        min_length: Length the input must exceed (defaults to the
            ``min_input_length`` setting)
    """
    if min_length is None:
        min_length = get_settings().min_input_length
    return len(normalized) > min_length


def prepare(text: str, min_length: int | None = None) -> str | None:
    """Normalize ``text``; None when the result is still too short to validate."""
    normalized = normalize(text)
    if not is_ready(normalized, min_length):
        return None
    return normalized
