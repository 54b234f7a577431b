"""
ID generation utilities for the mock creative report API.

Produces opaque lowercase alphanumeric identifiers used for response
request ids and for synthesized entity ids (video, page, image and any
extra info fields). These are plausible-looking, not secure.
"""

import secrets
import string
from typing import Optional, Protocol

from .constants import ENTITY_ID_LENGTH, REQUEST_ID_LENGTH

# Character set for alphanumeric IDs (letters and numbers)
ALPHANUMERIC_CHARS = string.ascii_lowercase + string.digits

# SystemRandom keeps no state of its own, so one instance can serve every request
_default_rng = secrets.SystemRandom()


class ChoiceSource(Protocol):
    """Anything that can pick an element from a sequence (random.Random)."""

    def choice(self, seq): ...


def generate_alphanumeric_id(
    length: int = ENTITY_ID_LENGTH,
    rng: Optional[ChoiceSource] = None,
) -> str:
    """
    Generate a random alphanumeric ID without prefix.

    Args:
        length: Length of the ID (default 24)
        rng: Random source to draw from (default: process-wide SystemRandom)

    Returns:
        A random alphanumeric string
        Example: "a7b3x9k2m4n1p5q8r2s6t0u3"

    Raises:
        ValueError: If length is negative
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    source = rng or _default_rng
    return "".join(source.choice(ALPHANUMERIC_CHARS) for _ in range(length))


def generate_request_id(rng: Optional[ChoiceSource] = None) -> str:
    """Generate a 32-character request ID for a response envelope."""
    return generate_alphanumeric_id(REQUEST_ID_LENGTH, rng=rng)
