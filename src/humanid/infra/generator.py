"""Default unique-part generator.

Draws characters from ``[A-Za-z0-9]`` with the ``secrets`` module, which
reads the operating system CSPRNG.  On platforms where no OS entropy
source exists ``os.urandom`` raises ``NotImplementedError``; the
generator then degrades to the ``random`` module and warns once, since
those IDs are guessable.

Any callable ``(length: int) -> str`` can replace this one through
``IdConfig.generator``.
"""

from __future__ import annotations

import logging
import random
import secrets
import string

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_letters + string.digits  # a-z A-Z 0-9

_insecure_warned = False


def _secure_suffix(length: int) -> str:
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def _insecure_suffix(length: int) -> str:
    global _insecure_warned
    if not _insecure_warned:
        logger.warning(
            "Secure random number generator not available. "
            "Falling back to insecure random module."
        )
        _insecure_warned = True
    return "".join(random.choice(ALPHABET) for _ in range(length))


def generate_id(length: int = 32) -> str:
    """Generate a random alphanumeric string.

    Args:
        length: Number of characters to produce.

    Returns:
        A string of exactly ``length`` characters from ``[A-Za-z0-9]``.
    """
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    try:
        return _secure_suffix(length)
    except NotImplementedError:
        return _insecure_suffix(length)
