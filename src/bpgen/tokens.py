"""Random CSS class tokens."""

import random
import string
from typing import Optional

TOKEN_ALPHABET = string.ascii_letters + string.digits
TOKEN_LENGTH = 8


def generate_class_token(
    length: int = TOKEN_LENGTH, rng: Optional[random.Random] = None
) -> str:
    """Return a random alphanumeric class name of ``length`` characters.

    Not suitable for anything security related. Pass ``rng`` to make the
    result reproducible.
    """
    if length < 1:
        raise ValueError(f"Token length must be positive, got {length}")

    rng = rng or random.Random()
    return "".join(rng.choices(TOKEN_ALPHABET, k=length))
