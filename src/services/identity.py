"""Anonymous user identifiers used to key wishlist rows."""

import logging
import re
import secrets
import string
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

USER_ID_PREFIX = "user_"
USER_ID_ALPHABET = string.digits + string.ascii_lowercase
USER_ID_LENGTH = 9

_USER_ID_PATTERN = re.compile(r"[A-Za-z0-9_\-]{1,64}")


def generate_user_id() -> str:
    suffix = "".join(secrets.choice(USER_ID_ALPHABET) for _ in range(USER_ID_LENGTH))
    return f"{USER_ID_PREFIX}{suffix}"


def is_valid_user_id(value: Optional[str]) -> bool:
    return bool(value) and _USER_ID_PATTERN.fullmatch(value) is not None


def load_or_create_user_id(path: Union[str, Path]) -> str:
    """
    Read the identifier persisted at ``path``, creating it on first use.

    A malformed file is replaced with a fresh identifier.
    """
    path = Path(path)
    if path.exists():
        stored = path.read_text(encoding="utf-8").strip()
        if is_valid_user_id(stored):
            return stored
        logger.warning("Ignoring malformed user id in %s", path)

    user_id = generate_user_id()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(user_id, encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not persist user id to %s: %s", path, exc)
    return user_id
