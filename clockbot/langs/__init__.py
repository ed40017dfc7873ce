"""Language module for Clock Bot."""

import logging

from .en import STRINGS

logger = logging.getLogger(__name__)


def get_string(key: str, **kwargs) -> str:
    """Get a reply string by key, filled in with ``kwargs``."""
    text = STRINGS.get(key)
    if text is None:
        logger.error(f"Missing string: {key}")
        return f"[Missing: {key}]"
    if kwargs:
        try:
            return text.format(**kwargs)
        except KeyError as e:
            logger.error(f"String {key} needs placeholder {e}")
            return text
    return text


__all__ = ["get_string", "STRINGS"]
