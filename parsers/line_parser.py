import logging
from typing import Optional

from core.errors import InvalidPropertyLine
from models.property_model import Property

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "="


def resolve_separator(separator: Optional[str] = None) -> str:
    """Return the separator to use, falling back to DEFAULT_SEPARATOR"""
    return DEFAULT_SEPARATOR if separator is None else separator


def split(line: str, separator: Optional[str] = None) -> Property:
    """
    Split a line holding exactly one separator into a Property.
    Key and value are stripped of surrounding whitespace.

    Raises InvalidPropertyLine when the separator is missing or repeated;
    callers that cannot guarantee a well-formed line should use try_split.
    """
    sep = resolve_separator(separator)
    parts = line.split(sep)
    if len(parts) != 2:
        raise InvalidPropertyLine(sep)

    key, value = parts
    return Property(key=key.strip(), value=value.strip())


def try_split(
    line: str,
    separator: Optional[str] = None,
    comment: Optional[str] = None,
) -> Optional[Property]:
    """
    Split a line into a Property, or return None when the line is empty,
    starts with the comment marker, or does not hold exactly one separator.
    """
    if not line:
        logger.debug("Skipping empty line")
        return None

    if comment is not None and line.startswith(comment):
        logger.debug("Skipping comment line: %r", line)
        return None

    count = line.count(resolve_separator(separator))
    if count != 1:
        logger.debug("Skipping line with %d separator(s): %r", count, line)
        return None

    return split(line, separator)


class LineParser:
    """Binds a separator and comment marker to split/try_split"""

    def __init__(self, separator: Optional[str] = None, comment: Optional[str] = None):
        self.separator = separator
        self.comment = comment

    def split(self, line: str) -> Property:
        return split(line, self.separator)

    def try_split(self, line: str) -> Optional[Property]:
        return try_split(line, self.separator, self.comment)
