import logging
from typing import Any, List, Optional, Tuple

import markdown2
import yaml

from constants import (
    MARKDOWN_EXTRAS,
    METADATA_BLOCK_PATTERNS,
    META_DURATION,
    META_IMAGE,
    META_INGREDIENTS,
    META_SERVINGS,
)
from recipe_models import Metadata

logger = logging.getLogger(__name__)


class MetadataError(ValueError):
    """Raised when the metadata block of an issue cannot be read."""


def split_metadata_block(text: str) -> Tuple[str, str]:
    """Return (raw metadata block, remaining markdown)."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    # blocks closed at the very end of the body have no trailing newline
    padded = text + "\n\n"
    for pattern in METADATA_BLOCK_PATTERNS:
        m = pattern.match(padded)
        if m:
            return m.group(2), padded[m.end():]
    return "", text


def render_markdown_with_metadata(text: str) -> Tuple[str, str]:
    raw_block, content = split_metadata_block(text)
    html = markdown2.markdown(content, extras=MARKDOWN_EXTRAS)
    return str(html), raw_block


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _servings(value: Any) -> Optional[int]:
    """Whole number of servings, or None when the value is not one (e.g. "4-6", 2.5)."""
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value)
    logger.warning("Ignoring '%s' value %r: not a whole number", META_SERVINGS, value)
    return None


def _ingredient_lines(value: Any) -> Optional[List[str]]:
    if value is None or isinstance(value, dict):
        return None
    if not isinstance(value, list):
        value = [value]
    # empty entries ("-") load as None, nested ones ("- sel: fin") as dicts
    return [str(item) for item in value if item is not None and not isinstance(item, (dict, list))]


def parse_metadata(raw_block: str) -> Metadata:
    try:
        data = yaml.safe_load(raw_block) if raw_block.strip() else None
    except yaml.YAMLError as exc:
        raise MetadataError(f"Invalid metadata block: {exc}") from exc

    # a "---" rule pair around plain text loads as a scalar: no metadata
    if not isinstance(data, dict):
        return Metadata()

    return Metadata(
        image=_optional_text(data.get(META_IMAGE)),
        duration=_optional_text(data.get(META_DURATION)),
        servings=_servings(data.get(META_SERVINGS)),
        ingredients=_ingredient_lines(data.get(META_INGREDIENTS)),
    )


def extract_metadata(text: str) -> Tuple[str, Metadata]:
    """Render the markdown of an issue body and read its metadata block."""
    html, raw_block = render_markdown_with_metadata(text)
    return html, parse_metadata(raw_block)
