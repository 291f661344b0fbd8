import re
from typing import List, Pattern

FRENCH_LETTERS = "a-zàâäçéèêëîïôöùûüÿœæ"

INGREDIENT_LINE_RE: Pattern[str] = re.compile(
    rf"^([0-9.]+)([{FRENCH_LETTERS}]*) (.*)\Z",
    re.IGNORECASE
)

# Tried in order against the start of the document.
METADATA_BLOCK_PATTERNS: List[Pattern[str]] = [
    re.compile(r"^\s*«««+(\S*?)\n(.+?)\n»»»+\n", re.S),
    re.compile(r"^\s*---+(\S*?)\n(.+?)\n---+\n", re.S),
]

META_IMAGE = "image"
META_DURATION = "durée"
META_SERVINGS = "personnes"
META_INGREDIENTS = "ingrédients"

DEFAULT_SERVINGS = 1

MARKDOWN_EXTRAS = ["fenced-code-blocks", "tables", "strike"]

GITHUB_API_BASE = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_PER_PAGE = 100
REQUEST_TIMEOUT = 30
