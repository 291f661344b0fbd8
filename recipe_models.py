from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from constants import DEFAULT_SERVINGS


@dataclass
class Ingredient:
    """One ingredient line, split into quantity, unit and name when possible."""

    name: str
    quantity: Optional[float] = None
    unit: Optional[str] = None


@dataclass
class Tag:
    name: str
    color: str


@dataclass
class Comment:
    user: str
    body: str


@dataclass
class Metadata:
    """Values read from the metadata block at the top of an issue body."""

    image: Optional[str] = None
    duration: Optional[str] = None
    servings: Optional[int] = None
    ingredients: Optional[List[str]] = None


@dataclass
class Recipe:
    """Structured representation of a recipe built from a GitHub issue."""

    id: int
    name: str
    details_html: str
    details_markdown: str
    issue_link: str
    image: Optional[str] = None
    duration: Optional[str] = None
    servings: int = DEFAULT_SERVINGS
    tags: List[Tag] = field(default_factory=list)
    ingredients: List[Ingredient] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)


class FetchState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"
