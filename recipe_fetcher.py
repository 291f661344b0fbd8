import asyncio
import logging
from functools import partial
from typing import Callable, Dict, List, Optional, Tuple

from constants import GITHUB_API_BASE
from github_client import get_comments, get_open_issues
from recipe_assembler import assemble_recipes
from recipe_models import FetchState, Recipe

logger = logging.getLogger(__name__)

Listener = Callable[[Optional[List[Recipe]], Optional[Exception]], None]


class RecipeFetcher:
    """Fetches issues and comments once, then exposes the assembled recipes.

    After a fetch settles, exactly one of ``recipes`` and ``error`` is set.
    """

    def __init__(
        self,
        fetch_open_issues: Callable[[], List[Dict]],
        fetch_comments: Callable[[], List[Dict]]
    ):
        self._fetch_open_issues = fetch_open_issues
        self._fetch_comments = fetch_comments
        self._listeners: List[Listener] = []
        self.state = FetchState.IDLE
        self.recipes: Optional[List[Recipe]] = None
        self.error: Optional[Exception] = None

    @classmethod
    def for_repository(cls, owner: str, repo: str, api_base: str = GITHUB_API_BASE) -> "RecipeFetcher":
        return cls(
            partial(get_open_issues, owner, repo, api_base),
            partial(get_comments, owner, repo, api_base)
        )

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def result(self) -> Tuple[Optional[List[Recipe]], Optional[Exception]]:
        return self.recipes, self.error

    async def fetch(self) -> None:
        self.recipes = None
        self.error = None
        self.state = FetchState.LOADING
        try:
            issues, comments = await asyncio.gather(
                asyncio.to_thread(self._fetch_open_issues),
                asyncio.to_thread(self._fetch_comments)
            )
        except Exception as exc:
            logger.error("Could not fetch issues and comments: %s", exc)
            self.error = exc
            self.state = FetchState.FAILED
        else:
            self.recipes = assemble_recipes(issues, comments)
            self.state = FetchState.LOADED
            logger.info("Built %d recipes from %d issues", len(self.recipes), len(issues))
        self._notify()

    def run(self) -> Tuple[Optional[List[Recipe]], Optional[Exception]]:
        asyncio.run(self.fetch())
        return self.result()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.recipes, self.error)
