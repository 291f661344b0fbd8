import logging
from typing import Dict, List

from constants import DEFAULT_SERVINGS
from recipe_metadata import extract_metadata
from recipe_models import Comment, Recipe
from recipe_parser import label_to_tag, parse_ingredients

logger = logging.getLogger(__name__)


def comments_for_issue(issue: Dict, comments: List[Dict]) -> List[Comment]:
    return [
        Comment(user=c["user"]["login"], body=c["body"])
        for c in comments
        if c["issue_number"] == issue["number"]
    ]


def issue_to_recipe(issue: Dict, comments: List[Dict]) -> Recipe:
    """Build a Recipe from one issue and the comments of the whole repository.

    Raises MetadataError when the metadata block of the issue is malformed.
    """
    body = issue.get("body") or ""
    details_html, metadata = extract_metadata(body)
    return Recipe(
        id=issue["id"],
        name=issue["title"],
        image=metadata.image,
        tags=[label_to_tag(label) for label in issue.get("labels") or []],
        duration=metadata.duration,
        servings=metadata.servings or DEFAULT_SERVINGS,
        ingredients=parse_ingredients(metadata.ingredients or []),
        details_html=details_html,
        details_markdown=body,
        issue_link=issue["html_url"],
        comments=comments_for_issue(issue, comments),
    )


def assemble_recipes(issues: List[Dict], comments: List[Dict]) -> List[Recipe]:
    """Convert every issue it can, skipping those that fail."""
    recipes: List[Recipe] = []
    for issue in issues:
        try:
            recipes.append(issue_to_recipe(issue, comments))
        except Exception:
            logger.exception("Skipping issue #%s: could not build a recipe", issue.get("number"))
    return recipes
