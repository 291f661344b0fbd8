import argparse
import json
import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from constants import GITHUB_API_BASE
from recipe_fetcher import RecipeFetcher
from recipe_models import Recipe
from recipe_parser import format_ingredient


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def render_summary(recipes: List[Recipe]) -> str:
    lines: List[str] = []
    for recipe in recipes:
        lines.append(f"# {recipe.name} ({recipe.servings} personnes)")
        lines.append(f"Lien: {recipe.issue_link}")
        if recipe.duration:
            lines.append(f"Durée: {recipe.duration}")
        if recipe.image:
            lines.append(f"Image: {recipe.image}")
        if recipe.tags:
            lines.append("Tags: " + ", ".join(t.name for t in recipe.tags))
        for ing in recipe.ingredients:
            lines.append(f"- {format_ingredient(ing)}")
        lines.append(f"Commentaires: {len(recipe.comments)}")
        lines.append("")
    return "\n".join(lines).strip() + "\n"


def write_json(recipes: List[Recipe], path: Path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump([asdict(r) for r in recipes], f, ensure_ascii=False, indent=2)


def main():
    load_dotenv()
    ap = argparse.ArgumentParser(description="Turn the open issues of a GitHub repository into recipes.")
    ap.add_argument("--owner", default=os.getenv("GITHUB_OWNER"), help="Repository owner (GITHUB_OWNER)")
    ap.add_argument("--repo", default=os.getenv("GITHUB_REPO"), help="Repository name (GITHUB_REPO)")
    ap.add_argument("--api-base", default=os.getenv("GITHUB_API_BASE") or GITHUB_API_BASE, help="GitHub API base URL")
    ap.add_argument("--out", help="Write the recipes as JSON to this file")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests")
    args = ap.parse_args()

    if not args.owner or not args.repo:
        raise SystemExit("Missing GITHUB_OWNER or GITHUB_REPO. Put them in .env, the environment or pass --owner/--repo.")
    setup_logging(args.verbose)

    fetcher = RecipeFetcher.for_repository(args.owner, args.repo, args.api_base)
    recipes, error = fetcher.run()
    if error is not None:
        raise SystemExit(f"Could not fetch recipes: {error}")

    print(render_summary(recipes), end="")
    if args.out:
        out_path = Path(args.out)
        write_json(recipes, out_path)
        print("JSON:", out_path)


if __name__ == "__main__":
    main()
