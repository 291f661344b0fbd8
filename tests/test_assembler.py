import logging

from recipe_assembler import assemble_recipes, comments_for_issue, issue_to_recipe
from recipe_models import Comment, Ingredient, Tag


def make_issue(number, body, **extra):
    issue = {
        "id": 1000 + number,
        "number": number,
        "title": f"Recette {number}",
        "body": body,
        "labels": [],
        "html_url": f"https://github.com/chef/recettes/issues/{number}",
    }
    issue.update(extra)
    return issue


def make_comment(issue_number, login, body):
    return {"issue_number": issue_number, "user": {"login": login}, "body": body}


TARTE_BODY = (
    "---\n"
    "image: x.png\n"
    "personnes: 4\n"
    "ingrédients:\n"
    "  - 1kg pommes\n"
    "  - sel\n"
    "---\n"
    "Cuire 30 minutes.\n"
)


def test_issue_to_recipe_uses_metadata_block():
    issue = make_issue(
        1,
        TARTE_BODY,
        labels=[{"name": "dessert", "color": "ff0000"}, {"name": "vegan", "color": "00ff00"}],
    )

    recipe = issue_to_recipe(issue, [])

    assert recipe.id == 1001
    assert recipe.name == "Recette 1"
    assert recipe.servings == 4
    assert recipe.image == "x.png"
    assert recipe.duration is None
    assert recipe.ingredients == [
        Ingredient(name="pommes", quantity=1.0, unit="kg"),
        Ingredient(name="sel"),
    ]
    assert recipe.tags == [Tag("dessert", "#ff0000"), Tag("vegan", "#00ff00")]
    assert recipe.details_markdown == TARTE_BODY
    assert "<p>Cuire 30 minutes.</p>" in recipe.details_html
    assert recipe.issue_link == "https://github.com/chef/recettes/issues/1"


def test_issue_without_metadata_gets_defaults():
    recipe = issue_to_recipe(make_issue(2, "Juste du texte."), [])

    assert recipe.servings == 1
    assert recipe.ingredients == []
    assert recipe.image is None
    assert recipe.comments == []


def test_issue_with_empty_body():
    recipe = issue_to_recipe(make_issue(3, None), [])

    assert recipe.details_markdown == ""
    assert recipe.servings == 1


def test_zero_servings_falls_back_to_default():
    recipe = issue_to_recipe(make_issue(4, "---\npersonnes: 0\n---\nTexte"), [])

    assert recipe.servings == 1


def test_comments_only_attach_to_matching_issue():
    comments = [
        make_comment(1, "alice", "Délicieux"),
        make_comment(2, "bob", "Trop salé"),
        make_comment(1, "carol", "Avec de la cannelle ?"),
    ]

    assert comments_for_issue(make_issue(1, ""), comments) == [
        Comment(user="alice", body="Délicieux"),
        Comment(user="carol", body="Avec de la cannelle ?"),
    ]
    assert comments_for_issue(make_issue(3, ""), comments) == []


def test_assemble_recipes_skips_broken_issues(caplog):
    issues = [
        make_issue(1, TARTE_BODY),
        make_issue(2, "---\nimage: [x.png\n---\nTexte"),
        make_issue(3, "Soupe."),
    ]

    with caplog.at_level(logging.ERROR, logger="recipe_assembler"):
        recipes = assemble_recipes(issues, [])

    assert [r.id for r in recipes] == [1001, 1003]
    assert "Skipping issue #2" in caplog.text


def test_assemble_recipes_keeps_issues_with_unusable_metadata_values():
    issues = [
        make_issue(1, "---\nIntroduction rapide\n---\nCuire."),
        make_issue(2, "---\npersonnes: 4-6\n---\nServir chaud."),
        make_issue(3, "---\npersonnes: 2.5\ningrédients:\n  -\n  - sel\n---\n"),
    ]

    recipes = assemble_recipes(issues, [])

    assert [r.id for r in recipes] == [1001, 1002, 1003]
    assert [r.servings for r in recipes] == [1, 1, 1]
    assert recipes[2].ingredients == [Ingredient(name="sel")]
