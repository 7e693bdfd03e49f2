import json

from typer.testing import CliRunner

from hello_fresh_scrape import cli
from hello_fresh_scrape.models.recipe import Recipes


runner = CliRunner()


def test_scrape_saved_page_with_yield_names(tmp_path, recipe_page):
    page = tmp_path / "recipes.html"
    page.write_bytes(recipe_page)
    result = runner.invoke(cli.app, ["-f", str(page), "-y"])
    assert result.exit_code == 0, result.output
    decoded = json.loads(result.stdout)
    assert [r["ID"] for r in decoded] == ["r1", "r2", "r3"]
    assert decoded[0]["Yields"][0]["Ingredients"][1]["ID"] == "Flour"


def test_output_file(tmp_path, recipe_page):
    page = tmp_path / "recipes.html"
    page.write_bytes(recipe_page)
    out = tmp_path / "recipes.json"
    result = runner.invoke(cli.app, ["-f", str(page), "-o", str(out)])
    assert result.exit_code == 0, result.output
    decoded = json.loads(out.read_text(encoding="utf-8"))
    assert decoded[0]["Yields"][0]["Ingredients"][0]["ID"] == "i1"


def test_list_collections(monkeypatch):
    monkeypatch.setattr(cli, "collections", lambda: ["https://a.example/x", "https://a.example/y"])
    result = runner.invoke(cli.app, ["-l"])
    assert result.exit_code == 0
    assert result.stdout == "https://a.example/x\nhttps://a.example/y\n"


def test_scrapes_page_option(monkeypatch):
    calls = []

    def fake_scrape(page, resolve_yields=False):
        calls.append((page, resolve_yields))
        return Recipes.model_validate([{"id": "r9"}])

    monkeypatch.setattr(cli.orchestrator, "scrape_recipes", fake_scrape)
    result = runner.invoke(cli.app, ["-p", "https://www.hellofresh.com/recipes/quick-meals"])
    assert result.exit_code == 0, result.output
    assert calls == [("https://www.hellofresh.com/recipes/quick-meals", False)]
    assert json.loads(result.stdout)[0]["ID"] == "r9"


def test_check_rejects_unlisted_page(monkeypatch):
    monkeypatch.setattr(cli, "collections", lambda: ["https://www.hellofresh.com/recipes/quick-meals"])
    monkeypatch.setattr(cli.orchestrator, "scrape_recipes", lambda *a, **kw: Recipes())
    result = runner.invoke(cli.app, ["--check", "-p", "https://www.hellofresh.com/recipes/unknown"])
    assert result.exit_code == 1
    assert "not a listed recipe collection" in result.output


def test_page_without_payload_exits_nonzero(tmp_path):
    page = tmp_path / "broken.html"
    page.write_bytes(b"<html><body>nothing here</body></html>")
    result = runner.invoke(cli.app, ["-f", str(page)])
    assert result.exit_code == 1
    assert "recipe props data not found" in result.output
