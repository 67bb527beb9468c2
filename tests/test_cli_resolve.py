"""Tests for the modgraph CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cli.main import app
from modgraph.workshop import FetchError

runner = CliRunner()

_FIXTURES = Path(__file__).parent / "fixtures"
_BASE = "https://reforger.armaplatform.com"
_ROOT_URL = f"{_BASE}/workshop/595F2BF2F44836FB-RHS-StatusQuo"


class FakeFetcher:
    """Stands in for HttpxFetcher; serves the fixture graph."""

    def __init__(self, *args, **kwargs):
        read = lambda name: (_FIXTURES / name).read_text(encoding="utf-8")  # noqa: E731
        self.pages = {
            _ROOT_URL: read("workshop_root_with_deps.html"),
            _ROOT_URL + "/scenarios": read("workshop_scenarios.html"),
            f"{_BASE}/workshop/5AAAC70D754245DD-Some-Mod": read("workshop_dep_5AAA.html"),
        }

    def fetch_text(self, url):
        if url not in self.pages:
            raise FetchError(url, "unknown url")
        return self.pages[url]

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return None


@pytest.fixture
def fake_http(monkeypatch):
    monkeypatch.setattr("cli.main.HttpxFetcher", FakeFetcher)


def test_resolve_summary(fake_http):
    result = runner.invoke(app, ["resolve", _ROOT_URL, "--depth", "2", "--base-url", _BASE])
    assert result.exit_code == 0
    assert "595F2BF2F44836FB" in result.stdout
    assert "5AAAC70D754245DD" in result.stdout
    assert "{C5EAD55037EB4751}Missions/RHS_CombatOps_MSV.conf" in result.stdout
    # The 5C97 page is not served, so it shows up as a warning.
    assert "failed to fetch dependency" in result.stdout


def test_resolve_json(fake_http):
    result = runner.invoke(app, ["resolve", _ROOT_URL, "--json", "--base-url", _BASE])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["rootId"] == "595F2BF2F44836FB"
    assert data["dependencyIds"] == ["5AAAC70D754245DD"]
    assert len(data["errors"]) == 1


def test_resolve_call_level_failure(fake_http):
    result = runner.invoke(app, ["resolve", f"{_BASE}/workshop/no-id-here"])
    assert result.exit_code == 1
    assert "failed to extract workshop id" in result.stdout


def test_inspect_page():
    result = runner.invoke(app, ["inspect-page", str(_FIXTURES / "workshop_root_with_deps.html")])
    assert result.exit_code == 0
    assert "595F2BF2F44836FB" in result.stdout
    assert f"{_BASE}/workshop/5C9758250C8C56F1-Other-Mod" in result.stdout


def test_inspect_page_without_id(tmp_path):
    page = tmp_path / "blank.html"
    page.write_text("<html><body>nothing</body></html>", encoding="utf-8")
    result = runner.invoke(app, ["inspect-page", str(page)])
    assert result.exit_code == 1
    assert "workshop id not found" in result.stdout


def test_inspect_page_missing_file(tmp_path):
    result = runner.invoke(app, ["inspect-page", str(tmp_path / "missing.html")])
    assert result.exit_code == 1


def test_inspect_scenarios():
    result = runner.invoke(app, ["inspect-scenarios", str(_FIXTURES / "workshop_scenarios.html")])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "{C5EAD55037EB4751}Missions/RHS_CombatOps_MSV.conf",
        "{731B585620A3F461}Missions/Coop_CombatOps_Cain_Plus.conf",
    ]


def test_inspect_scenarios_empty():
    result = runner.invoke(app, ["inspect-scenarios", str(_FIXTURES / "workshop_scenarios_empty.html")])
    assert result.exit_code == 0
    assert "No scenarios found" in result.stdout
