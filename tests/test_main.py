"""Tests for the command-line entry point."""

import io
import json
from pathlib import Path

import pytest

from nutrition_estimator.config import Settings
from nutrition_estimator.containers import build_container
from nutrition_estimator.main import main


@pytest.fixture
def container(settings: Settings):
    return build_container(settings)


def test_main_without_command_prints_help(capsys) -> None:
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "Nutrition Estimator" in captured.out


def test_main_food_info(capsys, container) -> None:
    assert main(["food", "manzana"], container=container) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["key"] == "apple"
    assert data["per_portion"]["calories"] == 78


def test_main_food_not_found(capsys, container) -> None:
    assert main(["food", "unknownfood"], container=container) == 1
    assert "Food not found" in capsys.readouterr().err


def test_main_categories(capsys, container) -> None:
    assert main(["categories"], container=container) == 0
    lines = capsys.readouterr().out.split()
    assert lines == ["fruit", "vegetable", "protein", "carbohydrate", "dairy"]


def test_main_foods_by_category(capsys, container) -> None:
    assert main(["foods", "--category", "dairy"], container=container) == 0
    out = capsys.readouterr().out
    assert [line.split("\t")[0] for line in out.splitlines()] == [
        "milk",
        "cheese",
        "yogurt",
    ]


def test_main_analyze_file(capsys, container, tmp_path: Path) -> None:
    payload = tmp_path / "payload.json"
    payload.write_text(
        json.dumps(
            {
                "objects": [{"name": "Apple", "confidence": 0.95}],
                "labels": [{"description": "Bread", "confidence": 0.9}],
            }
        ),
        encoding="utf-8",
    )

    assert main(["analyze", str(payload)], container=container) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["food_detected"] is True
    assert data["report"]["summary"]["matched"] == 2


def test_main_analyze_stdin(capsys, container, monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"objects": [], "labels": []}'))

    assert main(["analyze"], container=container) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["food_detected"] is False


def test_main_analyze_invalid_json(capsys, container, tmp_path: Path) -> None:
    payload = tmp_path / "payload.json"
    payload.write_text("not json", encoding="utf-8")

    assert main(["analyze", str(payload)], container=container) == 2
    assert "Could not read payload" in capsys.readouterr().err


def test_main_analyze_malformed_sections(capsys, container, tmp_path: Path) -> None:
    payload = tmp_path / "payload.json"
    payload.write_text(json.dumps({"objects": 5, "labels": None}), encoding="utf-8")

    assert main(["analyze", str(payload)], container=container) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["food_detected"] is False


def test_main_analyze_rejects_non_object_payload(
    capsys, container, tmp_path: Path
) -> None:
    payload = tmp_path / "payload.json"
    payload.write_text(json.dumps([{"name": "Apple"}]), encoding="utf-8")

    assert main(["analyze", str(payload)], container=container) == 2
    assert "Payload must be a JSON object" in capsys.readouterr().err
