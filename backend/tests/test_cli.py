from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from geomapobject.cli.main import app as cli_app


runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    for name in ("GMAP_STATIC_URL", "GMAP_JAVASCRIPT_URL", "GMAP_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def _write(tmp_path: Path, text: str, name: str = "map.yaml") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


MAP_YAML = """\
key: FILEKEY
center: 46.8,14.58
zoom: 13
size: 512x400
maptype: terrain
markers:
  - location: 46.818285,14.587601
    color: green
    label: M
    title: Gasthaus &amp; Pension
  - location: 46.818917,14.572672
    color: red
    label: S
"""


def test_version():
    result = runner.invoke(cli_app, ["version"])
    assert result.exit_code == 0, result.output
    assert "mapobject" in result.output


def test_static_url_from_yaml(tmp_path: Path) -> None:
    path = _write(tmp_path, MAP_YAML)
    result = runner.invoke(cli_app, ["static-url", str(path), "--raw"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == (
        "http://maps.google.com/maps/api/staticmap?center=46.8,14.58&zoom=13&size=512x400"
        "&mobile=false&key=FILEKEY&sensor=false"
        "&markers=color:green|label:M|46.818285,14.587601"
        "&markers=color:red|label:S|46.818917,14.572672"
    )


def test_javascript_url_escaped(tmp_path: Path) -> None:
    path = _write(tmp_path, MAP_YAML)
    result = runner.invoke(cli_app, ["javascript-url", str(path)])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == (
        "http://maps.google.com/maps?file=api&amp;v=2&amp;key=FILEKEY&amp;sensor=false"
    )


def test_json_from_json_file(tmp_path: Path) -> None:
    definition = {
        "key": "FILEKEY",
        "markers": [{"location": "1,2", "title": "A &amp; B", "id": 7}],
    }
    path = _write(tmp_path, json.dumps(definition), name="map.json")
    result = runner.invoke(cli_app, ["json", str(path)])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert "key" not in payload
    assert payload["markers"] == [{"location": "1,2", "title": "A & B", "id": 7}]


def test_key_falls_back_to_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("GMAP_API_KEY", "ENVKEY")
    path = _write(tmp_path, "center: 1,2\nzoom: 3\n")
    result = runner.invoke(cli_app, ["static-url", str(path), "--raw"])
    assert result.exit_code == 0, result.output
    assert "key=ENVKEY" in result.output


def test_invalid_map_exits_with_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "center: 1,2\nzoom: 3\n")
    result = runner.invoke(cli_app, ["static-url", str(path)])
    assert result.exit_code == 1
    assert "MissingCredential" in result.output


def test_autozoom_command(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "markers:\n  - location: 0,0\n  - location: 0,1\n  - location: 1,0\n",
    )
    result = runner.invoke(cli_app, ["autozoom", str(path), "--max-zoom", "10"])
    assert result.exit_code == 0, result.output
    assert "zoom=5 center=0.500004759443271,0.250019039676189" in result.output


def test_autozoom_uses_file_maximum(tmp_path: Path) -> None:
    path = _write(tmp_path, "autozoom: 4\nmarkers:\n  - location: 0,0\n  - location: 0,1\n")
    result = runner.invoke(cli_app, ["autozoom", str(path)])
    assert result.exit_code == 0, result.output
    assert "zoom=4 " in result.output


def test_numeric_label_from_yaml(tmp_path: Path) -> None:
    path = _write(tmp_path, "key: K\nmarkers:\n  - {location: '1,2', label: 5, color: red}\n")
    result = runner.invoke(cli_app, ["static-url", str(path), "--raw"])
    assert result.exit_code == 0, result.output
    assert result.output.strip().endswith("&markers=color:red|label:5|1,2")
