from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from cfnmerge.core.utils.io import read_text, read_yaml, write_temp_text, write_text


def test_write_text_creates_parents_and_replaces(tmp_path: Path) -> None:
    target = tmp_path / "out" / "nested" / "merged.yml"

    write_text(target, "Resources: {}\n")
    write_text(target, "Outputs: {}\n")

    assert target.read_text(encoding="utf-8") == "Outputs: {}\n"
    assert [p.name for p in target.parent.iterdir()] == ["merged.yml"]


def test_read_text_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path / "nope.yml")


def test_read_text_round_trips_encoding(tmp_path: Path) -> None:
    target = tmp_path / "t.yml"
    write_text(target, "Description: caf\xe9\n", encoding="latin-1")

    assert read_text(target, encoding="latin-1") == "Description: caf\xe9\n"


def test_write_temp_text_keeps_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))

    path = write_temp_text("Resources: {}\n", prefix="cfn-merge-", suffix=".yml")

    assert path.parent == tmp_path
    assert path.name.startswith("cfn-merge-")
    assert path.suffix == ".yml"
    assert path.read_text(encoding="utf-8") == "Resources: {}\n"


def test_read_yaml_defaults_and_errors(tmp_path: Path) -> None:
    missing = tmp_path / "missing.yaml"
    broken = tmp_path / "broken.yaml"
    broken.write_text("a: [\n", encoding="utf-8")

    assert read_yaml(missing, default={}) == {}
    assert read_yaml(broken, default={"x": 1}) == {"x": 1}
    with pytest.raises(FileNotFoundError):
        read_yaml(missing, raise_on_error=True)
