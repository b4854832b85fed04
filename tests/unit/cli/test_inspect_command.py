from __future__ import annotations

import json
from pathlib import Path

import pytest

from cfnmerge.cli._dispatcher import main as cli_main
from helpers.files import write_templates


def test_inspect_lists_sections_and_imports(template_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    write_templates(
        template_dir,
        {
            "main.yml": "# @import ./b.yml\nResources:\n  # @import ./c.yml#Resources\nOutputs: {}\n",
            "b.yml": "Parameters:\n  - p\n",
            "c.yml": "Resources:\n  Bucket: {}\n",
        },
    )

    code = cli_main(["inspect", str(template_dir / "main.yml")])

    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert lines == [
        str(template_dir / "main.yml"),
        "Sections: Resources, Outputs",
        f"  line 1: [whole-file] ./b.yml -> {template_dir / 'b.yml'}",
        f"  line 3: [inline] ./c.yml#Resources -> {template_dir / 'c.yml'}",
    ]


def test_inspect_without_imports(template_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    write_templates(template_dir, {"main.yml": "# plain\n"})

    code = cli_main(["inspect", str(template_dir / "main.yml")])

    out = capsys.readouterr().out
    assert code == 0
    assert "Sections: (none)" in out
    assert "Imports: (none)" in out


def test_inspect_reports_broken_imports_as_json(template_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    write_templates(
        template_dir,
        {"main.yml": "Resources:\n# @import ./gone.yml#Resources\n# @import ./x.yml#A#B\n"},
    )

    code = cli_main(["inspect", str(template_dir / "main.yml"), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["sections"] == ["Resources"]
    missing, malformed = payload["imports"]
    assert missing["line"] == 2
    assert missing["section"] == "Resources"
    assert "Could not find './gone.yml'" in missing["error"]
    assert malformed["line"] == 3
    assert "path" not in malformed
    assert "error" in malformed


def test_inspect_missing_template(template_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli_main(["inspect", str(template_dir / "nope.yml")])

    assert code == 1
    assert "Error: Could not find" in capsys.readouterr().err


def test_inspect_undecodable_template(template_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (template_dir / "main.yml").write_bytes(b"Outputs:\n  \xff\n")

    code = cli_main(["inspect", str(template_dir / "main.yml")])

    assert code == 1
    assert "Could not decode" in capsys.readouterr().err
