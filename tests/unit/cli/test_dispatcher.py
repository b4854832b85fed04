from __future__ import annotations

import pytest

from cfnmerge import __version__
from cfnmerge.cli._dispatcher import build_parser, discover_commands, main as cli_main


def test_commands_are_discovered() -> None:
    commands = discover_commands()

    assert {"merge", "inspect"} <= set(commands)
    assert commands["merge"]["summary"] == "Merge a template with the templates it imports"


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main([]) == 0
    assert "usage: cfn-merge" in capsys.readouterr().out


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cli_main(["--version"])

    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == f"cfn-merge {__version__}"


def test_merge_requires_a_file() -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["merge"])
    assert exc.value.code == 2
