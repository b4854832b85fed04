from __future__ import annotations

from pathlib import Path

import pytest

from cfnmerge.core.config import (
    DEFAULT_SECTIONS,
    FORMAT_VERSION_KEY,
    ConfigManager,
    OutputConfig,
    TemplateConfig,
)
from cfnmerge.core.exceptions import ConfigError
from helpers.files import write_config


def test_bundled_defaults_load_and_validate() -> None:
    cfg = ConfigManager(environ={}).load_config()

    assert cfg["template"]["sections"] == list(DEFAULT_SECTIONS)
    assert cfg["template"]["import_token"] == "# @import"
    assert cfg["template"]["section_delimiter"] == "#"
    assert cfg["template"]["include_format_version"] is False
    assert cfg["logging"]["level"] == "WARNING"


def test_config_file_overrides_defaults(tmp_path: Path) -> None:
    path = write_config(tmp_path / "cfn-merge.yaml", {"template": {"encoding": "latin-1"}})

    cfg = ConfigManager(path, environ={}).load_config()

    assert cfg["template"]["encoding"] == "latin-1"
    assert cfg["template"]["import_token"] == "# @import"


def test_config_file_can_append_sections(tmp_path: Path) -> None:
    path = write_config(tmp_path / "c.yaml", {"template": {"sections": ["+", "Rules"]}})

    cfg = ConfigManager(path, environ={}).load_config()

    assert cfg["template"]["sections"] == [*DEFAULT_SECTIONS, "Rules"]


def test_config_path_from_environment(tmp_path: Path) -> None:
    path = write_config(tmp_path / "env.yaml", {"logging": {"level": "INFO"}})

    cfg = ConfigManager(environ={"CFNMERGE_CONFIG": str(path)}).load_config()

    assert cfg["logging"]["level"] == "INFO"


def test_env_overrides_are_typed() -> None:
    environ = {
        "CFNMERGE_TEMPLATE__INCLUDE_FORMAT_VERSION": "true",
        "CFNMERGE_TEMPLATE__SECTIONS": '["Resources", "Outputs"]',
        "CFNMERGE_LOGGING__LEVEL": "DEBUG",
    }

    cfg = ConfigManager(environ=environ).load_config()

    assert cfg["template"]["include_format_version"] is True
    assert cfg["template"]["sections"] == ["Resources", "Outputs"]
    assert cfg["logging"]["level"] == "DEBUG"


def test_env_overrides_win_over_config_file(tmp_path: Path) -> None:
    path = write_config(tmp_path / "c.yaml", {"logging": {"level": "INFO"}})

    cfg = ConfigManager(path, environ={"CFNMERGE_LOGGING__LEVEL": "ERROR"}).load_config()

    assert cfg["logging"]["level"] == "ERROR"


@pytest.mark.parametrize("key", ["CFNMERGE_", "CFNMERGE_TEMPLATE____ENCODING", "CFNMERGE_TEMPLATE__"])
def test_malformed_env_key_is_rejected(key: str) -> None:
    with pytest.raises(ConfigError):
        ConfigManager(environ={key: "x"}).load_config()


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc:
        ConfigManager(tmp_path / "absent.yaml", environ={}).load_config()
    assert exc.value.context["path"] == str(tmp_path / "absent.yaml")


@pytest.mark.parametrize("text", ["template: [\n", "- just\n- a list\n"])
def test_unusable_config_file(tmp_path: Path, text: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigManager(path, environ={}).load_config()


@pytest.mark.parametrize(
    "override",
    [
        {"template": {"section_delimiter": "##"}},
        {"template": {"unknown": 1}},
        {"logging": {"level": "LOUD"}},
        {"template": {"sections": ["="]}},
    ],
)
def test_schema_violations_raise_config_error(tmp_path: Path, override: dict) -> None:
    path = write_config(tmp_path / "c.yaml", override)

    with pytest.raises(ConfigError) as exc:
        ConfigManager(path, environ={}).load_config()
    assert "Validation failed" in str(exc.value)


def test_validation_can_be_skipped(tmp_path: Path) -> None:
    path = write_config(tmp_path / "c.yaml", {"logging": {"level": "LOUD"}})

    cfg = ConfigManager(path, environ={}).load_config(validate=False)

    assert cfg["logging"]["level"] == "LOUD"


def test_template_config_from_defaults() -> None:
    cfg = ConfigManager(environ={}).load_config()

    assert TemplateConfig.from_dict(cfg) == TemplateConfig()
    assert OutputConfig.from_dict(cfg) == OutputConfig()


def test_template_config_adds_format_version_first() -> None:
    tc = TemplateConfig.from_dict({"template": {"include_format_version": True}})

    assert tc.sections == (FORMAT_VERSION_KEY, *DEFAULT_SECTIONS)


def test_template_config_does_not_duplicate_format_version() -> None:
    tc = TemplateConfig.from_dict(
        {"template": {"sections": ["Resources", FORMAT_VERSION_KEY], "include_format_version": True}}
    )

    assert tc.sections == ("Resources", FORMAT_VERSION_KEY)
