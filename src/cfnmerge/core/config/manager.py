"""
Configuration management (YAML only).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

import yaml

from cfnmerge.core.exceptions import ConfigError
from cfnmerge.core.schemas import SchemaValidationError, validate_payload
from cfnmerge.core.utils.io import read_yaml
from cfnmerge.core.utils.merge import deep_merge
from cfnmerge.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "CFNMERGE_"
CONFIG_PATH_ENV = "CFNMERGE_CONFIG"
CONFIG_SCHEMA = "config.schema"


class ConfigManager:
    """Load, merge, and validate configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: CFNMERGE_<section>__<key>
    2. User config file: ``config_path`` argument, else $CFNMERGE_CONFIG
    3. Bundled defaults: cfnmerge.data/config/defaults.yaml
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.environ = os.environ if environ is None else environ
        if config_path is None and self.environ.get(CONFIG_PATH_ENV):
            config_path = Path(self.environ[CONFIG_PATH_ENV])
        self.config_path = Path(config_path).expanduser() if config_path else None
        self.defaults_path = get_data_path("config", "defaults.yaml")

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Fail closed: configuration must never silently ignore invalid YAML.
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except FileNotFoundError as exc:
            raise ConfigError(f"Config file not found: {path}", context={"path": str(path)}) from exc
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Could not parse config file {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data

    def load_config(self, *, validate: bool = True) -> Dict[str, Any]:
        """Return the effective configuration dictionary."""
        cfg = self.load_yaml(self.defaults_path)
        if self.config_path is not None:
            logger.debug("Loading config overrides from %s", self.config_path)
            cfg = deep_merge(cfg, self.load_yaml(self.config_path))
        self.apply_env_overrides(cfg)

        if validate:
            try:
                validate_payload(cfg, CONFIG_SCHEMA)
            except SchemaValidationError as exc:
                ctx = {"path": str(self.config_path)} if self.config_path else None
                raise ConfigError(str(exc), context=ctx) from exc
        return cfg

    # ---------- environment overrides ----------

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(self.environ.keys()):
            if not key.startswith(ENV_PREFIX) or key == CONFIG_PATH_ENV:
                continue
            raw = key[len(ENV_PREFIX):]
            segs = raw.split("__")
            if not raw or any(seg == "" for seg in segs):
                raise ConfigError(f"Malformed {ENV_PREFIX}* key: '{key}'", context={"env": key})
            yield [seg.lower() for seg in segs], self._coerce_type(self.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur: Union[Dict[str, Any], Any] = root
        for part in path[:-1]:
            if not isinstance(cur, dict):
                raise ConfigError(f"Path traverses non-dict container: {'.'.join(path)}")
            key_candidates = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
            key = key_candidates.get(part, part)
            if key not in cur:
                cur[key] = {}
            cur = cur[key]
        if not isinstance(cur, dict):
            raise ConfigError(f"Key assignment requires dict: {'.'.join(path)}")
        lower_map = {k.lower(): k for k in cur.keys() if isinstance(k, str)}
        cur[lower_map.get(path[-1], path[-1])] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, typed_value in self._iter_env_overrides():
            logger.debug("Applying env override %s", ".".join(path))
            self._set_nested(cfg, path, typed_value)


__all__ = ["ConfigManager", "ENV_PREFIX", "CONFIG_PATH_ENV"]
