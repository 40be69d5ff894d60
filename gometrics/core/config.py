from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml


DEFAULT_CONFIG: Dict[str, Any] = {
    "version": 1,
    "thresholds": {
        "max_length": 60,
        "max_nesting": 4,
        "max_parameters": 5,
        "max_abc_size": 15.0,
    },
    "files": {
        "include_tests": True,
        "ignored_dirs": [
            ".git",
            ".hg",
            ".svn",
            ".idea",
            ".vscode",
            "node_modules",
            "testdata",
            "vendor",
        ],
    },
    "parsing": {
        "strict": True,
    },
    "reporting": {
        "format": "text",
        "fail_on_violation": False,
    },
}


REPORT_FORMATS = ("text", "json")


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class Config:
    data: Dict[str, Any]

    @classmethod
    def load(cls, path: str | None) -> "Config":
        if not path:
            return cls(copy.deepcopy(DEFAULT_CONFIG))
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        raw = config_path.read_text(encoding="utf-8")
        suffix = config_path.suffix.lower()
        try:
            if suffix == ".json":
                overrides = json.loads(raw)
            elif suffix in {".yaml", ".yml"}:
                overrides = yaml.safe_load(raw) or {}
            else:
                raise ValueError(f"Unsupported config format: {path}")
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ValueError(f"Invalid config file {path}: {exc}") from exc
        if not isinstance(overrides, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return cls.from_dict(overrides)

    @classmethod
    def from_dict(cls, overrides: Dict[str, Any]) -> "Config":
        merged = _deep_merge(copy.deepcopy(DEFAULT_CONFIG), overrides)
        report_format = merged.get("reporting", {}).get("format", "text")
        if report_format not in REPORT_FORMATS:
            raise ValueError(f"Unknown reporting format: {report_format!r}")
        return cls(merged)

    def override(self, overrides: Dict[str, Any]) -> "Config":
        return Config(_deep_merge(self.data, overrides))

    def thresholds(self) -> Dict[str, Any]:
        return self.data.get("thresholds", {})

    def include_tests(self) -> bool:
        return bool(self.data.get("files", {}).get("include_tests", True))

    def ignored_dirs(self) -> set[str]:
        return set(self.data.get("files", {}).get("ignored_dirs", []))

    def strict_parsing(self) -> bool:
        return bool(self.data.get("parsing", {}).get("strict", True))

    def reporting(self) -> Dict[str, Any]:
        return self.data.get("reporting", {})
