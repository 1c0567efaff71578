# -*- coding: utf-8 -*-

from __future__ import annotations

import sys
import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

import tomli_w

CONFIG_FILE_NAME = "config.toml"

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Config:
    img_bg_color: RGB = (45, 45, 45)
    char_color: RGB = (250, 250, 245)
    char_shadow_color: RGB = (110, 110, 110)
    chars_per_line: int = 32

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Validate a parsed TOML document. Unknown keys are ignored."""
        return cls(
            img_bg_color=_parse_color(data, "img_bg_color"),
            char_color=_parse_color(data, "char_color"),
            char_shadow_color=_parse_color(data, "char_shadow_color"),
            chars_per_line=_parse_positive_int(data, "chars_per_line"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        for key, value in out.items():
            if isinstance(value, tuple):
                out[key] = list(value)
        return out


def _require(data: Dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing field: {key}")
    return data[key]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_color(data: Dict[str, Any], key: str) -> RGB:
    value = _require(data, key)
    if not isinstance(value, list) or len(value) != 3:
        raise ValueError(f"{key} must be an array of 3 integers, got {value!r}")
    if not all(_is_int(v) and 0 <= v <= 255 for v in value):
        raise ValueError(f"{key} values must be integers in 0..255, got {value!r}")
    r, g, b = value
    return (r, g, b)


def _parse_positive_int(data: Dict[str, Any], key: str) -> int:
    value = _require(data, key)
    if not _is_int(value) or value <= 0:
        raise ValueError(f"{key} must be a positive integer, got {value!r}")
    return value


def default_config_path() -> Path:
    # Lives next to the program that is running, not the working directory.
    return Path(sys.argv[0]).resolve().parent / CONFIG_FILE_NAME


def dump_config(config: Config, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        tomli_w.dump(config.to_dict(), f)


def load_config(path: Path) -> Config:
    """
    Load the config file at `path`.

    - missing: write the defaults there and use them
    - unparsable or invalid: warn and use the defaults, the file is left alone
    I/O errors propagate.
    """
    if not path.exists():
        print("[Warning] Config file not found, writing and using default config.")
        config = Config()
        dump_config(config, path)
        return config

    try:
        return Config.from_dict(tomllib.loads(path.read_text(encoding="utf-8")))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, ValueError) as e:
        print(f"[Warning] Invalid config file, using default config. ({e})")
        return Config()
