"""
Engine configuration.

A YAML file with two optional sections; missing keys keep their defaults:

  alphabet: {player: "@", player_on_goal: "*", floor: "-", goal: "+", row_end: "\\n"}
  controls: {up: "8", down: "2", left: "4", right: "6", undo: "0", show: "\\n", quit: "."}
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

import yaml

from .symbols import Alphabet, is_box
from .topology import Direction


@dataclass(frozen=True, slots=True)
class Controls:
    """Single-character command tokens of a play session."""

    up: str = "8"
    down: str = "2"
    left: str = "4"
    right: str = "6"
    undo: str = "0"
    show: str = "\n"
    quit: str = "."

    def direction_for(self, token: str) -> Optional[Direction]:
        """Direction bound to token, None for anything else."""
        for d in Direction:
            if getattr(self, d.value) == token:
                return d
        return None

    def validate(self) -> "Controls":
        tokens = {f.name: getattr(self, f.name) for f in fields(self)}
        for name, tok in tokens.items():
            if not isinstance(tok, str) or len(tok) != 1:
                raise ValueError(f"control {name} must be a single character, got {tok!r}")
        for name in ("undo", "show", "quit"):
            if is_box(tokens[name]):
                raise ValueError(f"control {name} {tokens[name]!r} collides with box letters")
        if len(set(tokens.values())) != len(tokens):
            raise ValueError(f"control tokens must be distinct: {tokens}")
        return self


@dataclass(frozen=True, slots=True)
class EngineConfig:
    alphabet: Alphabet = field(default_factory=Alphabet)
    controls: Controls = field(default_factory=Controls)


def _section(cls, raw: Dict[str, Any], name: str):
    data = raw.get(name) or {}
    if not isinstance(data, dict):
        raise ValueError(f"config section '{name}' must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"unknown keys in '{name}': {sorted(unknown)}")
    # YAML may hand back ints for digit tokens
    return cls(**{k: str(v) for k, v in data.items()}).validate()


def config_from_dict(raw: Optional[Dict[str, Any]]) -> EngineConfig:
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ValueError("config root must be a mapping")
    return EngineConfig(
        alphabet=_section(Alphabet, raw, "alphabet"),
        controls=_section(Controls, raw, "controls"),
    )


def load_config(path: Optional[str] = None) -> EngineConfig:
    """Reads a YAML config; no path means the built-in defaults."""
    if path is None:
        return default_config()
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    return config_from_dict(cfg)


def default_config() -> EngineConfig:
    return EngineConfig()
