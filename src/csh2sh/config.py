"""
Transpiler configuration.

Defaults describe the C shell → Bash conversion. A YAML file can override
any field:

    source_extension: .tcsh
    target_extension: .bash
    interpreter_header: "#!/usr/bin/env bash"
    encoding: latin-1
"""
from __future__ import annotations

from dataclasses import dataclass, fields, asdict
from typing import Any, Dict

import yaml

from csh2sh.errors import InvalidInputError, SourceNotFoundError


@dataclass(frozen=True)
class TranspilerConfig:
    """
    Settings of a ScriptTranspiler.

    Properties:
        source_extension: Required suffix of input files (compared case-insensitively)
        target_extension: Suffix of the generated sibling file
        interpreter_header: First line written to every output file
        encoding: Text encoding used for reading and writing
    """

    source_extension: str = ".csh"
    target_extension: str = ".sh"
    interpreter_header: str = "#!/bin/bash"
    encoding: str = "utf-8"

    def __post_init__(self):
        for name in ("source_extension", "target_extension"):
            value = getattr(self, name)
            if not value.startswith("."):
                object.__setattr__(self, name, "." + value)


DEFAULT_CONFIG = TranspilerConfig()


def config_to_dict(config: TranspilerConfig) -> Dict[str, Any]:
    return asdict(config)


def config_from_dict(d: Dict[str, Any] | None) -> TranspilerConfig:
    if not d:
        return TranspilerConfig()
    if not isinstance(d, dict):
        raise InvalidInputError(f"Configuration must be a mapping, got {type(d).__name__}")
    known = {f.name for f in fields(TranspilerConfig)}
    unknown = sorted(set(d) - known)
    if unknown:
        raise InvalidInputError(f"Unknown configuration keys: {', '.join(unknown)}")
    return TranspilerConfig(**{k: str(v) for k, v in d.items()})


def load_config(filepath: str) -> TranspilerConfig:
    """
    Load a TranspilerConfig from a YAML file.

    Raises:
        SourceNotFoundError: If the file doesn't exist
        InvalidInputError: If the YAML is malformed or has unknown keys
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise SourceNotFoundError(f"Configuration file not found: {filepath}")

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise InvalidInputError(f"Invalid configuration file {filepath}: {e}")

    return config_from_dict(data)


__all__ = [
    "TranspilerConfig",
    "DEFAULT_CONFIG",
    "config_to_dict",
    "config_from_dict",
    "load_config",
]
