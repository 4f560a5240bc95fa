# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Loads the service YAML into a typed, immutable ServiceConfig.

Expected shape (every key optional):

    triplestore:
      uri: http://localhost:3030/
      dataset: ds
      timeout: 30
    defaults:
      uri_stub: http://telicent.io/data/
      security_label: ""
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from rdf_service.result import Fail, Ok, Result

_TRIPLESTORE_KEYS = {"uri", "dataset", "timeout"}
_DEFAULTS_KEYS = {"uri_stub", "security_label"}


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    """Connection settings and per-instance defaults."""

    triplestore_uri: str = "http://localhost:3030/"
    dataset: str = "ds"
    default_uri_stub: str = "http://telicent.io/data/"
    default_security_label: str = ""
    timeout: int = 30

    @property
    def query_endpoint(self) -> str:
        return f"{self.triplestore_uri}{self.dataset}/query"

    @property
    def update_endpoint(self) -> str:
        return f"{self.triplestore_uri}{self.dataset}/update"


# ── Loader ─────────────────────────────────────────────────────

def _section(raw: dict[str, Any], name: str, allowed: set[str]) -> dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise TypeError(f"'{name}' must be a mapping")
    unknown = set(section) - allowed
    if unknown:
        raise KeyError(f"unknown keys in '{name}': {', '.join(sorted(unknown))}")
    return section


def _setting(section: dict[str, Any], key: str, default: Any) -> Any:
    """A key present but left empty (null) falls back to the default."""
    value = section.get(key)
    return default if value is None else value


def load_config(path: Path) -> Result[ServiceConfig]:
    """Load a service YAML file into ServiceConfig."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path))

    if not isinstance(raw, dict):
        return Fail(error="Config structure error: top level must be a mapping", context=str(path))

    defaults = ServiceConfig()
    try:
        store = _section(raw, "triplestore", _TRIPLESTORE_KEYS)
        service = _section(raw, "defaults", _DEFAULTS_KEYS)

        config = ServiceConfig(
            triplestore_uri=str(_setting(store, "uri", defaults.triplestore_uri)),
            dataset=str(_setting(store, "dataset", defaults.dataset)),
            timeout=int(_setting(store, "timeout", defaults.timeout)),
            default_uri_stub=str(_setting(service, "uri_stub", defaults.default_uri_stub)),
            default_security_label=str(
                _setting(service, "security_label", defaults.default_security_label)
            ),
        )
    except (KeyError, TypeError, ValueError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path))

    return Ok(data=config)
