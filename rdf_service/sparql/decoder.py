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

"""SPARQL JSON results decoder.

Flattens the standard results shape

    {"head": {"vars": [...]}, "results": {"bindings": [{var: {"value": ...}}]}}

into plain rows of {var: value}. A malformed object decodes to no rows
instead of failing.
"""

from __future__ import annotations

from typing import Any

from rdf_service.logger import get_logger

log = get_logger(__name__)

Row = dict[str, str]


def _bindings(results: Any) -> list[dict[str, Any]]:
    """Return results.bindings, or [] when the shape does not conform."""
    if not isinstance(results, dict):
        if results is not None:
            log.warning("Ignoring non-object SPARQL results: %s", type(results).__name__)
        return []
    body = results.get("results")
    bindings = body.get("bindings") if isinstance(body, dict) else None
    if not isinstance(bindings, list):
        log.warning("SPARQL results lack a results.bindings list")
        return []
    return [b for b in bindings if isinstance(b, dict)]


def _head_vars(results: dict[str, Any]) -> list[str]:
    head = results.get("head")
    variables = head.get("vars") if isinstance(head, dict) else None
    if not isinstance(variables, list):
        return []
    return [v for v in variables if isinstance(v, str)]


def _value(binding: dict[str, Any], var: str) -> str | None:
    cell = binding.get(var)
    if not isinstance(cell, dict):
        return None
    value = cell.get("value")
    return value if isinstance(value, str) else None


def flatten(results: Any, return_first: bool = False) -> list[Row] | Row | None:
    """Decode results into rows keyed by head.vars.

    Variables left unbound in a row are omitted from that row. With
    return_first, only the first row is returned (None when empty).
    """
    bindings = _bindings(results)
    variables = _head_vars(results) if bindings else []

    rows: list[Row] = []
    for binding in bindings:
        row: Row = {}
        for var in variables:
            value = _value(binding, var)
            if value is not None:
                row[var] = value
        rows.append(row)

    if return_first:
        return rows[0] if rows else None
    return rows


def column(results: Any, var: str) -> list[str]:
    """Values of a single variable in result order, skipping unbound rows."""
    values: list[str] = []
    for binding in _bindings(results):
        value = _value(binding, var)
        if value is not None:
            values.append(value)
    return values
