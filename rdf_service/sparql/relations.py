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

"""Relationship queries over the rdfs:subPropertyOf closure.

A lookup for predicate P matches P itself and every predicate declared,
directly or transitively, as an rdfs:subPropertyOf P.

    related:  <uri> ?pred ?related .   ?pred subPropertyOf* <P>
    relating: ?relating ?pred <uri> .  ?pred subPropertyOf* <P>
"""

from __future__ import annotations

from rdf_service.result import ErrorKind, Fail, Ok, Result
from rdf_service.sparql.statements import with_prefixes
from rdf_service.vocabulary import RDFS_SUBPROPERTY_OF

RELATED_VAR = "related"
RELATING_VAR = "relating"


def _check_arguments(uri: str | None, predicate: str | None) -> Fail | None:
    if not uri:
        return Fail(error="URI must be provided", kind=ErrorKind.MISSING_ARGUMENT)
    if not predicate:
        return Fail(error="predicate must be provided", kind=ErrorKind.MISSING_ARGUMENT)
    return None


def _closure(predicate: str) -> str:
    return f"?pred <{RDFS_SUBPROPERTY_OF}>* <{predicate}> ."


def related_query(uri: str | None, predicate: str | None) -> Result[str]:
    """SELECT the objects reachable from uri through predicate or a sub-property."""
    missing = _check_arguments(uri, predicate)
    if missing is not None:
        return missing
    return Ok(data=with_prefixes(
        f"SELECT ?{RELATED_VAR} WHERE {{<{uri}> ?pred ?{RELATED_VAR} . {_closure(predicate)}}}"
    ))


def relating_query(uri: str | None, predicate: str | None) -> Result[str]:
    """SELECT the subjects pointing at uri through predicate or a sub-property."""
    missing = _check_arguments(uri, predicate)
    if missing is not None:
        return missing
    return Ok(data=with_prefixes(
        f"SELECT ?{RELATING_VAR} WHERE {{?{RELATING_VAR} ?pred <{uri}> . {_closure(predicate)}}}"
    ))
