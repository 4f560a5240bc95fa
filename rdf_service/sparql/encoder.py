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

"""Object encoder — renders a triple's object as a SPARQL term.

URI objects become <uri>, literals become "text" or "text"^^xsd:type.
The kind and datatype are validated before any string is built. Text is
not escaped: URIs are wrapped verbatim and embedded double quotes in
literals are passed through, so callers must supply clean input.
"""

from __future__ import annotations

from rdf_service.result import ErrorKind, Fail, Ok, Result
from rdf_service.vocabulary import XSD_DATATYPES, ObjectType


def encode_object(
    obj: str,
    object_type: ObjectType | str | None = None,
    datatype: str | None = None,
) -> Result[str]:
    """Render obj as a URI or literal term. object_type defaults to URI."""
    if object_type is None:
        object_type = ObjectType.URI

    try:
        kind = ObjectType(object_type)
    except ValueError:
        return Fail(
            error='objectType must be one of "URI" or "LITERAL"',
            context=object_type,
            kind=ErrorKind.INVALID_OBJECT_TYPE,
        )

    if kind is ObjectType.URI:
        return Ok(data=f"<{obj}>")

    term = f'"{obj}"'
    if datatype:
        if datatype not in XSD_DATATYPES:
            return Fail(
                error="invalid xsd datatype provided - see RDF 1.1 specification",
                context=datatype,
                kind=ErrorKind.INVALID_DATATYPE,
            )
        term = f"{term}^^{datatype}"
    return Ok(data=term)
