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

"""Fixed vocabulary: namespaces, PREFIX header, well-known terms, datatypes.

Pure data. Nothing here is mutated at runtime.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

# ── Namespaces ─────────────────────────────────────────────────

XSD = "http://www.w3.org/2001/XMLSchema#"
DC = "http://purl.org/dc/elements/1.1/"
RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS = "http://www.w3.org/2000/01/rdf-schema#"
OWL = "http://www.w3.org/2002/07/owl#"
TELICENT = "http://telicent.io/ontology/"

# Declaration order of the PREFIX header.
NAMESPACES = MappingProxyType({
    "xsd": XSD,
    "dc": DC,
    "rdf": RDF,
    "rdfs": RDFS,
    "owl": OWL,
    "telicent": TELICENT,
})

SPARQL_PREFIXES = "".join(
    f"PREFIX {prefix}: <{uri}>\n" for prefix, uri in NAMESPACES.items()
)


# ── Well-known terms ───────────────────────────────────────────

RDF_TYPE = f"{RDF}type"
RDF_PROPERTY = f"{RDF}Property"
RDFS_CLASS = f"{RDFS}Class"
RDFS_SUBCLASS_OF = f"{RDFS}subClassOf"
RDFS_SUBPROPERTY_OF = f"{RDFS}subPropertyOf"
RDFS_LABEL = f"{RDFS}label"
RDFS_COMMENT = f"{RDFS}comment"
RDFS_DOMAIN = f"{RDFS}domain"
RDFS_RANGE = f"{RDFS}range"
OWL_CLASS = f"{OWL}Class"
OWL_DATATYPE_PROPERTY = f"{OWL}DatatypeProperty"
OWL_OBJECT_PROPERTY = f"{OWL}ObjectProperty"
TELICENT_STYLE = f"{TELICENT}style"


# ── Object kinds ───────────────────────────────────────────────

class ObjectType(str, Enum):
    """Kind of a triple's object. Blank nodes are deliberately absent."""

    URI = "URI"
    LITERAL = "LITERAL"


# ── XSD datatypes accepted on literals ─────────────────────────

XSD_DATATYPES: frozenset[str] = frozenset({
    "xsd:string",
    "xsd:boolean",
    "xsd:decimal",
    "xsd:integer",
    "xsd:double",
    "xsd:float",
    "xsd:date",
    "xsd:time",
    "xsd:dateTime",
    "xsd:dateTimeStamp",
    "xsd:gYear",
    "xsd:gMonth",
    "xsd:gDay",
    "xsd:gYearMonth",
    "xsd:gMonthDay",
    "xsd:duration",
    "xsd:yearMonthDuration",
    "xsd:dayTimeDuration",
    "xsd:byte",
    "xsd:short",
    "xsd:int",
    "xsd:long",
    "xsd:unsignedByte",
    "xsd:unsignedShort",
    "xsd:unsignedInt",
    "xsd:unsignedLong",
    "xsd:positiveInteger",
    "xsd:nonNegativeInteger",
    "xsd:negativeInteger",
    "xsd:nonPositiveInteger",
    "xsd:hexBinary",
    "xsd:base64Binary",
    "xsd:anyURI",
    "xsd:language",
    "xsd:normalizedString",
    "xsd:token",
    "xsd:NMTOKEN",
    "xsd:Name",
    "xsd:NCName",
})
