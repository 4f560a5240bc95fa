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

"""SPARQL update statement builder.

Composes subject, predicate and an already-encoded object term into
INSERT DATA / DELETE DATA / DELETE WHERE statements. Every statement
starts with the fixed PREFIX header. Pure string composition.
"""

from __future__ import annotations

from rdf_service.vocabulary import SPARQL_PREFIXES


def with_prefixes(text: str) -> str:
    """Prepend the vocabulary PREFIX header to a query or update."""
    return SPARQL_PREFIXES + text


def _triple(subject: str, predicate: str, term: str) -> str:
    return f"{subject} {predicate} {term} ."


def insert_data(subject: str, predicate: str, term: str) -> str:
    return with_prefixes(f"INSERT DATA {{{_triple(f'<{subject}>', f'<{predicate}>', term)}}}")


def delete_data(subject: str, predicate: str, term: str) -> str:
    return with_prefixes(f"DELETE DATA {{{_triple(f'<{subject}>', f'<{predicate}>', term)}}}")


def delete_outbound(subject: str) -> str:
    """Remove every triple whose subject is the node."""
    return with_prefixes(f"DELETE WHERE {{{_triple(f'<{subject}>', '?p', '?o')}}}")


def delete_inbound(subject: str) -> str:
    """Remove every triple whose object is the node."""
    return with_prefixes(f"DELETE WHERE {{{_triple('?s', '?p', f'<{subject}>')}}}")


def delete_by_predicate(subject: str, predicate: str) -> str:
    """Remove all <subject> <predicate> ?o triples."""
    return with_prefixes(f"DELETE WHERE {{{_triple(f'<{subject}>', f'<{predicate}>', '?o')}}}")
