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

"""RdfService — create, read and delete triples in a SPARQL triplestore.

Each operation validates its input, builds one statement, hands it to
the transport and returns a Result:

  1. Encode the object term (URI or typed/untyped literal)
  2. Build the prefixed INSERT / DELETE / SELECT text
  3. Send it through the transport
  4. Decode SPARQL JSON results for reads

Validation failures are returned before anything is sent. Transport
failures are returned unchanged. Every operation is a single independent
update; there is no atomicity across calls and no retry.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import Any

from rdf_service.config import ServiceConfig
from rdf_service.logger import get_logger, shorten
from rdf_service.result import ErrorKind, Fail, Ok, Result
from rdf_service.sparql import decoder, relations, statements
from rdf_service.sparql.client import HttpTransport, Transport
from rdf_service.sparql.encoder import encode_object
from rdf_service.vocabulary import RDF_TYPE, RDFS_COMMENT, RDFS_LABEL, ObjectType

log = get_logger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class RdfService:
    """Convenience operations over a single triplestore dataset.

    Args:
        config: Endpoint and default settings. Defaults to a local Fuseki
            dataset named "ds".
        transport: Sends statements to the store. Defaults to HttpTransport.
        new_id: Supplies the unique suffix for minted resource URIs.
    """

    def __init__(
        self,
        config: ServiceConfig | None = None,
        transport: Transport | None = None,
        new_id: Callable[[], str] = _new_id,
    ):
        self.config = config or ServiceConfig()
        self.transport = transport or HttpTransport(self.config)
        self._new_id = new_id

    # ── Raw access ─────────────────────────────────────────────

    def _send_query(self, query: str) -> Result[dict[str, Any]]:
        log.info("Query: %s", shorten(query))
        result = self.transport.query(query)
        if not result.ok:
            log.warning("Query failed: %s", result.error)
        return result

    def _send_update(self, update: str, security_label: str | None = None) -> Result[str]:
        if security_label is None:
            security_label = self.config.default_security_label
        log.info("Update: %s", shorten(update))
        result = self.transport.update(update, security_label)
        if not result.ok:
            log.warning("Update failed: %s", result.error)
        return result

    def run_query(self, query: str) -> Result[dict[str, Any]]:
        """Prefix and send a caller-written query; return SPARQL JSON results."""
        return self._send_query(statements.with_prefixes(query))

    def run_update(self, update: str, security_label: str | None = None) -> Result[str]:
        """Prefix and send a caller-written update; return the response text.

        The service default security label is used when none is given.
        """
        return self._send_update(statements.with_prefixes(update), security_label)

    def select(
        self, query: str, return_first: bool = False
    ) -> Result[list[decoder.Row] | decoder.Row | None]:
        """Run a query and flatten the results into {var: value} rows."""
        result = self.run_query(query)
        if not result.ok:
            return result
        return Ok(data=decoder.flatten(result.data, return_first=return_first))

    # ── Triples ────────────────────────────────────────────────

    def insert_triple(
        self,
        subject: str,
        predicate: str,
        obj: str,
        object_type: ObjectType | str | None = None,
        datatype: str | None = None,
        security_label: str | None = None,
    ) -> Result[str]:
        """Insert one triple. The object is a URI unless object_type says LITERAL."""
        term = encode_object(obj, object_type, datatype)
        if not term.ok:
            log.warning("insert_triple rejected: %s", term.error)
            return term
        return self._send_update(
            statements.insert_data(subject, predicate, term.data), security_label
        )

    def delete_triple(
        self,
        subject: str,
        predicate: str,
        obj: str,
        object_type: ObjectType | str | None = None,
        datatype: str | None = None,
        security_label: str | None = None,
    ) -> Result[str]:
        """Delete one exact triple."""
        term = encode_object(obj, object_type, datatype)
        if not term.ok:
            log.warning("delete_triple rejected: %s", term.error)
            return term
        return self._send_update(
            statements.delete_data(subject, predicate, term.data), security_label
        )

    def delete_node(
        self,
        uri: str,
        ignore_inbound_references: bool = False,
        security_label: str | None = None,
    ) -> Result[list[str]]:
        """Remove every trace of a node.

        Outbound triples (uri as subject) are always deleted. Inbound
        triples (uri as object) are deleted afterwards unless
        ignore_inbound_references is set. The two updates are sent one
        after the other and both are complete when this returns. If the
        outbound delete fails, the inbound delete is not attempted.
        """
        responses: list[str] = []

        outbound = self._send_update(statements.delete_outbound(uri), security_label)
        if not outbound.ok:
            return outbound
        responses.append(outbound.data)

        if not ignore_inbound_references:
            inbound = self._send_update(statements.delete_inbound(uri), security_label)
            if not inbound.ok:
                return inbound
            responses.append(inbound.data)

        log.info("Deleted node %s (%d statements)", uri, len(responses))
        return Ok(data=responses)

    def delete_relationships(
        self, uri: str, predicate: str, security_label: str | None = None
    ) -> Result[str]:
        """Delete every <uri> <predicate> ?o triple."""
        return self._send_update(statements.delete_by_predicate(uri, predicate), security_label)

    def instantiate(
        self,
        cls: str,
        uri: str | None = None,
        security_label: str | None = None,
    ) -> Result[str]:
        """Declare uri as an instance of cls and return the uri.

        When uri is omitted one is minted from the default URI stub.
        """
        if not uri:
            uri = f"{self.config.default_uri_stub}{self._new_id()}"
        result = self.insert_triple(uri, RDF_TYPE, cls, ObjectType.URI, security_label=security_label)
        if not result.ok:
            return result
        return Ok(data=uri)

    # ── Literals ───────────────────────────────────────────────

    def add_literal(
        self,
        uri: str,
        predicate: str,
        text: str | None,
        delete_previous: bool = False,
        datatype: str | None = None,
        security_label: str | None = None,
    ) -> Result[str]:
        """Attach a literal to uri, optionally replacing existing values."""
        if not text:
            return Fail(
                error="invalid literal string",
                context=predicate,
                kind=ErrorKind.INVALID_LITERAL,
            )
        term = encode_object(text, ObjectType.LITERAL, datatype)
        if not term.ok:
            return term

        if delete_previous:
            cleared = self.delete_relationships(uri, predicate, security_label)
            if not cleared.ok:
                return cleared

        return self._send_update(
            statements.insert_data(uri, predicate, term.data), security_label
        )

    def add_label(self, uri: str, label: str | None, security_label: str | None = None) -> Result[str]:
        if not label:
            return Fail(error="invalid label string", context=uri, kind=ErrorKind.INVALID_LITERAL)
        return self.insert_triple(uri, RDFS_LABEL, label, ObjectType.LITERAL, security_label=security_label)

    def add_comment(self, uri: str, comment: str | None, security_label: str | None = None) -> Result[str]:
        if not comment:
            return Fail(error="invalid comment string", context=uri, kind=ErrorKind.INVALID_LITERAL)
        return self.insert_triple(uri, RDFS_COMMENT, comment, ObjectType.LITERAL, security_label=security_label)

    # ── Relationships ──────────────────────────────────────────

    def _lookup(self, query: Result[str], var: str) -> Result[list[str]]:
        if not query.ok:
            return query
        result = self._send_query(query.data)
        if not result.ok:
            return result
        return Ok(data=decoder.column(result.data, var))

    def get_related(self, uri: str | None, predicate: str | None) -> Result[list[str]]:
        """Objects of uri under predicate or any of its sub-properties."""
        return self._lookup(relations.related_query(uri, predicate), relations.RELATED_VAR)

    def get_relating(self, uri: str | None, predicate: str | None) -> Result[list[str]]:
        """Subjects pointing at uri under predicate or any of its sub-properties."""
        return self._lookup(relations.relating_query(uri, predicate), relations.RELATING_VAR)
