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
"""SPARQL HTTP transport using urllib.

Reads are sent as GET <query endpoint>?query=<escaped text> and return
the parsed JSON results. Updates are POSTed as application/sparql-update
with an optional Security-Label header and return the response text.
No statement building here — pure transport layer.
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Protocol

import certifi

from rdf_service.config import ServiceConfig
from rdf_service.logger import get_logger
from rdf_service.result import Fail, Ok, Result

log = get_logger(__name__)

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())


class Transport(Protocol):
    """Anything able to send finished statements to a triplestore."""

    def query(self, query: str) -> Result[dict[str, Any]]: ...

    def update(self, update: str, security_label: str = "") -> Result[str]: ...


def _open(req: urllib.request.Request, timeout: int) -> Result[bytes]:
    """Single request attempt. HTTP and socket errors become Fail."""
    try:
        with urllib.request.urlopen(req, timeout=timeout, context=_ssl_ctx) as resp:
            return Ok(data=resp.read())
    except urllib.error.HTTPError as exc:
        body = exc.read().decode("utf-8", errors="replace")[:500]
        return Fail(
            error=f"SPARQL HTTP {exc.code}: {exc.reason}",
            context=body,
        )
    except urllib.error.URLError as exc:
        return Fail(error=f"SPARQL connection error: {exc.reason}", context=req.full_url)
    except TimeoutError:
        return Fail(error=f"SPARQL timeout after {timeout}s", context=req.full_url)


class HttpTransport:
    """Talks to the query and update endpoints of one dataset."""

    def __init__(self, config: ServiceConfig):
        self.query_endpoint = config.query_endpoint
        self.update_endpoint = config.update_endpoint
        self.timeout = config.timeout

    def query(self, query: str) -> Result[dict[str, Any]]:
        """GET a SPARQL query and return the parsed JSON results object."""
        url = f"{self.query_endpoint}?query={urllib.parse.quote(query)}"
        req = urllib.request.Request(
            url,
            headers={"Accept": "application/sparql-results+json"},
            method="GET",
        )

        log.info("SPARQL query → %s (%d bytes)", self.query_endpoint, len(query))
        result = _open(req, self.timeout)
        if not result.ok:
            return result

        try:
            raw: dict[str, Any] = json.loads(result.data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            return Fail(
                error=f"SPARQL response is not valid JSON: {exc}",
                context=result.data[:500],
            )

        log.info("SPARQL query returned %d bytes", len(result.data))
        return Ok(data=raw)

    def update(self, update: str, security_label: str = "") -> Result[str]:
        """POST a SPARQL update and return the response text."""
        headers = {
            "Accept": "*/*",
            "Content-Type": "application/sparql-update",
        }
        if security_label:
            headers["Security-Label"] = security_label

        body = update.encode("utf-8")
        req = urllib.request.Request(
            self.update_endpoint,
            data=body,
            headers=headers,
            method="POST",
        )

        log.info("SPARQL update → %s (%d bytes)", self.update_endpoint, len(body))
        result = _open(req, self.timeout)
        if not result.ok:
            return result
        return Ok(data=result.data.decode("utf-8", errors="replace"))
