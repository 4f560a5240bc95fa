# SPDX-License-Identifier: MIT
"""
█████╗ ██████╗  █████╗ ███████╗
██╔══██╗██╔══██╗██╔══██╗██╔════╝
███████║██████╔╝███████║███████╗
██╔══██║██╔══██╗██╔══██║╚════██║
██║  ██║██║  ██║██║  ██║███████║
╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>

Licensed under the MIT License.
See LICENSE and THIRD_PARTY_LICENSES for details.

RDF Service — command line

Small command line over RdfService: insert and delete triples,
instantiate classes, attach labels/comments/literals, walk
relationships and delete nodes in a SPARQL 1.1 triplestore.

Usage:
    python main.py --config=service.yaml insert <s> <p> <o> [--literal] [--datatype=xsd:int]
    python main.py related <uri> <predicate>
    python main.py delete-node <uri> [--keep-inbound]
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from pathlib import Path

from rdf_service.config import ServiceConfig, load_config
from rdf_service.logger import get_logger
from rdf_service.result import Ok, Result
from rdf_service.service import RdfService
from rdf_service.sparql.client import HttpTransport
from rdf_service.vocabulary import ObjectType

log = get_logger("main")


def _object_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("subject")
    parser.add_argument("predicate")
    parser.add_argument("object")
    parser.add_argument("--literal", action="store_true", help="Treat the object as a literal")
    parser.add_argument("--datatype", default=None, help="XSD datatype for a literal (e.g. xsd:integer)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rdf-service",
        description="Create, read and delete triples in a SPARQL triplestore",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to service YAML (defaults to a local Fuseki dataset 'ds')",
    )
    parser.add_argument(
        "--security-label",
        default=None,
        help="Security label applied to every update command (reads ignore it)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    _object_args(sub.add_parser("insert", help="Insert a triple"))
    _object_args(sub.add_parser("delete", help="Delete a triple"))

    p = sub.add_parser("instantiate", help="Create an instance of a class")
    p.add_argument("cls")
    p.add_argument("--uri", default=None)

    for name in ("label", "comment"):
        p = sub.add_parser(name, help=f"Add an rdfs:{name}")
        p.add_argument("uri")
        p.add_argument("text")

    p = sub.add_parser("literal", help="Add a literal under any predicate")
    p.add_argument("uri")
    p.add_argument("predicate")
    p.add_argument("text")
    p.add_argument("--datatype", default=None)
    p.add_argument("--replace", action="store_true", help="Delete existing values first")

    for name in ("related", "relating"):
        p = sub.add_parser(name, help=f"List {name} resources via subPropertyOf*")
        p.add_argument("uri")
        p.add_argument("predicate")

    p = sub.add_parser("delete-node", help="Delete all triples about a node")
    p.add_argument("uri")
    p.add_argument("--keep-inbound", action="store_true", help="Leave triples pointing at the node")

    p = sub.add_parser("query", help="Run a SELECT query and print rows as JSON")
    p.add_argument("text")

    p = sub.add_parser("update", help="Run a raw SPARQL update")
    p.add_argument("text")

    return parser


def _dispatch(service: RdfService, args: argparse.Namespace) -> Result:
    label = args.security_label
    kind = ObjectType.LITERAL if getattr(args, "literal", False) else ObjectType.URI

    handlers: dict[str, Callable[[], Result]] = {
        "insert": lambda: service.insert_triple(
            args.subject, args.predicate, args.object, kind, args.datatype, label
        ),
        "delete": lambda: service.delete_triple(
            args.subject, args.predicate, args.object, kind, args.datatype, label
        ),
        "instantiate": lambda: service.instantiate(args.cls, args.uri, label),
        "label": lambda: service.add_label(args.uri, args.text, label),
        "comment": lambda: service.add_comment(args.uri, args.text, label),
        "literal": lambda: service.add_literal(
            args.uri, args.predicate, args.text, args.replace, args.datatype, label
        ),
        "related": lambda: service.get_related(args.uri, args.predicate),
        "relating": lambda: service.get_relating(args.uri, args.predicate),
        "delete-node": lambda: service.delete_node(args.uri, args.keep_inbound, label),
        "query": lambda: service.select(args.text),
        "update": lambda: service.run_update(args.text, label),
    }
    return handlers[args.command]()


def _print(command: str, result: Ok) -> None:
    if command in ("related", "relating"):
        for value in result.data:
            print(value)
    elif command == "query":
        print(json.dumps(result.data, indent=2, ensure_ascii=False))
    elif command == "instantiate":
        print(result.data)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = ServiceConfig()
    if args.config is not None:
        cfg_result = load_config(args.config.resolve())
        if not cfg_result.ok:
            log.error(cfg_result.error)
            return 1
        config = cfg_result.data

    log.info("Triplestore: %s%s", config.triplestore_uri, config.dataset)
    service = RdfService(config, transport=HttpTransport(config))

    result = _dispatch(service, args)
    if not result.ok:
        log.error("%s failed: %s", args.command, result.error)
        return 1

    _print(args.command, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
