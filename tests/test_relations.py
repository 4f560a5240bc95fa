"""Tests for subPropertyOf* relationship queries."""

import pytest

from rdf_service.result import ErrorKind
from rdf_service.sparql.relations import related_query, relating_query
from rdf_service.vocabulary import RDFS_SUBPROPERTY_OF, SPARQL_PREFIXES

URI = "http://example.org/a"
PRED = "http://example.org/knows"


class TestRelatedQuery:
    def test_shape(self):
        result = related_query(URI, PRED)
        assert result.ok
        assert result.data.startswith(SPARQL_PREFIXES)
        assert result.data.endswith(
            f"SELECT ?related WHERE {{<{URI}> ?pred ?related . "
            f"?pred <{RDFS_SUBPROPERTY_OF}>* <{PRED}> .}}"
        )

    def test_property_path_anchored_on_predicate(self):
        assert f"subPropertyOf>* <{PRED}>" in related_query(URI, PRED).data


class TestRelatingQuery:
    def test_shape(self):
        result = relating_query(URI, PRED)
        assert result.ok
        assert result.data.endswith(
            f"SELECT ?relating WHERE {{?relating ?pred <{URI}> . "
            f"?pred <{RDFS_SUBPROPERTY_OF}>* <{PRED}> .}}"
        )


@pytest.mark.parametrize("build", [related_query, relating_query])
@pytest.mark.parametrize("uri, predicate", [(None, PRED), ("", PRED), (URI, None), (URI, ""), (None, None)])
def test_missing_argument(build, uri, predicate):
    result = build(uri, predicate)
    assert not result.ok
    assert result.kind is ErrorKind.MISSING_ARGUMENT
