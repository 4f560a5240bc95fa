"""Tests for service YAML loading."""

from pathlib import Path

import pytest

from rdf_service.config import ServiceConfig, load_config


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "service.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestServiceConfig:
    def test_defaults(self):
        config = ServiceConfig()
        assert config.query_endpoint == "http://localhost:3030/ds/query"
        assert config.update_endpoint == "http://localhost:3030/ds/update"
        assert config.default_uri_stub == "http://telicent.io/data/"
        assert config.default_security_label == ""

    def test_immutable(self):
        with pytest.raises(AttributeError):
            ServiceConfig().dataset = "other"


class TestLoadConfig:
    def test_full_file(self, tmp_path):
        path = write(tmp_path, """
triplestore:
  uri: http://fuseki:3030/
  dataset: knowledge
  timeout: 5
defaults:
  uri_stub: http://example.org/id/
  security_label: "nationality=GBR"
""")
        result = load_config(path)
        assert result.ok
        config = result.data
        assert config.update_endpoint == "http://fuseki:3030/knowledge/update"
        assert config.timeout == 5
        assert config.default_uri_stub == "http://example.org/id/"
        assert config.default_security_label == "nationality=GBR"

    def test_partial_file_keeps_defaults(self, tmp_path):
        result = load_config(write(tmp_path, "triplestore:\n  dataset: kb\n"))
        assert result.data == ServiceConfig(dataset="kb")

    @pytest.mark.parametrize("text", [
        "triplestore:\n  uri:\n  dataset:\n  timeout:\ndefaults:\n  uri_stub:\n  security_label:\n",
        "triplestore:\ndefaults:\n",
        "triplestore:\n  uri: ~\ndefaults:\n  uri_stub: null\n",
    ])
    def test_null_values_keep_defaults(self, tmp_path, text):
        result = load_config(write(tmp_path, text))
        assert result.ok
        assert result.data == ServiceConfig()
        assert result.data.query_endpoint == "http://localhost:3030/ds/query"

    def test_empty_file(self, tmp_path):
        assert load_config(write(tmp_path, "")).data == ServiceConfig()

    def test_missing_file(self, tmp_path):
        result = load_config(tmp_path / "absent.yaml")
        assert not result.ok
        assert "not found" in result.error

    def test_yaml_error(self, tmp_path):
        result = load_config(write(tmp_path, "triplestore: [unclosed"))
        assert not result.ok
        assert result.error.startswith("YAML parse error")

    @pytest.mark.parametrize("text", [
        "- a list\n",
        "triplestore: 3\n",
        "triplestore:\n  host: x\n",
        "defaults:\n  label: x\n",
        "triplestore:\n  timeout: soon\n",
    ])
    def test_structure_errors(self, tmp_path, text):
        result = load_config(write(tmp_path, text))
        assert not result.ok
        assert result.error.startswith("Config structure error")
