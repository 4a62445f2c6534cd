"""Tests for schema configuration and file loading."""

import json
from pathlib import Path

import pytest

from oasfindings.config import LintConfig, parse_schema_option, parse_variant
from oasfindings.detection.variant import SchemaVariant
from oasfindings.documents.loader import load_document, parse_document
from oasfindings.exceptions import ConfigurationError, DocumentLoadError, SchemaLoadError
from oasfindings.export.findings_json import findings_to_list, write_findings
from oasfindings.models.findings import Finding
from oasfindings.validation.jsonschema_adapter import JsonSchemaValidator
from oasfindings.validation.schema_loader import load_schema

SCHEMA = {"type": "object", "properties": {"openapi": {"type": "string"}}}


def _write_schema(tmp_path: Path, name: str = "oas30.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(SCHEMA), encoding="utf-8")
    return path


class TestSchemaOptions:
    def test_parse_variant(self) -> None:
        assert parse_variant("oas3_1") == SchemaVariant.OAS3_1

    def test_unknown_variant(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown schema variant"):
            parse_variant("oas4_0")

    def test_parse_option(self) -> None:
        assert parse_schema_option("oas2_0=schemas/swagger.json") == (
            SchemaVariant.OAS2_0,
            Path("schemas/swagger.json"),
        )

    @pytest.mark.parametrize("option", ["oas3_0", "oas3_0=", "=path.json"])
    def test_malformed_option(self, option: str) -> None:
        with pytest.raises(ConfigurationError):
            parse_schema_option(option)

    def test_from_options(self) -> None:
        config = LintConfig.from_options(["oas3_0=a.json", "oas3_1=b.json"], fail_on_findings=False)
        assert config.schema_paths == {
            SchemaVariant.OAS3_0: Path("a.json"),
            SchemaVariant.OAS3_1: Path("b.json"),
        }
        assert config.fail_on_findings is False


class TestBuildRegistry:
    def test_builds_validators(self, tmp_path: Path) -> None:
        config = LintConfig(schema_paths={SchemaVariant.OAS3_0: _write_schema(tmp_path)})
        registry = config.build_registry()
        assert isinstance(registry[SchemaVariant.OAS3_0], JsonSchemaValidator)

    def test_missing_schema_file(self, tmp_path: Path) -> None:
        config = LintConfig(schema_paths={SchemaVariant.OAS3_0: tmp_path / "nope.json"})
        with pytest.raises(SchemaLoadError, match="not found"):
            config.build_registry()


class TestSchemaLoader:
    def test_load_json(self, tmp_path: Path) -> None:
        assert load_schema(_write_schema(tmp_path)) == SCHEMA

    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "schema.yaml"
        path.write_text("type: object\n", encoding="utf-8")
        assert load_schema(path) == {"type": "object"}

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(SchemaLoadError, match="Cannot read schema"):
            load_schema(path)

    def test_non_object_schema(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(SchemaLoadError, match="must be a JSON object"):
            load_schema(path)


class TestDocumentLoader:
    def test_json_document(self, tmp_path: Path) -> None:
        path = tmp_path / "api.json"
        path.write_text('{"openapi": "3.1.0"}', encoding="utf-8")
        assert load_document(path) == {"openapi": "3.1.0"}

    def test_yaml_document(self, tmp_path: Path) -> None:
        path = tmp_path / "api.yaml"
        path.write_text("swagger: '2.0'\npaths: {}\n", encoding="utf-8")
        assert load_document(path) == {"swagger": "2.0", "paths": {}}

    def test_unknown_suffix_falls_back_to_yaml(self) -> None:
        assert parse_document("openapi: 3.0.0\n", ".txt") == {"openapi": "3.0.0"}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentLoadError, match="File not found"):
            load_document(tmp_path / "missing.yaml")

    def test_parse_error(self) -> None:
        with pytest.raises(DocumentLoadError, match="Cannot parse"):
            parse_document("{not json", ".json")


class TestFindingsExport:
    def test_write_findings(self, tmp_path: Path) -> None:
        findings = [Finding(message="m", path=["a"])]
        out = tmp_path / "out" / "findings.json"
        write_findings(findings, out)
        assert json.loads(out.read_text(encoding="utf-8")) == findings_to_list(findings)
        assert findings_to_list(findings) == [{"message": "m", "path": ["a"]}]
