"""Tests for raw error and finding models."""

from oasfindings.models.findings import Finding, RawValidationError


class TestRawValidationError:
    def test_defaults(self) -> None:
        err = RawValidationError(keyword="type")
        assert err.instancePath == ""
        assert err.message is None
        assert err.params == {}
        assert err.schemaPath == ""

    def test_from_mapping(self) -> None:
        err = RawValidationError.from_any({
            "keyword": "enum",
            "instancePath": "/a",
            "message": "m",
            "params": {"allowedValues": ["x"]},
        })
        assert err.keyword == "enum"
        assert err.params["allowedValues"] == ["x"]

    def test_from_instance_is_identity(self) -> None:
        err = RawValidationError(keyword="type")
        assert RawValidationError.from_any(err) is err

    def test_lenient_coercion(self) -> None:
        err = RawValidationError.from_any({"params": None, "instancePath": None, "keyword": 3})
        assert err.params == {}
        assert err.instancePath == ""
        assert err.keyword == ""

    def test_message_kept_as_is(self) -> None:
        assert RawValidationError(keyword="x", message=12).message == 12


class TestFinding:
    def test_serializable(self) -> None:
        finding = Finding(message="m", path=["a", "b"])
        assert finding.to_serializable() == {"message": "m", "path": ["a", "b"]}

    def test_default_path(self) -> None:
        assert Finding(message="m").path == []
