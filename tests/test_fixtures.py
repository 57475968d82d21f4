import json
from importlib import resources
from pathlib import Path

import jsonschema
import pytest

from pyeskomsepush import fixtures as fixtures_module
from pyeskomsepush.endpoint import Endpoint
from pyeskomsepush.exceptions import (
    BundleNotFoundError,
    DataCorruptedError,
    DecodingError,
    KeyNotFoundError,
)
from pyeskomsepush.mapping import map_status


def test_every_endpoint_has_fixture() -> None:
    assert set(fixtures_module.FIXTURE_FILES) == set(Endpoint)
    for endpoint in Endpoint:
        filename, data = fixtures_module.load_fixture(endpoint)
        assert filename == fixtures_module.FIXTURE_FILES[endpoint]
        assert isinstance(data, dict)


def test_fixture_schema_validation() -> None:
    root = resources.files("pyeskomsepush.fixtures")
    schema = json.loads((root / "fixtures.schema.json").read_text(encoding="utf-8"))
    for filename in fixtures_module.FIXTURE_FILES.values():
        data = json.loads((root / filename).read_text(encoding="utf-8"))
        jsonschema.validate(instance=data, schema={**schema, "$ref": f"#/$defs/{filename}"})


def test_load_fixture_is_stable() -> None:
    first = fixtures_module.load_fixture(Endpoint.STATUS)
    second = fixtures_module.load_fixture(Endpoint.STATUS)
    assert first == second


def test_missing_fixture(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(fixtures_module, "_fixture_root", lambda: tmp_path)
    with pytest.raises(BundleNotFoundError) as excinfo:
        fixtures_module.load_fixture(Endpoint.STATUS)
    assert excinfo.value.filename == "status.json"


def test_corrupted_fixture(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / "status.json").write_text("{\"status\": ", encoding="utf-8")
    monkeypatch.setattr(fixtures_module, "_fixture_root", lambda: tmp_path)
    with pytest.raises(DataCorruptedError) as excinfo:
        fixtures_module.load_fixture(Endpoint.STATUS)
    assert excinfo.value.source == "status.json"


def test_fixture_with_invalid_encoding(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / "status.json").write_bytes(b"\xff\xfe{}")
    monkeypatch.setattr(fixtures_module, "_fixture_root", lambda: tmp_path)
    with pytest.raises(DecodingError):
        fixtures_module.load_fixture(Endpoint.STATUS)


def test_malformed_fixture_is_decode_error(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / "status.json").write_text("{\"status\": {\"eskom\": {}}}", encoding="utf-8")
    monkeypatch.setattr(fixtures_module, "_fixture_root", lambda: tmp_path)
    filename, data = fixtures_module.load_fixture(Endpoint.STATUS)
    with pytest.raises(KeyNotFoundError) as excinfo:
        map_status(data, filename)
    assert excinfo.value.source == "status.json"
