from __future__ import annotations

from pathlib import Path

import pytest

from readtext.errors import InputValidationError
from readtext.utils import format_display_path, load_text_document, normalize_newlines


def test_load_text_document_prefers_utf8(tmp_path: Path) -> None:
    document = tmp_path / "containers.yaml"
    document.write_text("text: café\r\nformatting: []", encoding="utf-8-sig")

    loaded = load_text_document(document, "container document")

    assert loaded.encoding == "utf-8-sig"
    assert loaded.display_encoding == "UTF-8"
    assert loaded.display_format == "YAML"
    assert loaded.text == "text: café\nformatting: []"


def test_load_text_document_falls_back_to_cp1252(tmp_path: Path) -> None:
    document = tmp_path / "containers.json"
    document.write_bytes('{"text": "naïve"}'.encode("cp1252"))

    loaded = load_text_document(document, "container document")

    assert loaded.encoding == "cp1252"
    assert loaded.display_encoding == "Windows-1252"
    assert loaded.display_format == "JSON"
    assert loaded.text == '{"text": "naïve"}'


def test_load_text_document_raises_when_undecodable(tmp_path: Path) -> None:
    document = tmp_path / "containers.json"
    document.write_bytes(bytes([0x81, 0x8D, 0x8F]))

    with pytest.raises(InputValidationError) as exc:
        load_text_document(document, "container document")

    assert "Windows-1252" in exc.value.message


def test_load_text_document_raises_when_missing(tmp_path: Path) -> None:
    with pytest.raises(InputValidationError):
        load_text_document(tmp_path / "absent.json", "container document")


def test_normalize_newlines_converts_carriage_returns() -> None:
    assert normalize_newlines("one\r\ntwo\rthree\n") == "one\ntwo\nthree\n"


def test_format_display_path_quotes_spaces() -> None:
    assert format_display_path(Path("/tmp/My Docs/page one.json")) == '"page one.json"'
    assert format_display_path(Path("/tmp/page.json")) == "page.json"
