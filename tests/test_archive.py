"""Tests for document encoding and archive persistence."""

import io
import json
import zipfile
from datetime import datetime

import pytest

from timbermap import archive
from timbermap.archive import (
    DOCUMENT_NAME,
    encode_document,
    read_document,
    save_archive,
    write_archive,
)
from timbermap.document import MapDocument
from timbermap.exceptions import EncodingError
from timbermap.grid import Grid
from timbermap.terrain.config import MapOptions
from timbermap.terrain.generator import SingletonDefaults


@pytest.fixture
def document() -> MapDocument:
    options = MapOptions(width=3, height=1, seed=1)
    return MapDocument(
        timestamp=datetime(2024, 5, 6, 7, 8, 9),
        singletons=SingletonDefaults().build(options, Grid(3, 1, [0, 5, 16])),
    )


class TestEncodeDocument:
    """Tests for encode_document."""

    def test_compact_json(self, document):
        """Output is compact UTF-8 JSON."""
        payload = encode_document(document)
        assert isinstance(payload, bytes)
        assert b": " not in payload
        assert b", " not in payload

    def test_parses(self, document):
        data = json.loads(encode_document(document))
        assert data["Singletons"]["TerrainMap"]["Heights"]["Array"] == "0 5 16"
        assert data["Singletons"]["MapSize"]["Size"] == {"X": 3, "Y": 1}


class TestWriteArchive:
    """Tests for write_archive and read_document."""

    def test_single_member(self, document):
        """Archive holds exactly world.json."""
        sink = io.BytesIO()
        write_archive(sink, encode_document(document))

        with zipfile.ZipFile(io.BytesIO(sink.getvalue())) as zf:
            assert zf.namelist() == [DOCUMENT_NAME]
            assert zf.getinfo(DOCUMENT_NAME).compress_type == zipfile.ZIP_DEFLATED

    def test_stored(self, document):
        """Compression can be turned off."""
        sink = io.BytesIO()
        write_archive(sink, encode_document(document), compressed=False)

        with zipfile.ZipFile(io.BytesIO(sink.getvalue())) as zf:
            assert zf.getinfo(DOCUMENT_NAME).compress_type == zipfile.ZIP_STORED

    def test_read_document(self, document):
        """Document reads back as parsed JSON."""
        sink = io.BytesIO()
        payload = encode_document(document)
        write_archive(sink, payload)

        sink.seek(0)
        assert read_document(sink) == json.loads(payload)

    def test_read_document_missing_member(self):
        """Archives without world.json are rejected."""
        sink = io.BytesIO()
        with zipfile.ZipFile(sink, mode="w") as zf:
            zf.writestr("other.json", "{}")

        sink.seek(0)
        with pytest.raises(ValueError, match="missing 'world.json'"):
            read_document(sink)

    def test_read_only_sink_raises_encoding_error(self, document, tmp_path):
        """Archive layer failures surface as EncodingError."""
        path = tmp_path / "map.timber"
        path.write_bytes(b"")
        with open(path, "rb") as f:
            with pytest.raises(EncodingError):
                write_archive(f, encode_document(document))


class TestSaveArchive:
    """Tests for save_archive."""

    def test_save_and_read(self, document, tmp_path):
        path = tmp_path / "map.timber"
        save_archive(path, encode_document(document))

        assert path.exists()
        assert read_document(path)["Timestamp"] == "2024-05-06 07:08:09"

    def test_failed_write_removes_file(self, document, tmp_path, monkeypatch):
        """A partially written archive is deleted."""

        def failing_write(sink, payload, compressed=True):
            sink.write(b"PK partial")
            raise EncodingError("disk full")

        monkeypatch.setattr(archive, "write_archive", failing_write)

        path = tmp_path / "map.timber"
        with pytest.raises(EncodingError):
            save_archive(path, encode_document(document))
        assert not path.exists()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_document(tmp_path / "missing.timber")
