"""Map archive persistence: encode the document and pack it into a zip."""

import json
import zipfile
from pathlib import Path
from typing import IO, Any

import structlog
from pydantic_core import PydanticSerializationError

from .document import MapDocument
from .exceptions import EncodingError

logger = structlog.get_logger()

# Name of the single archive member the game reads
DOCUMENT_NAME = "world.json"


def encode_document(document: MapDocument) -> bytes:
    """Encode a map document as compact UTF-8 JSON.

    Args:
        document: Map document to encode.

    Returns:
        JSON bytes with the game's PascalCase keys.

    Raises:
        EncodingError: If a value cannot be serialized.
    """
    try:
        return document.model_dump_json(by_alias=True).encode("utf-8")
    except (PydanticSerializationError, ValueError) as e:
        raise EncodingError(f"could not encode map document: {e}") from e


def write_archive(
    sink: IO[bytes],
    payload: bytes,
    compressed: bool = True,
) -> None:
    """Write an encoded document as the sole member of a zip archive.

    Args:
        sink: Writable binary stream receiving the archive.
        payload: Encoded document from ``encode_document``.
        compressed: Deflate the member (default) or store it as-is.

    Raises:
        EncodingError: If the archive cannot be written.
    """
    compression = zipfile.ZIP_DEFLATED if compressed else zipfile.ZIP_STORED
    try:
        with zipfile.ZipFile(sink, mode="w", compression=compression) as archive:
            archive.writestr(DOCUMENT_NAME, payload)
    except (OSError, ValueError, zipfile.LargeZipFile) as e:
        raise EncodingError(f"could not write map archive: {e}") from e

    logger.debug("archive_written", member=DOCUMENT_NAME, size=len(payload))


def save_archive(path: Path, payload: bytes, compressed: bool = True) -> None:
    """Write the archive to ``path``, removing the file if writing fails.

    Args:
        path: Output file path (usually ending in ``.timber``).
        payload: Encoded document from ``encode_document``.
        compressed: Deflate the member (default) or store it as-is.

    Raises:
        EncodingError: If the archive cannot be written.
        OSError: If the file cannot be created.
    """
    try:
        with open(path, "wb") as f:
            write_archive(f, payload, compressed=compressed)
    except EncodingError:
        path.unlink(missing_ok=True)
        raise

    file_size = path.stat().st_size / 1024
    logger.info("archive_saved", path=str(path), size_kb=round(file_size, 1))


def read_document(source: Path | IO[bytes]) -> dict[str, Any]:
    """Read the map document back from an archive.

    Args:
        source: Archive path or readable binary stream.

    Returns:
        Parsed ``world.json`` contents.

    Raises:
        FileNotFoundError: If the archive path doesn't exist.
        ValueError: If the archive has no map document.
    """
    with zipfile.ZipFile(source) as archive:
        if DOCUMENT_NAME not in archive.namelist():
            raise ValueError(f"Invalid map archive: missing '{DOCUMENT_NAME}'")
        return json.loads(archive.read(DOCUMENT_NAME))
