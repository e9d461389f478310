"""Archive packaging and atomic file delivery for finished exports."""

from __future__ import annotations

import logging
import os
import tempfile
import zipfile
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

from carousel_renderer.errors import PackagingError

if TYPE_CHECKING:
    from .export import ExportResult

logger = logging.getLogger("carousel.packaging")


@dataclass(frozen=True)
class NamedBuffer:
    name: str
    data: bytes


class ArchiveWriter(Protocol):
    extension: str

    def write(self, buffers: Sequence[NamedBuffer]) -> bytes: ...


class ZipArchiveWriter:
    extension = "zip"

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED) -> None:
        self.compression = compression

    def write(self, buffers: Sequence[NamedBuffer]) -> bytes:
        out = BytesIO()
        try:
            with zipfile.ZipFile(out, "w", compression=self.compression) as zf:
                for item in buffers:
                    zf.writestr(item.name, item.data)
        except (OSError, ValueError, zipfile.BadZipFile) as exc:
            raise PackagingError(f"Error packaging images: {exc}") from exc
        return out.getvalue()


def _atomic_write(path: Path, data: bytes) -> None:
    fd, tmp_name = tempfile.mkstemp(prefix=".carousel-", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def save_export(
    result: "ExportResult",
    output_dir: Path,
    archive_writer: ArchiveWriter | None = None,
) -> Path:
    """Materialize an export under ``output_dir``; nothing is left behind on failure."""
    if isinstance(result.payload, bytes):
        data = result.payload
    else:
        data = (archive_writer or ZipArchiveWriter()).write(result.payload)

    path = output_dir / result.filename
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        _atomic_write(path, data)
    except OSError as exc:
        logger.error(f"write failed path={path}", exc_info=True, extra={"event": "export_write_failed", "path": str(path)})
        raise PackagingError(f"Could not write {path.name}: {exc}") from exc

    logger.info(f"export saved path={path} bytes={len(data)}", extra={"event": "export_saved", "path": str(path)})
    return path
