"""
Package reader for DOCX files.

Opens the zip container from a path or from raw bytes and gives access
to named parts as text or bytes.
"""

import io
import zipfile
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)

MEDIA_PREFIX = "word/media/"


class PackageReader:
    """
    Reads DOCX package contents.

    Text and binary parts are cached after the first read.
    """

    def __init__(self, source: Union[str, Path, bytes]):
        """
        Initialize package reader.

        Args:
            source: Path to a DOCX file or the raw package bytes

        Raises:
            FileNotFoundError: if a path is given and does not exist
            zipfile.BadZipFile: if the source is not a zip container
        """
        self.docx_path: Optional[Path] = None
        self._zip_file: Optional[zipfile.ZipFile] = None
        self._closed = False

        self._xml_cache: Dict[str, str] = {}
        self._media_cache: Dict[str, bytes] = {}

        self._open_package(source)

    @classmethod
    def from_bytes(cls, data: bytes) -> "PackageReader":
        return cls(bytes(data))

    @property
    def zip_file(self) -> Optional[zipfile.ZipFile]:
        return None if self._closed else self._zip_file

    def _open_package(self, source: Union[str, Path, bytes]):
        """Open the package as a ZIP file."""
        if isinstance(source, (bytes, bytearray)):
            self._zip_file = zipfile.ZipFile(io.BytesIO(source), "r")
            logger.debug(f"Opened DOCX package from {len(source)} bytes")
            return

        self.docx_path = Path(source)
        if not self.docx_path.exists():
            raise FileNotFoundError(f"DOCX file not found: {self.docx_path}")
        self._zip_file = zipfile.ZipFile(self.docx_path, "r")
        logger.info(f"Opened DOCX package: {self.docx_path}")

    def _require_open(self) -> zipfile.ZipFile:
        if self._zip_file is None or self._closed:
            raise ValueError("Package not opened")
        return self._zip_file

    def has_part(self, part_name: str) -> bool:
        return part_name in self._require_open().namelist()

    def get_xml_content(self, part_name: str) -> str:
        """
        Get XML content for a given part name.

        Args:
            part_name: Name of the part to retrieve

        Returns:
            XML content as string

        Raises:
            KeyError: if the part does not exist
        """
        if part_name in self._xml_cache:
            logger.debug(f"XML cache hit for: {part_name}")
            return self._xml_cache[part_name]

        if not self.has_part(part_name):
            raise KeyError(f"Part not found: {part_name}")

        content = self._require_open().read(part_name).decode("utf-8")
        self._xml_cache[part_name] = content
        return content

    def get_xml_if_exists(self, part_name: str) -> Optional[str]:
        """Get XML content, or ``None`` when the part does not exist."""
        try:
            return self.get_xml_content(part_name)
        except KeyError:
            return None

    def get_binary_content(self, part_name: str) -> Optional[bytes]:
        """
        Get binary content for a given part name.

        Returns:
            Part bytes, or ``None`` if not found
        """
        if part_name in self._media_cache:
            return self._media_cache[part_name]

        if not self.has_part(part_name):
            logger.warning(f"Part not found: {part_name}")
            return None

        content = self._require_open().read(part_name)
        self._media_cache[part_name] = content
        return content

    def list_entries(self, prefix: str = "") -> List[str]:
        """List file entries whose name starts with ``prefix``."""
        return [
            info.filename
            for info in self._require_open().infolist()
            if not info.is_dir() and info.filename.startswith(prefix)
        ]

    def get_media_files(self) -> List[str]:
        """List all entries under ``word/media/``."""
        media_files = self.list_entries(MEDIA_PREFIX)
        logger.debug(f"Found {len(media_files)} media files")
        return media_files

    def clear_cache(self):
        self._xml_cache.clear()
        self._media_cache.clear()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the package reader."""
        if self._zip_file is not None and not self._closed:
            self._zip_file.close()
        self._closed = True
        self.clear_cache()
