"""
UDF packager.

Wraps the target XML in a single-entry zip container. The entry uses a
fixed timestamp so identical XML always yields identical bytes.
"""

import io
import logging
import zipfile
from pathlib import Path
from typing import Optional, Union

from ..config import ConverterOptions

logger = logging.getLogger(__name__)

FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)


class UdfPackager:
    """Builds ``.udf`` containers from target XML."""

    def __init__(self, options: Optional[ConverterOptions] = None):
        self.options = options or ConverterOptions()

    def package(self, xml: str) -> bytes:
        entry = zipfile.ZipInfo(self.options.content_entry_name, date_time=FIXED_DATE_TIME)
        entry.compress_type = self.options.compression
        entry.external_attr = 0o644 << 16

        stream = io.BytesIO()
        with zipfile.ZipFile(stream, "w") as archive:
            archive.writestr(entry, xml.encode("utf-8"))

        data = stream.getvalue()
        logger.debug(f"Packaged {self.options.content_entry_name}: {len(data)} bytes")
        return data

    def write(self, xml: str, output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(self.package(xml))
        logger.info(f"UDF written: {output_path}")
        return output_path
