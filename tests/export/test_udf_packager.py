"""
Tests for UdfPackager.
"""

import io
import zipfile

from docx2udf.config import ConverterOptions
from docx2udf.export import UdfPackager

XML = '<?xml version="1.0" encoding="UTF-8" ?>\n<template format_id="1.8"></template>'


def open_archive(data):
    return zipfile.ZipFile(io.BytesIO(data))


class TestUdfPackager:
    """Container layout of .udf files."""

    def test_single_content_entry(self):
        with open_archive(UdfPackager().package(XML)) as archive:
            assert archive.namelist() == ["content.xml"]
            assert archive.read("content.xml").decode("utf-8") == XML

    def test_entry_is_deflated(self):
        with open_archive(UdfPackager().package(XML)) as archive:
            assert archive.getinfo("content.xml").compress_type == zipfile.ZIP_DEFLATED

    def test_stored_compression_option(self):
        packager = UdfPackager(ConverterOptions(compression=zipfile.ZIP_STORED))
        with open_archive(packager.package(XML)) as archive:
            assert archive.getinfo("content.xml").compress_type == zipfile.ZIP_STORED

    def test_output_is_deterministic(self):
        packager = UdfPackager()
        assert packager.package(XML) == packager.package(XML)

    def test_utf8_encoding(self):
        xml = XML.replace("</template>", "<content>Gövde</content></template>")
        with open_archive(UdfPackager().package(xml)) as archive:
            assert "Gövde".encode("utf-8") in archive.read("content.xml")

    def test_write_creates_parent_directories(self, temp_dir):
        output = temp_dir / "nested" / "out.udf"

        result = UdfPackager().write(XML, str(output))

        assert result == output
        assert output.exists()
        with zipfile.ZipFile(output) as archive:
            assert archive.namelist() == ["content.xml"]
