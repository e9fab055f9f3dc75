"""
Tests for PackageReader class.
"""

import zipfile

import pytest

from docx2udf.parser import PackageReader
from tests.docx_factory import build_docx, para, text_run


@pytest.fixture
def docx_bytes():
    return build_docx(para(text_run("Test paragraph")), media={"image1.png": b"fake image data"})


class TestPackageReader:
    """Test cases for PackageReader class."""

    def test_from_bytes(self, docx_bytes):
        with PackageReader.from_bytes(docx_bytes) as reader:
            assert reader.zip_file is not None
            assert reader.docx_path is None

    def test_from_path(self, temp_dir, docx_bytes):
        docx_path = temp_dir / "test.docx"
        docx_path.write_bytes(docx_bytes)

        with PackageReader(docx_path) as reader:
            assert reader.docx_path == docx_path
            assert reader.has_part("word/document.xml")

    def test_nonexistent_file(self):
        with pytest.raises(FileNotFoundError):
            PackageReader("nonexistent.docx")

    def test_invalid_zip(self):
        with pytest.raises(zipfile.BadZipFile):
            PackageReader.from_bytes(b"This is not a ZIP file")

    def test_get_xml_content(self, docx_bytes):
        with PackageReader.from_bytes(docx_bytes) as reader:
            xml_content = reader.get_xml_content("word/document.xml")
            assert "Test paragraph" in xml_content

    def test_get_xml_content_nonexistent(self, docx_bytes):
        with PackageReader.from_bytes(docx_bytes) as reader:
            with pytest.raises(KeyError):
                reader.get_xml_content("nonexistent.xml")
            assert reader.get_xml_if_exists("nonexistent.xml") is None

    def test_get_binary_content(self, docx_bytes):
        with PackageReader.from_bytes(docx_bytes) as reader:
            assert reader.get_binary_content("word/media/image1.png") == b"fake image data"
            assert reader.get_binary_content("word/media/missing.png") is None

    def test_list_entries_and_media(self, docx_bytes):
        with PackageReader.from_bytes(docx_bytes) as reader:
            assert reader.get_media_files() == ["word/media/image1.png"]
            assert "word/_rels/document.xml.rels" in reader.list_entries("word/_rels/")

    def test_close(self, docx_bytes):
        reader = PackageReader.from_bytes(docx_bytes)
        reader.close()

        assert reader.zip_file is None
        with pytest.raises(ValueError):
            reader.get_xml_content("word/document.xml")
