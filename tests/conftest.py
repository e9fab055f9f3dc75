"""
Pytest configuration for docx2udf
"""

import logging
import sys
from pathlib import Path

import pytest

from tests.docx_factory import (
    TAB_RUN,
    build_docx,
    image_run,
    para,
    text_run,
)


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def make_docx():
    """Factory fixture building DOCX bytes (see ``build_docx``)."""
    return build_docx


@pytest.fixture
def sample_docx_bytes():
    """A small document: formatted paragraph, tab, image and a table."""
    body = (
        para(text_run("Hello ", "<w:b/>"), TAB_RUN, text_run("world"), ppr='<w:jc w:val="center"/>')
        + para(image_run("rId5"))
        + "<w:tbl><w:tblGrid><w:gridCol w:w=\"2000\"/><w:gridCol w:w=\"2000\"/></w:tblGrid>"
        + "<w:tr><w:tc>" + para(text_run("A")) + "</w:tc><w:tc>" + para(text_run("B")) + "</w:tc></w:tr>"
        + "</w:tbl>"
    )
    return build_docx(body, relationships={"rId5": "media/image1.png"}, media={"image1.png": b"\x89PNGfake"})
