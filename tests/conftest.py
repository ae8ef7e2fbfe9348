import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from xml_samples import INVOICE_XSD, VALID_INVOICE


@pytest.fixture(params=["lxml", "xmlschema"])
def engine_name(request):
    return request.param


@pytest.fixture
def invoice_files(tmp_path):
    """Write a valid invoice and its schema; return (xml_path, xsd_path)."""
    xml_path = tmp_path / "invoice.xml"
    xsd_path = tmp_path / "invoice.xsd"
    xml_path.write_text(VALID_INVOICE, encoding="utf-8")
    xsd_path.write_text(INVOICE_XSD, encoding="utf-8")
    return xml_path, xsd_path


class RecordingFileManager:
    """FileManager stand-in that records every path it is asked about."""

    def __init__(self, files=None):
        self.files = {str(k): v for k, v in (files or {}).items()}
        self.exists_calls = []
        self.read_calls = []

    def file_exists(self, filepath):
        self.exists_calls.append(str(filepath))
        return str(filepath) in self.files

    def read_text(self, filepath, encoding):
        self.read_calls.append(str(filepath))
        return self.files[str(filepath)]


@pytest.fixture
def recording_file_manager():
    return RecordingFileManager
