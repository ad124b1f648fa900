"""
Shared fixtures for the dbd_converter test suite.
"""

import os
import sys

from pathlib import Path

import pytest

base_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if base_dir not in sys.path:
    sys.path.insert(0, base_dir)

from dbd_converter.parsing.document_loader import DocumentLoader
from dbd_converter.mapping.schema_translator import SchemaTranslator


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def loader():
    return DocumentLoader()


@pytest.fixture
def translator():
    return SchemaTranslator()


@pytest.fixture
def relational_document(loader):
    """Build an RDM tree from an XML string."""
    def _build(xml_content: str):
        return loader.parse_string(xml_content)
    return _build
