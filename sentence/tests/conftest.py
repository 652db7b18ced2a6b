import pytest
from fastapi.testclient import TestClient

from sentence.src.main import app
from sentence.src.services.text_processing.tokenizer import SentenceTokenizer


@pytest.fixture
def tokenizer():
    """Fresh tokenizer instance."""
    return SentenceTokenizer()


@pytest.fixture
def test_client():
    """Create a test client"""
    return TestClient(app)
