from datetime import date
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from src.gemini_client import GeminiClient


@pytest.fixture(autouse=True)
def mock_genai():
    """Mock the google.generativeai module for all tests."""
    with patch("src.gemini_client.genai") as mock_module:
        mock_model = MagicMock()
        mock_model.generate_content.return_value.text = "Mocked response."
        mock_module.GenerativeModel.return_value = mock_model
        yield mock_module


@pytest.fixture(autouse=True)
def isolated_config():
    """Keep load_config away from local .env files and Streamlit secrets."""
    with patch("src.config.load_dotenv"), patch("src.config._read_secret", return_value=None):
        yield


@pytest.fixture
def fake_gemini():
    """GeminiClient test double; set ``generate.return_value`` per test."""
    client = MagicMock(spec=GeminiClient)
    client.is_available.return_value = True
    return client


@pytest.fixture
def today():
    return date(2024, 3, 1)


def make_response(text="", chunks=None):
    """Build a response object shaped like google-generativeai's GenerateContentResponse."""
    metadata = SimpleNamespace(grounding_chunks=chunks or [])
    candidate = SimpleNamespace(grounding_metadata=metadata)
    return SimpleNamespace(text=text, candidates=[candidate])


def web_chunk(title, uri):
    return SimpleNamespace(web=SimpleNamespace(title=title, uri=uri))
