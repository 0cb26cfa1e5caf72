# tests/conftest.py
import pytest
from pathlib import Path
from verse.prompts.prompt_manager import PromptManager
from verse.llm.base_llm import MockLLM, LLMConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"

@pytest.fixture(scope="session")
def fixtures_dir():
    """Return the fixtures directory"""
    return FIXTURES_DIR

@pytest.fixture
def prompt_manager():
    """Create a PromptManager instance using the packaged templates directory"""
    return PromptManager()

@pytest.fixture
def mock_llm():
    """Mock LLM provider using MockLLM"""
    config = LLMConfig(model_name="test-model")
    return MockLLM(config)

@pytest.fixture
def haiku_text():
    return "An old silent pond\nA frog jumps into the pond\nSplash, silence again"

@pytest.fixture
def shakespearean_sonnet():
    return (FIXTURES_DIR / "shakespearean_sonnet.txt").read_text(encoding="utf-8")

@pytest.fixture
def limerick_text():
    return (FIXTURES_DIR / "limerick.txt").read_text(encoding="utf-8")

@pytest.fixture
def no_api_key(monkeypatch):
    """Make sure no API key leaks in from the environment"""
    monkeypatch.delenv("VERSE_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("VERSE_BASE_URL", raising=False)
    monkeypatch.delenv("VERSE_MODEL", raising=False)
    monkeypatch.delenv("VERSE_LOG_LEVEL", raising=False)
