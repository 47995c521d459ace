import pytest

from config import API_KEY_ENV_VAR


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch):
    """Keep a developer's real key out of the tests."""
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)
    monkeypatch.setattr("config.load_dotenv", lambda: False)
