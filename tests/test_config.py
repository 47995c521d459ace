import json

from config import Config, API_KEY_ENV_VAR, DEFAULT_MODEL, DEFAULT_API_URL


def write_config(tmp_path, data):
    path = tmp_path / "API_key.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_missing_file_gives_empty_config(tmp_path):
    config = Config(path=str(tmp_path / "missing.json"))

    assert config.api_key == ""
    assert config.model == DEFAULT_MODEL
    assert config.api_url == DEFAULT_API_URL
    assert not config.is_api_key_configured()


def test_key_from_file(tmp_path):
    config = Config(path=write_config(tmp_path, {"api_key": "gsk_123", "model": "mixtral"}))

    assert config.is_api_key_configured()
    assert config.api_key == "gsk_123"
    assert config.model == "mixtral"


def test_blank_and_placeholder_keys_are_not_configured(tmp_path):
    assert not Config(path=write_config(tmp_path, {"api_key": "   "})).is_api_key_configured()
    assert not Config(path=write_config(tmp_path, {"api_key": "YOUR_API_KEY_HERE"})).is_api_key_configured()


def test_broken_json_does_not_raise(tmp_path):
    path = tmp_path / "API_key.json"
    path.write_text("{not json", encoding="utf-8")

    config = Config(path=str(path))

    assert not config.is_api_key_configured()


def test_non_object_json_is_ignored(tmp_path):
    config = Config(path=write_config(tmp_path, ["gsk_123"]))

    assert not config.is_api_key_configured()


def test_environment_overrides_file(tmp_path, monkeypatch):
    monkeypatch.setenv(API_KEY_ENV_VAR, "from-env")

    config = Config(path=write_config(tmp_path, {"api_key": "from-file"}))

    assert config.api_key == "from-env"


def test_save_api_key_keeps_other_fields(tmp_path):
    path = write_config(tmp_path, {"api_key": "old", "model": "mixtral"})
    config = Config(path=path)

    config.save_api_key("new")

    with open(path, encoding="utf-8") as f:
        saved = json.load(f)
    assert saved == {"api_key": "new", "model": "mixtral"}
    assert config.api_key == "new"
    assert Config(path=path).api_key == "new"


def test_key_whitespace_is_stripped(tmp_path):
    config = Config(path=write_config(tmp_path, {"api_key": "  gsk_123 \n"}))

    assert config.api_key == "gsk_123"
    assert not config.key_from_env


def test_environment_key_is_stripped_and_flagged(tmp_path, monkeypatch):
    monkeypatch.setenv(API_KEY_ENV_VAR, " from-env ")

    config = Config(path=write_config(tmp_path, {"api_key": "from-file"}))

    assert config.api_key == "from-env"
    assert config.key_from_env
