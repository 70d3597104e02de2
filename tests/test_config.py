import importlib
import os

import pytest

from news_api import config

SETTING_NAMES = ("NEWS_PROVIDER", "NEWS_QUERY_LIMIT", "NEWS_MAX_RESULTS_PER_QUERY", "OPENAI_MODEL", "ENV_FILE")


@pytest.fixture()
def clean_settings(monkeypatch):
    for name in SETTING_NAMES:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    # load_dotenv writes straight into os.environ
    for name in SETTING_NAMES:
        os.environ.pop(name, None)
    importlib.reload(config)


def test_settings_are_read_from_env_file(clean_settings, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "NEWS_QUERY_LIMIT=2\nNEWS_MAX_RESULTS_PER_QUERY=7\nOPENAI_MODEL=gpt-x\nNEWS_PROVIDER=newsapi\n"
    )
    clean_settings.setenv("ENV_FILE", str(env_file))

    importlib.reload(config)

    assert config.NEWS_PROVIDER == "newsapi"
    assert config.NEWS_QUERY_LIMIT == 2
    assert config.NEWS_MAX_RESULTS_PER_QUERY == 7
    assert config.OPENAI_MODEL == "gpt-x"


def test_invalid_limits_fall_back_to_defaults(clean_settings):
    clean_settings.setenv("ENV_FILE", "does-not-exist.env")
    clean_settings.setenv("NEWS_QUERY_LIMIT", "zero")
    clean_settings.setenv("NEWS_MAX_RESULTS_PER_QUERY", "-4")

    importlib.reload(config)

    assert config.NEWS_QUERY_LIMIT == 5
    assert config.NEWS_MAX_RESULTS_PER_QUERY == 3
    assert config.OPENAI_MODEL == "gpt-4o-mini"
    assert config.NEWS_PROVIDER == "gnews"
