from __future__ import annotations

import pytest
import requests
from requests_ratelimiter import LimiterSession

from maestro.api.errors import ConfigurationError
from maestro.data.configuration import Configuration, Network

from tests.support import API_KEY, RecordingSession

ENV_VARS = ("MAESTRO_API_KEY", "MAESTRO_NETWORK", "MAESTRO_REQUESTS_PER_SECOND")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # set then delete so teardown also removes anything load_dotenv wrote
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return str(tmp_path / ".env")


class TestConfiguration:
    @pytest.mark.parametrize(
        "network, expected",
        [
            (Network.MAINNET, "https://Mainnet.gomaestro-api.org/v1"),
            (Network.PREPROD, "https://Preprod.gomaestro-api.org/v1"),
            ("Preview", "https://Preview.gomaestro-api.org/v1"),
            ("preprod", "https://Preprod.gomaestro-api.org/v1"),
        ],
    )
    def test_base_url_from_network(self, network, expected):
        config = Configuration(API_KEY, network=network, session=RecordingSession())
        assert config.base_url == expected
        assert config.api_key == API_KEY

    def test_default_network_is_mainnet(self):
        assert Configuration(API_KEY).network is Network.MAINNET

    def test_unknown_network(self):
        with pytest.raises(ValueError):
            Configuration(API_KEY, network="Testnet")

    def test_default_session(self):
        config = Configuration(API_KEY)
        assert isinstance(config.session, requests.Session)
        assert not isinstance(config.session, LimiterSession)

    def test_rate_limited_session(self):
        config = Configuration(API_KEY, requests_per_second=5)
        assert isinstance(config.session, LimiterSession)

    def test_injected_session_is_used(self):
        session = RecordingSession()
        config = Configuration(API_KEY, session=session)
        assert config.session is session
        assert not config.owns_session

    def test_created_session_is_owned(self):
        assert Configuration(API_KEY).owns_session
        assert Configuration(API_KEY, requests_per_second=5).owns_session

    def test_each_configuration_owns_its_session(self):
        assert Configuration(API_KEY).session is not Configuration(API_KEY).session

    def test_base_options_are_copied(self):
        options = {"timeout": 10}
        config = Configuration(API_KEY, base_options=options)
        options["timeout"] = 99
        config.base_options["timeout"] = 1
        assert config.base_options == {"timeout": 10}

    def test_repr_hides_api_key(self):
        assert API_KEY not in repr(Configuration(API_KEY))


class TestIsJsonMime:
    @pytest.mark.parametrize(
        "mime",
        [
            "application/json",
            "application/json; charset=UTF8",
            "APPLICATION/JSON",
            "application/vnd.company+json",
            "application/json-patch+json",
        ],
    )
    def test_json_mimes(self, mime):
        assert Configuration(API_KEY).is_json_mime(mime)

    @pytest.mark.parametrize("mime", [None, "", "application/cbor", "text/plain", "application/jsonx"])
    def test_other_mimes(self, mime):
        assert not Configuration(API_KEY).is_json_mime(mime)


class TestFromEnv:
    def test_reads_environment(self, monkeypatch, clean_env):
        monkeypatch.setenv("MAESTRO_API_KEY", "env-key")
        monkeypatch.setenv("MAESTRO_NETWORK", "Preview")
        config = Configuration.from_env(clean_env)
        assert config.api_key == "env-key"
        assert config.network is Network.PREVIEW

    def test_reads_dotenv_file(self, clean_env):
        with open(clean_env, "w", encoding="utf-8") as fh:
            fh.write("MAESTRO_API_KEY=file-key\nMAESTRO_NETWORK=Preprod\n")
        config = Configuration.from_env(clean_env)
        assert config.api_key == "file-key"
        assert config.base_url == "https://Preprod.gomaestro-api.org/v1"

    def test_missing_key(self, clean_env):
        with pytest.raises(ConfigurationError):
            Configuration.from_env(clean_env)

    def test_overrides_win(self, monkeypatch, clean_env):
        monkeypatch.setenv("MAESTRO_API_KEY", "env-key")
        config = Configuration.from_env(clean_env, api_key="explicit", network=Network.PREPROD)
        assert config.api_key == "explicit"
        assert config.network is Network.PREPROD

    def test_rate_limit_from_env(self, monkeypatch, clean_env):
        monkeypatch.setenv("MAESTRO_API_KEY", "env-key")
        monkeypatch.setenv("MAESTRO_REQUESTS_PER_SECOND", "2")
        assert isinstance(Configuration.from_env(clean_env).session, LimiterSession)
