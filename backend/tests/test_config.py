"""Settings - env-driven defaults and derived listener host."""

from city_recipes.config import Settings


def test_listen_host_defaults_to_host():
    settings = Settings(host="localhost", render_external_url=None)
    assert settings.listen_host == "localhost"


def test_listen_host_binds_all_interfaces_on_render():
    settings = Settings(render_external_url="https://example.onrender.com")
    assert settings.listen_host == "0.0.0.0"


def test_base_urls_lose_trailing_slash():
    settings = Settings(city_api_base_url="http://city.test/")
    assert settings.city_api_base_url == "http://city.test"


def test_reads_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("API_KEY", "from-env")
    monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "2.5")
    settings = Settings()
    assert settings.api_key == "from-env"
    assert settings.upstream_timeout_seconds == 2.5
