import io

import pytest
import requests

from html_filter.utils.config import Config
from html_filter.utils.loader import ContentLoader, LoaderError


class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def loader():
    loader = ContentLoader(Config())
    yield loader
    loader.close()


def test_read_file(loader, tmp_path):
    path = tmp_path / "page.html"
    path.write_text("<p>café</p>", encoding="utf-8")

    assert loader.load(str(path)) == "<p>café</p>"


def test_read_missing_file(loader, tmp_path):
    with pytest.raises(LoaderError, match="Cannot read"):
        loader.load(str(tmp_path / "missing.html"))


def test_read_stdin(loader, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("<b>in</b>"))

    assert loader.load("-") == "<b>in</b>"


@pytest.mark.parametrize("source, expected", [
    ("http://example.com", True),
    ("https://example.com/page", True),
    ("example.com", False),
    ("./http.html", False),
])
def test_is_url(source, expected):
    assert ContentLoader.is_url(source) is expected


def test_session_settings():
    config = Config()
    config.set("network.user_agent", "tester/2.0")
    config.set("network.max_retries", 1)
    loader = ContentLoader(config)

    session = loader.session

    assert session.headers["User-Agent"] == "tester/2.0"
    assert session.get_adapter("https://example.com").max_retries.total == 1
    assert loader.session is session
    loader.close()
    assert loader._session is None


def test_fetch(loader, monkeypatch):
    calls = []

    def fake_get(url, **kwargs):
        calls.append((url, kwargs))
        return FakeResponse("<html></html>")

    monkeypatch.setattr(loader.session, "get", fake_get)

    assert loader.load("https://example.com") == "<html></html>"
    assert calls == [("https://example.com", {"timeout": 30, "allow_redirects": True})]


def test_fetch_error_status(loader, monkeypatch):
    monkeypatch.setattr(loader.session, "get", lambda url, **kwargs: FakeResponse("", 404))

    with pytest.raises(LoaderError, match="404"):
        loader.fetch("https://example.com/missing")


def test_fetch_connection_error(loader, monkeypatch):
    def fake_get(url, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(loader.session, "get", fake_get)

    with pytest.raises(LoaderError, match="refused"):
        loader.fetch("http://localhost:1")
