import pytest
import requests
from unittest.mock import MagicMock, patch

from gamesanpi_feed.errors import FetchError
from gamesanpi_feed.fetchers import fetch_landing_page, probe_exists
from gamesanpi_feed.models import SiteConfig


def test_fetch_returns_body(fake_response):
    session = MagicMock()
    session.get.return_value = fake_response(200, "<html>ok</html>")

    assert fetch_landing_page(SiteConfig(), session=session) == "<html>ok</html>"
    args, kwargs = session.get.call_args
    assert args == ("https://www.gamesanpi.com/",)
    assert kwargs["timeout"] is None
    assert "User-Agent" in kwargs["headers"]


def test_fetch_merges_configured_headers(fake_response):
    session = MagicMock()
    session.get.return_value = fake_response(200, "")
    config = SiteConfig(headers={"Accept-Language": "ja"}, timeout=5.0)

    fetch_landing_page(config, session=session)
    _, kwargs = session.get.call_args
    assert kwargs["headers"]["Accept-Language"] == "ja"
    assert kwargs["timeout"] == 5.0


@pytest.mark.parametrize("status", [404, 500, 503, 304])
def test_fetch_non_success_status_raises(fake_response, status):
    session = MagicMock()
    session.get.return_value = fake_response(status, "error page")

    with pytest.raises(FetchError) as excinfo:
        fetch_landing_page(SiteConfig(), session=session)
    assert str(status) in str(excinfo.value)


def test_fetch_transport_error_is_chained():
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("name resolution failed")

    with pytest.raises(FetchError) as excinfo:
        fetch_landing_page(SiteConfig(), session=session)
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
    assert excinfo.value.url == "https://www.gamesanpi.com/"


def test_fetch_uses_requests_without_session(fake_response):
    with patch("gamesanpi_feed.fetchers.http.requests.get", return_value=fake_response(200, "body")) as get:
        assert fetch_landing_page(SiteConfig()) == "body"
    get.assert_called_once()


def test_fetch_rejects_relative_landing_url():
    session = MagicMock()
    with pytest.raises(FetchError) as excinfo:
        fetch_landing_page(SiteConfig(landing_url="/index.html"), session=session)
    assert excinfo.value.reason == "invalid URL"
    session.get.assert_not_called()


def _utf8_response(body, content_type):
    resp = requests.Response()
    resp.status_code = 200
    resp._content = body.encode("utf-8")
    resp.headers["Content-Type"] = content_type
    resp.encoding = requests.utils.get_encoding_from_headers(resp.headers)
    return resp


def test_fetch_decodes_undeclared_charset_as_utf8():
    body = "<h3>新作ゲームの賛否まとめ</h3>"
    session = MagicMock()
    session.get.return_value = _utf8_response(body, "text/html")

    assert fetch_landing_page(SiteConfig(), session=session) == body


def test_fetch_keeps_declared_charset():
    body = "<h3>caf\u00e9 news</h3>"
    resp = requests.Response()
    resp.status_code = 200
    resp._content = body.encode("latin-1")
    resp.headers["Content-Type"] = "text/html; charset=ISO-8859-1"
    resp.encoding = requests.utils.get_encoding_from_headers(resp.headers)
    session = MagicMock()
    session.get.return_value = resp

    assert fetch_landing_page(SiteConfig(), session=session) == body


@pytest.mark.parametrize("status,expected", [
    (200, True),
    (204, True),
    (299, True),
    (301, False),
    (403, False),
    (404, False),
    (500, False),
])
def test_probe_status(status, expected):
    session = MagicMock()
    session.head.return_value = MagicMock(status_code=status)
    assert probe_exists("https://example.com/illust1.png", session=session) is expected
    _, kwargs = session.head.call_args
    assert kwargs["allow_redirects"] is True


@pytest.mark.parametrize("exc", [
    requests.ConnectionError("reset"),
    requests.Timeout("slow"),
    requests.TooManyRedirects("loop"),
])
def test_probe_errors_are_swallowed(exc):
    session = MagicMock()
    session.head.side_effect = exc
    assert probe_exists("https://example.com/illust1.png", session=session) is False
