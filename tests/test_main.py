import json
from unittest.mock import patch

import pytest

from gamesanpi_feed.errors import FetchError
from gamesanpi_feed.main import main, parse_args
from gamesanpi_feed.models import ArticleRecord, IllustrationRecord


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("gamesanpi_feed.main.configure_logging"):
        yield


@pytest.fixture
def article():
    return ArticleRecord(
        title="Some Real Title",
        url="https://gamesanpi.com/news/240615-01",
        image_url="https://www.gamesanpi.com/images/articles/2024/06/240615-01/thumb.jpg",
        slug="240615-01",
        published_date="2024年06月15日",
        sort_key="2024061501",
    )


def test_parse_args_defaults():
    args = parse_args(["articles"])
    assert args.command == "articles"
    assert args.config is None
    assert args.probe_workers is None


def test_articles_printed_as_json(article, capsys):
    with patch("gamesanpi_feed.main.FeedService") as service_cls:
        service_cls.return_value.fetch_articles.return_value = [article]
        assert main(["articles"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == [{
        "title": "Some Real Title",
        "url": "https://gamesanpi.com/news/240615-01",
        "imageUrl": "https://www.gamesanpi.com/images/articles/2024/06/240615-01/thumb.jpg",
        "slug": "240615-01",
        "publishedDate": "2024年06月15日",
        "sortKey": "2024061501",
    }]


def test_illustrations_printed_as_json(article, capsys):
    illust = IllustrationRecord.for_article(article, "https://www.gamesanpi.com/x/illust1.png", 1)
    with patch("gamesanpi_feed.main.FeedService") as service_cls:
        service_cls.return_value.fetch_illustrations.return_value = [illust]
        assert main(["illustrations", "--probe-workers", "3"]) == 0
        config = service_cls.call_args.args[0]

    assert config.probe_workers == 3
    (row,) = json.loads(capsys.readouterr().out)
    assert row["illustNumber"] == 1
    assert row["sortKey"] == "2024061501_1"
    assert row["articleUrl"] == article.url


def test_feed_error_exit_code(capsys):
    with patch("gamesanpi_feed.main.FeedService") as service_cls:
        service_cls.return_value.fetch_articles.side_effect = FetchError("https://www.gamesanpi.com/", "HTTP status 500")
        assert main(["articles"]) == 1
    assert capsys.readouterr().out == ""


def test_bad_config_exit_code(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text("site:\n  article_limit: -3\n", encoding="utf-8")
    assert main(["articles", "--config", str(path)]) == 1
