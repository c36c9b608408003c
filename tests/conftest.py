import pytest

from gamesanpi_feed.models import ArticleRecord, SiteConfig
from gamesanpi_feed.processors import derive_date_key


class FakeResponse:
    def __init__(self, status_code=200, text="", headers=None):
        self.status_code = status_code
        self.text = text
        self.headers = headers if headers is not None else {"Content-Type": "text/html; charset=utf-8"}
        self.encoding = None


@pytest.fixture
def site_config():
    return SiteConfig()


@pytest.fixture
def article_block():
    """Build one landing page card in the markup the site normally serves."""

    def _build(slug, title, image=None):
        image = image if image is not None else f"/images/articles/2024/06/{slug}/thumb.jpg"
        return (
            f'<a href="/news/{slug}" class="article-card">\n'
            f'  <div class="thumb"><img loading="lazy" src="{image}" alt=""></div>\n'
            f'  <div class="body"><h3 class="title">{title}</h3><span class="date">2024.06</span></div>\n'
            f"</a>\n"
        )

    return _build


@pytest.fixture
def landing_page():
    def _wrap(body):
        return (
            "<!DOCTYPE html><html><head><title>ゲーム賛否</title></head><body>"
            '<header><a href="/">top</a><h3>カテゴリー</h3></header>'
            f"<main>{body}</main>"
            '<aside><h3>人気記事</h3><h3>人気タグ</h3></aside>'
            "</body></html>"
        )

    return _wrap


@pytest.fixture
def make_article(site_config):
    def _build(slug, title="An article title"):
        key = derive_date_key(slug)
        return ArticleRecord(
            title=title,
            url=site_config.article_url(slug),
            image_url="",
            slug=slug,
            published_date=key.published_date,
            sort_key=key.sort_key,
        )

    return _build


@pytest.fixture
def fake_response():
    return FakeResponse
