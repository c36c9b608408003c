from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

from .article import ArticleRecord


@dataclass(frozen=True, slots=True)
class IllustrationRecord:
    """An illustration image discovered for one article.

    ``sort_key`` is the article's key suffixed with ``_{illust_index}`` so that
    illustrations of the same article keep their relative order when sorted.
    """

    image_url: str
    article_url: str
    article_title: str
    published_date: str
    illust_index: int
    sort_key: str

    @classmethod
    def for_article(cls, article: ArticleRecord, image_url: str, illust_index: int) -> "IllustrationRecord":
        if illust_index not in (1, 2, 3):
            raise ValueError(f"illust_index must be 1, 2 or 3, got {illust_index}")
        return cls(
            image_url=image_url,
            article_url=article.url,
            article_title=article.title,
            published_date=article.published_date,
            illust_index=illust_index,
            sort_key=f"{article.sort_key}_{illust_index}",
        )

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {
            "imageUrl": self.image_url,
            "articleUrl": self.article_url,
            "articleTitle": self.article_title,
            "publishedDate": self.published_date,
            "illustNumber": self.illust_index,
            "sortKey": self.sort_key,
        }
