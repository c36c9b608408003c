from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, slots=True)
class ArticleRecord:
    title: str
    url: str
    image_url: str
    slug: str
    published_date: str = ""
    sort_key: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "url": self.url,
            "imageUrl": self.image_url,
            "slug": self.slug,
            "publishedDate": self.published_date,
            "sortKey": self.sort_key,
        }
