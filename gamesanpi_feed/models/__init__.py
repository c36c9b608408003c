"""Typed models used across the application."""

from .site import SiteConfig
from .article import ArticleRecord
from .illustration import IllustrationRecord

__all__ = ["SiteConfig", "ArticleRecord", "IllustrationRecord"]
