"""Article extraction strategies for the landing page markup."""

from .primary import extract_primary
from .fallback import extract_fallback
from .records import build_record, resolve_asset_url

__all__ = ["extract_primary", "extract_fallback", "build_record", "resolve_asset_url"]
