"""
emoji_catalog - shortcode lookup, skin tone resolution, ":name:" replacement
and fuzzy search over an emoji-datasource style catalog.
"""

from emoji_catalog.core.catalog import EmojiCatalog
from emoji_catalog.core.models import SKIN_TONES, EmojiRecord, SkinTone, VariantRecord
from emoji_catalog.utils.config_manager import CatalogConfig, Config, SearchConfig

__all__ = [
    "EmojiCatalog",
    "EmojiRecord",
    "VariantRecord",
    "SkinTone",
    "SKIN_TONES",
    "CatalogConfig",
    "SearchConfig",
    "Config",
]

__version__ = "0.1.0"
