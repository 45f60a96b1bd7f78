# tests/test_catalog.py
import json
import threading

from emoji_catalog import EmojiCatalog
from emoji_catalog.utils.config_manager import CatalogConfig, SearchConfig


def test_facade_read_paths(catalog):
    rec = catalog.lookup("thumbsup")
    assert rec is catalog.lookup("+1")
    assert catalog.lookup("nope") is None
    assert catalog.is_known_name("us")
    assert "smile" in catalog
    assert "google_only" not in catalog
    assert catalog.to_literal(catalog.resolve(rec, 2)) == "\U0001F44D\U0001F3FC"
    assert catalog.has_variant("+1", 3)
    assert catalog.convert("+1", 1) == "\U0001F44D\U0001F3FB"
    assert catalog.replace("Hi :thumbsup: there") == "Hi \U0001F44D there"
    assert catalog.search("thumbsup")[0] is rec
    assert len(catalog) == len(catalog.records) == 8


def test_categories_partition_whole_catalog(catalog):
    cats = catalog.categories()
    assert sum(len(v) for v in cats.values()) == len(catalog)
    cats.clear()
    assert catalog.categories()


def test_image_path(catalog):
    assert catalog.image_path("+1") == "emoji-datasource-apple/img/apple/64/1f44d.png"
    assert catalog.image_path("+1", 2).endswith("/1f44d-1f3fc.png")
    assert catalog.image_path("smile", 2).endswith("/1f604.png")
    assert catalog.image_path("nope") is None


def test_custom_config(raw_records):
    cfg = CatalogConfig(platform="google", image_root="img/google/",
                        search=SearchConfig(threshold=0.0))
    cat = EmojiCatalog.from_raw(raw_records, cfg)
    assert cat.lookup("google_only") is not None
    assert cat.image_path("dog") == "img/google/1f436.png"
    assert cat.search("pizzza") == []


def test_from_file(tmp_path, raw_records):
    p = tmp_path / "emoji.json"
    p.write_text(json.dumps(raw_records), encoding="utf-8")
    cat = EmojiCatalog.from_file(p)
    assert cat.lookup("pizza").unified == "1F355"


def test_bundled_dataset():
    cat = EmojiCatalog.bundled()
    assert cat.replace("Hi :thumbsup: there") == "Hi \U0001F44D there"
    assert cat.replace("Hi :thumbsup::skin-tone-2: there") == "Hi \U0001F44D\U0001F3FC there"
    assert cat.replace(":heart:") == "\u2764\ufe0f"
    assert cat.search("thumbsup")[0].short_name == "+1"
    cats = cat.categories()
    assert "emoji" in cats and "flag" in cats and "misc" in cats


def test_concurrent_readers(catalog):
    errors = []

    def worker():
        for _ in range(50):
            if catalog.replace(":smile: :+1::skin-tone-1:") != "\U0001F604 \U0001F44D\U0001F3FB":
                errors.append("replace")
            if catalog.search("pizza")[0].short_name != "pizza":
                errors.append("search")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert errors == []
