# conftest.py - shared fixtures: a small raw dataset in emoji-datasource shape

import pytest

from emoji_catalog.core.catalog import EmojiCatalog
from emoji_catalog.core.loader import load

TONES = ["1F3FB", "1F3FC", "1F3FD", "1F3FE", "1F3FF"]


def make_raw(short_name, unified, short_names=None, name=None, category="Smileys & People",
             sort_order=0, apple=True, tones=()):
    raw = {
        "name": name or short_name.upper(),
        "unified": unified,
        "image": unified.lower() + ".png",
        "short_name": short_name,
        "short_names": short_names if short_names is not None else [short_name],
        "text": None,
        "category": category,
        "sort_order": sort_order,
        "has_img_apple": apple,
        "has_img_google": True,
    }
    if tones:
        raw["skin_variations"] = {
            t: {
                "unified": f"{unified}-{t}",
                "image": f"{unified}-{t}.png".lower(),
                "has_img_apple": True,
            }
            for t in tones
        }
    return raw


@pytest.fixture
def raw_records():
    return [
        make_raw("+1", "1F44D", ["+1", "thumbsup"], name="THUMBS UP SIGN",
                 sort_order=10, tones=TONES),
        make_raw("smile", "1F604", name="SMILING FACE WITH OPEN MOUTH AND SMILING EYES",
                 sort_order=5),
        make_raw("wave", "1F44B", name="WAVING HAND SIGN", sort_order=10,
                 tones=["1F3FB", "1F3FD"]),
        make_raw("smile_cat", "1F638", name="GRINNING CAT FACE WITH SMILING EYES",
                 sort_order=6),
        make_raw("dog", "1F436", name="DOG FACE", category="Animals & Nature", sort_order=1),
        make_raw("pizza", "1F355", name="SLICE OF PIZZA", category="Food & Drink",
                 sort_order=3),
        make_raw("flag-us", "1F1FA-1F1F8", ["flag-us", "us"], category="Flags",
                 sort_order=2),
        make_raw("skin-tone-2", "1F3FB", category="Component", sort_order=4),
        make_raw("google_only", "1F9A0", category="Animals & Nature", apple=False),
        {"short_name": "broken", "category": "Objects", "sort_order": 1, "has_img_apple": True},
    ]


@pytest.fixture
def records(raw_records):
    return load(raw_records)


@pytest.fixture
def catalog(raw_records):
    return EmojiCatalog.from_raw(raw_records)
