# tests/test_replacer.py
import pytest

from emoji_catalog.core.name_index import NameIndex
from emoji_catalog.core.replacer import TOKEN_RE, TokenReplacer

THUMBS = "\U0001F44D"
SMILE = "\U0001F604"


@pytest.fixture
def replacer(records):
    return TokenReplacer(NameIndex.build(records))


def test_basic_replacement(replacer):
    assert replacer.replace("Hi :thumbsup: there") == f"Hi {THUMBS} there"
    assert replacer.replace(":+1:") == THUMBS


def test_skin_tone_suffix(replacer):
    assert replacer.replace("Hi :thumbsup::skin-tone-2: there") == f"Hi {THUMBS}\U0001F3FC there"
    assert replacer.replace(":+1::skin-tone-5:") == THUMBS + "\U0001F3FF"


def test_skin_tone_on_emoji_without_variant_uses_base(replacer):
    assert replacer.replace(":smile::skin-tone-3:") == SMILE
    assert replacer.replace(":wave::skin-tone-2:") == "\U0001F44B"
    assert replacer.replace(":wave::skin-tone-3:") == "\U0001F44B\U0001F3FD"


@pytest.mark.parametrize("text", [
    "",
    "no tokens here",
    "meet at 10:30:45",
    "ratio 3:4:5",
    ":not-a-real-emoji:",
    "say :nope: now",
    "a:b:c",
    ": spaced :",
])
def test_text_without_known_tokens_is_unchanged(replacer, text):
    assert replacer.replace(text) == text


def test_unknown_name_with_tone_left_whole(replacer):
    assert replacer.replace(":nope::skin-tone-2:") == ":nope::skin-tone-2:"


def test_out_of_range_tone_suffix_is_not_part_of_token(replacer):
    # :skin-tone-9: does not match the suffix; it is then an unknown token
    assert replacer.replace(":smile::skin-tone-9:") == SMILE + ":skin-tone-9:"


def test_case_insensitive_names(replacer):
    assert replacer.replace(":ThumbsUp:") == THUMBS
    assert replacer.replace(":SMILE::SKIN-TONE-1:") == SMILE


def test_multiple_and_adjacent_tokens(replacer):
    assert replacer.replace(":smile::smile:") == SMILE * 2
    assert replacer.replace(":dog: and :pizza: :nope:") == "\U0001F436 and \U0001F355 :nope:"
    assert replacer.replace(":flag-us:!") == "\U0001F1FA\U0001F1F8!"


def test_skin_tone_name_itself_is_an_emoji(replacer):
    assert replacer.replace(":skin-tone-2:") == "\U0001F3FB"


def test_token_pattern():
    m = TOKEN_RE.search("x :thumbsup::skin-tone-4: y")
    assert m.group(0) == ":thumbsup::skin-tone-4:"
    assert m.group("name") == "thumbsup"
    assert m.group("tone") == "4"
    assert TOKEN_RE.search(":has space:") is None
