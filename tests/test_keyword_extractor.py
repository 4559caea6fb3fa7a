import pytest

from careerdocs.config import ATSConfig
from careerdocs.ats import KeywordExtractor


@pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
def test_blank_text_yields_empty_set(extractor, text):
    assert extractor.extract(text) == set()


def test_keeps_nouns_verbs_and_adjectives(extractor):
    keywords = extractor.extract("We build scalable APIs")

    assert {"build", "scalable", "apis"} <= keywords


def test_lowercases_before_tagging(extractor):
    assert "python" in extractor.extract("PYTHON")


def test_consecutive_nouns_form_compound(extractor):
    keywords = extractor.extract("customer service team")

    assert "customer service team" in keywords
    assert {"customer", "service", "team"} <= keywords


def test_filters_short_and_non_alphabetic_tokens(extractor):
    keywords = extractor.extract("the go v2 python")

    assert keywords == {"python"}


def test_duplicates_collapse(extractor):
    keywords = extractor.extract("python, python. python")

    assert keywords == {"python"}


def test_stop_words_come_from_config(fake_tagger):
    config = ATSConfig(stop_words={"python"})
    extractor = KeywordExtractor(config, tagger=fake_tagger)

    assert "python" not in extractor.extract("python sql")
    assert "sql" in extractor.extract("python sql")


def test_real_tagger_finds_content_words():
    keywords = KeywordExtractor().extract("I handled customer service")

    assert {"customer", "service"} <= keywords
    assert all(len(k) > 2 for k in keywords)
