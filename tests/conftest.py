from __future__ import annotations

import pytest

from careerdocs.config import ATSConfig
from careerdocs.ats import ATSScorer, KeywordExtractor


class FakeTagger:
    """POS tagger with a fixed vocabulary; unknown tokens are determiners"""

    def __init__(self, tags: dict[str, str]):
        self.tags = tags

    def __call__(self, tokens):
        return [(token, self.tags.get(token, "DT")) for token in tokens]


TAGS = {
    "python": "NN",
    "sql": "NN",
    "developer": "NN",
    "customer": "NN",
    "service": "NN",
    "team": "NN",
    "build": "VB",
    "built": "VBD",
    "manage": "VBP",
    "reliable": "JJ",
    "scalable": "JJ",
    "api": "NN",
    "apis": "NNS",
    "go": "NN",
    "c++": "NN",
    "v2": "NN",
}


@pytest.fixture
def config() -> ATSConfig:
    return ATSConfig()


@pytest.fixture
def fake_tagger() -> FakeTagger:
    return FakeTagger(TAGS)


@pytest.fixture
def extractor(config, fake_tagger) -> KeywordExtractor:
    return KeywordExtractor(config, tagger=fake_tagger)


@pytest.fixture
def scorer(config, extractor) -> ATSScorer:
    return ATSScorer(config, keyword_extractor=extractor)


@pytest.fixture
def job_description() -> str:
    return (
        "Job Title: Python Developer\n"
        "Company: Acme Analytics\n"
        "We build reliable APIs with python and sql. 3+ years experience required.\n"
    )


@pytest.fixture
def resume_text() -> str:
    summary = (
        "Python Developer with 5 years of experience. I built reliable APIs "
        "in python and sql for a customer service team. "
    )
    return summary * 5


@pytest.fixture
def cover_letter() -> str:
    opening = (
        "Dear Ms Rivera,\n\n"
        "I am excited to apply for the Python Developer role at Acme Analytics. "
    )
    body = (
        "At my last team I built reliable APIs in python and sql and "
        "reduced response times by 40% for our customer service platform.\n\n"
    )
    closing = (
        "I look forward to discussing how I can help your team.\n\n"
        "Sincerely,\nJordan Lee"
    )
    return opening + body + closing
