# careerdocs/ats/rules.py
import re
import logging
from typing import Optional

from careerdocs.config import ATSConfig
from careerdocs.ats.models import JobDescription
from careerdocs.ats.job_description import JobDescriptionParser

logger = logging.getLogger(__name__)


class ResumeRules:
    """
    Resume-only checks: job title, experience and layout
    """

    def __init__(self, config: Optional[ATSConfig] = None):
        self.config = config or ATSConfig()

    def score_job_title_match(self, text: str, jd: JobDescription) -> float:
        """100 if the labelled job title appears verbatim, 50 if not"""
        if not jd.title:
            return 100.0
        return 100.0 if jd.title.lower() in text.lower() else 50.0

    def score_experience_relevance(self, text: str, jd: JobDescription) -> float:
        """
        Compare the largest "N years" in the document with the requirement

        No figure in the document is ambiguous rather than disqualifying,
        so it scores 50.
        """
        required = jd.required_experience_years
        if required is None:
            return 100.0

        candidate_years = JobDescriptionParser.find_years(text)
        if not candidate_years:
            return 50.0

        max_years = max(candidate_years)
        if max_years >= required:
            return 100.0
        return max_years / required * 100

    def score_format_compliance(self, text: str) -> float:
        score = 100.0

        # Tables and charts rarely survive ATS parsing
        if any(marker in text for marker in self.config.layout_markers):
            score -= 20
        if len(text) < self.config.min_document_chars:
            score -= 30

        return max(0.0, score)


class CoverLetterRules:
    """
    Cover-letter checks: narrative, personalization, tone, length and call to action
    """

    PARAGRAPH_SPLIT = re.compile(r'\n\s*\n')
    IMPACT_PATTERN = re.compile(r'\d+%|\d+\+|increased|improved|reduced|generated', re.IGNORECASE)
    GREETING_PATTERN = re.compile(r'dear\s+[a-z]+', re.IGNORECASE)
    CLOSING_PATTERN = re.compile(r'sincerely|regards|respectfully|best', re.IGNORECASE)

    def __init__(self, config: Optional[ATSConfig] = None):
        self.config = config or ATSConfig()

    def score_narrative_quality(self, text: str) -> float:
        score = 100.0

        paragraphs = [p for p in self.PARAGRAPH_SPLIT.split(text) if p.strip()]
        if len(paragraphs) < 3:
            score -= 20
        if len(paragraphs) > 6:
            score -= 10

        if not self.IMPACT_PATTERN.search(text):
            score -= 15

        return max(0.0, score)

    def score_personalization(self, text: str, jd: JobDescription) -> float:
        score = 100.0
        text_lower = text.lower()

        if jd.company and jd.company.lower() not in text_lower:
            score -= 30

        for phrase in self.config.generic_phrases:
            if phrase in text_lower:
                score -= 10

        return max(0.0, score)

    def score_tone_professionalism(self, text: str) -> float:
        score = 100.0

        if not self.GREETING_PATTERN.search(text):
            score -= 20
        if not self.CLOSING_PATTERN.search(text):
            score -= 20

        return max(0.0, score)

    def score_length_compliance(self, text: str) -> float:
        """Step function over word count: ideal band, too short, anything else"""
        word_count = len(text.split())

        if self.config.ideal_min_words <= word_count <= self.config.ideal_max_words:
            return 100.0
        if word_count < self.config.short_max_words:
            return 40.0
        return 70.0

    def has_call_to_action(self, text: str) -> bool:
        text_lower = text.lower()
        return any(phrase in text_lower for phrase in self.config.call_to_action_phrases)
