# careerdocs/ats/scorer.py
import math
import logging
from typing import Optional, Union

from careerdocs.config import ATSConfig
from careerdocs.ats.models import (
    ATSScoreResult, CoverLetterScoreResult, DocumentType, ScoreBreakdown,
    ScoringWeights, RESUME_WEIGHTS, COVER_LETTER_WEIGHTS
)
from careerdocs.ats.keyword_extractor import KeywordExtractor
from careerdocs.ats.matcher import KeywordMatcher
from careerdocs.ats.job_description import JobDescriptionParser
from careerdocs.ats.rules import ResumeRules, CoverLetterRules
from careerdocs.ats.analyzer import ATSAnalyzer

logger = logging.getLogger(__name__)

ScoreResult = Union[ATSScoreResult, CoverLetterScoreResult]


class ATSScorer:
    """
    Calculate ATS compatibility score for a resume or cover letter

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    WEIGHTS = {
        DocumentType.RESUME: RESUME_WEIGHTS,
        DocumentType.COVER_LETTER: COVER_LETTER_WEIGHTS,
    }

    def __init__(
        self,
        config: Optional[ATSConfig] = None,
        keyword_extractor: Optional[KeywordExtractor] = None
    ):
        self.config = config or ATSConfig()
        self.keyword_extractor = keyword_extractor or KeywordExtractor(self.config)
        self.keyword_matcher = KeywordMatcher(self.config)
        self.jd_parser = JobDescriptionParser()
        self.resume_rules = ResumeRules(self.config)
        self.cover_letter_rules = CoverLetterRules(self.config)
        self.analyzer = ATSAnalyzer(self.config)

    def calculate_score(
        self,
        document_text: str,
        job_description: str,
        document_type: Union[DocumentType, str] = DocumentType.RESUME
    ) -> ScoreResult:
        """
        Score a document against a job description

        Args:
            document_text: Plain text of the resume or cover letter
            job_description: Plain text of the job posting
            document_type: DocumentType or its string value

        Returns:
            ATSScoreResult for resumes, CoverLetterScoreResult for cover letters
        """
        document_type = DocumentType.parse(document_type)
        logger.info(f"Calculating ATS score ({document_type.value})")

        if document_type == DocumentType.COVER_LETTER:
            result = self._score_cover_letter(document_text, job_description)
        else:
            result = self._score_resume(document_text, job_description)

        logger.info(f"ATS Score: {result.overall_score}/100 ({result.rating.value})")
        return result

    def _score_resume(self, resume_text: str, job_description: str) -> ATSScoreResult:
        jd = self.jd_parser.parse(job_description)
        job_keywords = self.keyword_extractor.extract(job_description)
        resume_keywords = self.keyword_extractor.extract(resume_text)

        breakdown = ScoreBreakdown(
            keyword_match=self.keyword_matcher.score_keyword_match(
                resume_keywords, job_keywords, resume_text
            ),
            skills_alignment=self.keyword_matcher.score_skills_alignment(resume_text, job_description),
            job_title_match=self.resume_rules.score_job_title_match(resume_text, jd),
            experience_relevance=self.resume_rules.score_experience_relevance(resume_text, jd),
            format_compliance=self.resume_rules.score_format_compliance(resume_text),
        )

        return ATSScoreResult(
            overall_score=self._aggregate(breakdown, RESUME_WEIGHTS),
            breakdown=breakdown,
            matched_keywords=self.keyword_matcher.matched_keywords(resume_keywords, job_keywords),
            missing_keywords=self.keyword_matcher.missing_keywords(resume_keywords, job_keywords),
            suggestions=self.analyzer.resume_suggestions(breakdown),
            keyword_density=self.keyword_matcher.keyword_density(resume_text, job_keywords),
        )

    def _score_cover_letter(self, letter_text: str, job_description: str) -> CoverLetterScoreResult:
        jd = self.jd_parser.parse(job_description)
        job_keywords = self.keyword_extractor.extract(job_description)
        letter_keywords = self.keyword_extractor.extract(letter_text)
        rules = self.cover_letter_rules

        breakdown = ScoreBreakdown(
            keyword_match=self.keyword_matcher.score_keyword_match(
                letter_keywords, job_keywords, letter_text
            ),
            skills_alignment=self.keyword_matcher.score_skills_alignment(letter_text, job_description),
            narrative_quality=rules.score_narrative_quality(letter_text),
            personalization=rules.score_personalization(letter_text, jd),
            tone_professionalism=rules.score_tone_professionalism(letter_text),
        )
        call_to_action = rules.has_call_to_action(letter_text)

        return CoverLetterScoreResult(
            overall_score=self._aggregate(breakdown, COVER_LETTER_WEIGHTS),
            breakdown=breakdown,
            matched_keywords=self.keyword_matcher.matched_keywords(letter_keywords, job_keywords),
            missing_keywords=self.keyword_matcher.missing_keywords(letter_keywords, job_keywords),
            suggestions=self.analyzer.cover_letter_suggestions(breakdown, call_to_action),
            keyword_density=self.keyword_matcher.keyword_density(letter_text, job_keywords),
            narrative_quality=breakdown.narrative_quality,
            personalization_score=breakdown.personalization,
            tone_professionalism=breakdown.tone_professionalism,
            length_compliance=rules.score_length_compliance(letter_text),
            call_to_action_present=call_to_action,
        )

    def _aggregate(self, breakdown: ScoreBreakdown, weights: ScoringWeights) -> int:
        """Weighted sum rounded half-up to a whole score"""
        # Trim float noise so 98.4999999 still rounds as 98.5
        overall = math.floor(round(breakdown.weighted_total(weights), 6) + 0.5)
        return int(max(0, min(100, overall)))


def calculate_score(
    document_text: str,
    job_description: str,
    document_type: Union[DocumentType, str] = DocumentType.RESUME,
    config: Optional[ATSConfig] = None
) -> ScoreResult:
    """Score a document with a freshly built scorer"""
    return ATSScorer(config).calculate_score(document_text, job_description, document_type)


def score_or_none(
    scorer: ATSScorer,
    document_text: str,
    job_description: str,
    document_type: Union[DocumentType, str] = DocumentType.RESUME
) -> Optional[ScoreResult]:
    """
    Score for advisory display: a failure is logged and reported as None
    ("scoring unavailable") instead of propagating.
    """
    try:
        return scorer.calculate_score(document_text, job_description, document_type)
    except Exception:
        logger.exception("ATS scoring failed")
        return None
