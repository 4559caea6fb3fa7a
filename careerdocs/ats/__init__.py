# careerdocs/ats/__init__.py
"""
ATS (Applicant Tracking System) compatibility scoring
"""

from careerdocs.ats.models import (
    DocumentType, ScoreRating, ScoringWeights, ScoreBreakdown,
    ATSScoreResult, CoverLetterScoreResult, JobDescription,
    RESUME_WEIGHTS, COVER_LETTER_WEIGHTS
)
from careerdocs.ats.keyword_extractor import KeywordExtractor
from careerdocs.ats.job_description import JobDescriptionParser
from careerdocs.ats.matcher import KeywordMatcher
from careerdocs.ats.rules import ResumeRules, CoverLetterRules
from careerdocs.ats.analyzer import ATSAnalyzer
from careerdocs.ats.scorer import ATSScorer, calculate_score, score_or_none
from careerdocs.ats.live import DebouncedScorer

__all__ = [
    'DocumentType',
    'ScoreRating',
    'ScoringWeights',
    'ScoreBreakdown',
    'ATSScoreResult',
    'CoverLetterScoreResult',
    'JobDescription',
    'RESUME_WEIGHTS',
    'COVER_LETTER_WEIGHTS',
    'KeywordExtractor',
    'JobDescriptionParser',
    'KeywordMatcher',
    'ResumeRules',
    'CoverLetterRules',
    'ATSAnalyzer',
    'ATSScorer',
    'calculate_score',
    'score_or_none',
    'DebouncedScorer',
]
