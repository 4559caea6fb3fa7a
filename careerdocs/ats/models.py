# careerdocs/ats/models.py
import math
from dataclasses import dataclass, field, fields
from typing import List, Dict, Any, Iterator, Optional, Tuple
from enum import Enum


class DocumentType(Enum):
    """Kind of document being scored"""
    RESUME = "resume"
    COVER_LETTER = "coverLetter"

    @classmethod
    def parse(cls, value) -> "DocumentType":
        """Accept enum members, 'resume', 'coverLetter' or 'cover-letter'"""
        if isinstance(value, cls):
            return value

        normalized = str(value).strip().replace('-', '').replace('_', '').lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown document type: {value!r}")


class ScoreRating(Enum):
    """Score bands shown next to the overall score"""
    EXCELLENT = "excellent"         # 80+
    GOOD = "good"                   # 60-79
    NEEDS_WORK = "needs_work"       # below 60


# Factor name -> key used in serialized breakdowns
BREAKDOWN_KEYS = {
    'keyword_match': 'keywordMatch',
    'skills_alignment': 'skillsAlignment',
    'job_title_match': 'jobTitleMatch',
    'experience_relevance': 'experienceRelevance',
    'format_compliance': 'formatCompliance',
    'narrative_quality': 'narrativeQuality',
    'personalization': 'personalizationScore',
    'tone_professionalism': 'toneProfessionalism',
}


@dataclass(frozen=True)
class ScoringWeights:
    """Fractional weight per scoring factor; factors left at 0 do not count"""
    keyword_match: float
    skills_alignment: float
    job_title_match: float = 0.0
    experience_relevance: float = 0.0
    format_compliance: float = 0.0
    narrative_quality: float = 0.0
    personalization: float = 0.0
    tone_professionalism: float = 0.0

    def __post_init__(self):
        if not math.isclose(self.total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Scoring weights must sum to 1.0, got {self.total:.4f}")

    @property
    def total(self) -> float:
        return sum(getattr(self, f.name) for f in fields(self))

    def items(self) -> Iterator[Tuple[str, float]]:
        """Yield (factor, weight) for every factor that counts"""
        for f in fields(self):
            weight = getattr(self, f.name)
            if weight:
                yield f.name, weight

    def to_dict(self) -> Dict[str, float]:
        return {BREAKDOWN_KEYS[name]: weight for name, weight in self.items()}


RESUME_WEIGHTS = ScoringWeights(
    keyword_match=0.45,
    skills_alignment=0.25,
    job_title_match=0.15,
    experience_relevance=0.10,
    format_compliance=0.05,
)

COVER_LETTER_WEIGHTS = ScoringWeights(
    keyword_match=0.35,
    skills_alignment=0.20,
    narrative_quality=0.20,
    personalization=0.15,
    tone_professionalism=0.10,
)


@dataclass
class ScoreBreakdown:
    """
    Sub-score (0-100) per factor.

    Factors that do not apply to a document type stay at 100 so they
    never read as a penalty.
    """
    keyword_match: float = 100.0
    skills_alignment: float = 100.0
    job_title_match: float = 100.0
    experience_relevance: float = 100.0
    format_compliance: float = 100.0
    narrative_quality: float = 100.0
    personalization: float = 100.0
    tone_professionalism: float = 100.0

    def weighted_total(self, weights: ScoringWeights) -> float:
        return sum(getattr(self, name) * weight for name, weight in weights.items())

    def to_dict(self) -> Dict[str, float]:
        return {BREAKDOWN_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}


@dataclass
class ATSScoreResult:
    """Complete ATS scoring result for a resume"""
    overall_score: int                     # 0-100
    breakdown: ScoreBreakdown
    matched_keywords: List[str]
    missing_keywords: List[str]
    suggestions: List[str]
    keyword_density: Dict[str, float]      # keyword -> % of words, 2 dp
    document_type: DocumentType = field(default=DocumentType.RESUME)

    @property
    def rating(self) -> ScoreRating:
        if self.overall_score >= 80:
            return ScoreRating.EXCELLENT
        elif self.overall_score >= 60:
            return ScoreRating.GOOD
        return ScoreRating.NEEDS_WORK

    @property
    def summary(self) -> str:
        """One-line verdict for the overall score"""
        return {
            ScoreRating.EXCELLENT: "Excellent match! Your document is highly optimized.",
            ScoreRating.GOOD: "Good match, but some optimization could help.",
            ScoreRating.NEEDS_WORK: "Needs significant optimization to pass ATS filters.",
        }[self.rating]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase shape consumed by the UI"""
        return {
            'documentType': self.document_type.value,
            'overallScore': self.overall_score,
            'breakdown': self.breakdown.to_dict(),
            'matchedKeywords': list(self.matched_keywords),
            'missingKeywords': list(self.missing_keywords),
            'suggestions': list(self.suggestions),
            'keywordDensity': dict(self.keyword_density),
            'rating': self.rating.value,
            'summary': self.summary,
        }


@dataclass
class CoverLetterScoreResult(ATSScoreResult):
    """ATS result with cover-letter specific metrics"""
    narrative_quality: float = 100.0
    personalization_score: float = 100.0
    tone_professionalism: float = 100.0
    length_compliance: float = 100.0
    call_to_action_present: bool = False
    document_type: DocumentType = field(default=DocumentType.COVER_LETTER)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            'narrativeQuality': self.narrative_quality,
            'personalizationScore': self.personalization_score,
            'toneProfessionalism': self.tone_professionalism,
            'lengthCompliance': self.length_compliance,
            'callToActionPresent': self.call_to_action_present,
        })
        return data


@dataclass
class JobDescription:
    """Labelled facts pulled from a job description"""
    raw_text: str
    title: Optional[str] = None
    company: Optional[str] = None
    required_experience_years: Optional[int] = None
