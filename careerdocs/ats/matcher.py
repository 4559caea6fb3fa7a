# careerdocs/ats/matcher.py
import re
import logging
from typing import Dict, List, Optional, Set

from careerdocs.config import ATSConfig

logger = logging.getLogger(__name__)


class KeywordMatcher:
    """
    Match job description keywords and skills against document text
    """

    SENTENCE_SPLIT = re.compile(r'[.!?]+')

    def __init__(self, config: Optional[ATSConfig] = None):
        self.config = config or ATSConfig()

    def score_keyword_match(
        self,
        doc_keywords: Set[str],
        job_keywords: Set[str],
        text: str
    ) -> float:
        """
        Calculate keyword match score (0-100)

        Scoring:
        - Share of job keywords extracted from the document
        - Context bonus per remaining job keyword that still shows up
          inside a document sentence
        """
        if not job_keywords:
            return 100.0

        exact_matches = job_keywords & doc_keywords
        base_score = len(exact_matches) / len(job_keywords) * 100

        sentences = self.SENTENCE_SPLIT.split(text.lower())
        contextual = [
            kw for kw in job_keywords - doc_keywords
            if any(kw in sentence for sentence in sentences)
        ]
        bonus = len(contextual) * self.config.context_bonus

        logger.debug(
            f"Keyword match: {len(exact_matches)}/{len(job_keywords)} exact, "
            f"{len(contextual)} in context"
        )
        return min(100.0, base_score + bonus)

    def score_skills_alignment(self, text: str, job_description: str) -> float:
        """Share of curated skills named in the job that the document also names"""
        job_lower = job_description.lower()
        job_skills = [skill for skill in self.config.common_skills if skill in job_lower]
        if not job_skills:
            return 100.0

        text_lower = text.lower()
        doc_skills = [skill for skill in job_skills if skill in text_lower]
        return len(doc_skills) / len(job_skills) * 100

    def matched_keywords(self, doc_keywords: Set[str], job_keywords: Set[str]) -> List[str]:
        return sorted(job_keywords & doc_keywords)

    def missing_keywords(self, doc_keywords: Set[str], job_keywords: Set[str]) -> List[str]:
        return sorted(job_keywords - doc_keywords)

    def keyword_density(self, text: str, keywords: Set[str]) -> Dict[str, float]:
        """
        Get keyword occurrences as a percentage of the document word count

        Args:
            text: Document text
            keywords: Job keywords

        Returns:
            Dict mapping keyword to percentage, rounded to 2 decimals
        """
        text_lower = text.lower()
        word_count = len(text_lower.split())
        density = {}

        for keyword in sorted(keywords):
            if not word_count:
                density[keyword] = 0.0
                continue
            occurrences = len(re.findall(re.escape(keyword.lower()), text_lower))
            density[keyword] = round(occurrences / word_count * 100, 2)

        return density
