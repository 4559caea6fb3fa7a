# careerdocs/ats/analyzer.py
import logging
from typing import List, Optional

from careerdocs.config import ATSConfig
from careerdocs.ats.models import ScoreBreakdown

logger = logging.getLogger(__name__)


class ATSAnalyzer:
    """
    Turn sub-scores into actionable suggestions
    """

    KEYWORD_TIP = "Add more keywords from the job description to improve match rate"
    SKILLS_TIP = "Include specific technical skills mentioned in the job posting"
    NARRATIVE_TIP = "Add specific, quantifiable achievements"
    PERSONALIZATION_TIP = "Mention the company name and show research about their work/mission"
    CALL_TO_ACTION_TIP = "Add a call to action expressing interest in an interview"

    def __init__(self, config: Optional[ATSConfig] = None):
        self.config = config or ATSConfig()

    def resume_suggestions(self, breakdown: ScoreBreakdown) -> List[str]:
        """
        Suggestions for a resume

        Args:
            breakdown: Resume sub-scores

        Returns:
            Suggestion strings; empty when every threshold is met
        """
        thresholds = self.config.thresholds
        suggestions = []

        if breakdown.keyword_match < thresholds['keyword_match']:
            suggestions.append(self.KEYWORD_TIP)
        if breakdown.skills_alignment < thresholds['skills_alignment']:
            suggestions.append(self.SKILLS_TIP)

        logger.debug(f"Generated {len(suggestions)} resume suggestions")
        return suggestions

    def cover_letter_suggestions(
        self,
        breakdown: ScoreBreakdown,
        call_to_action_present: bool
    ) -> List[str]:
        """Suggestions for a cover letter"""
        thresholds = self.config.thresholds
        suggestions = []

        if breakdown.narrative_quality < thresholds['narrative_quality']:
            suggestions.append(self.NARRATIVE_TIP)
        if breakdown.personalization < thresholds['personalization']:
            suggestions.append(self.PERSONALIZATION_TIP)
        if not call_to_action_present:
            suggestions.append(self.CALL_TO_ACTION_TIP)

        logger.debug(f"Generated {len(suggestions)} cover letter suggestions")
        return suggestions
