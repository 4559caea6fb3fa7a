# careerdocs/ats/job_description.py
import re
import logging
from typing import List, Optional

from careerdocs.ats.models import JobDescription

logger = logging.getLogger(__name__)


class JobDescriptionParser:
    """
    Pull the job title, company and experience requirement out of a job description
    """

    TITLE_PATTERN = re.compile(r'Job Title:?\s*([^\n]+)', re.IGNORECASE)

    COMPANY_PATTERNS = [
        re.compile(r'Company:?\s*([^\n]+)', re.IGNORECASE),
        re.compile(r'\bat\s+([A-Z][a-zA-Z\s&]+?)[.,\s]'),
    ]

    # "5 years", "3+ years", "1 year"
    YEARS_PATTERN = re.compile(r'(\d+)\+?\s*years?', re.IGNORECASE)

    def parse(self, jd_text: str) -> JobDescription:
        """
        Parse job description text

        Args:
            jd_text: Full job description text

        Returns:
            JobDescription with any labelled facts found
        """
        jd = JobDescription(
            raw_text=jd_text,
            title=self._extract_title(jd_text),
            company=self._extract_company(jd_text),
            required_experience_years=self._extract_experience_years(jd_text),
        )

        logger.debug(
            f"Parsed JD: title={jd.title!r} company={jd.company!r} "
            f"years={jd.required_experience_years}"
        )
        return jd

    def _extract_title(self, text: str) -> Optional[str]:
        match = self.TITLE_PATTERN.search(text)
        if not match:
            return None
        return match.group(1).strip() or None

    def _extract_company(self, text: str) -> Optional[str]:
        for pattern in self.COMPANY_PATTERNS:
            match = pattern.search(text)
            if match and match.group(1).strip():
                return match.group(1).strip()
        return None

    def _extract_experience_years(self, text: str) -> Optional[int]:
        """Extract required years of experience"""
        match = self.YEARS_PATTERN.search(text)
        if match:
            return int(match.group(1))
        return None

    @classmethod
    def find_years(cls, text: str) -> List[int]:
        """All "N years" figures mentioned in text"""
        return [int(years) for years in cls.YEARS_PATTERN.findall(text)]
