# dashboard/api/ats.py

import logging
import os
from functools import lru_cache
from typing import Dict

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from careerdocs.config import ATSConfig
from careerdocs.text_cleaner import TextCleaner
from careerdocs.ats import (
    ATSScorer, DocumentType, RESUME_WEIGHTS, COVER_LETTER_WEIGHTS, score_or_none
)
from dashboard.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


class ScoreRequest(BaseModel):
    """Body of POST /api/ats/score"""
    model_config = ConfigDict(populate_by_name=True)

    document_text: str = Field(alias="documentText", max_length=settings.max_text_chars)
    job_description: str = Field(alias="jobDescription", max_length=settings.max_text_chars)
    document_type: str = Field(default="resume", alias="documentType")
    is_html: bool = Field(default=False, alias="isHtml")


@lru_cache(maxsize=1)
def get_scorer() -> ATSScorer:
    """Shared scorer; it keeps no per-request state"""
    if os.path.exists(settings.ats_config_path):
        return ATSScorer(ATSConfig.from_yaml(settings.ats_config_path))
    return ATSScorer()


@router.post("/score")
async def score_document(request: ScoreRequest) -> Dict:
    """Score a resume or cover letter against a job description"""
    try:
        document_type = DocumentType.parse(request.document_type)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    cleaner = TextCleaner()
    document_text = cleaner.clean_text(request.document_text)
    job_description = (
        cleaner.html_to_text(request.job_description)
        if request.is_html
        else cleaner.clean_text(request.job_description)
    )

    result = score_or_none(get_scorer(), document_text, job_description, document_type)
    if result is None:
        raise HTTPException(status_code=503, detail="ATS scoring unavailable")

    return result.to_dict()


@router.get("/weights")
async def get_weights() -> Dict:
    """Weight table per document type"""
    return {
        DocumentType.RESUME.value: RESUME_WEIGHTS.to_dict(),
        DocumentType.COVER_LETTER.value: COVER_LETTER_WEIGHTS.to_dict(),
    }
