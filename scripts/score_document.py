#!/usr/bin/env python3
"""
Score a resume or cover letter against a job description

Usage:
    python scripts/score_document.py --document data/resumes/resume.txt --job data/job_descriptions/support_agent.txt
    python scripts/score_document.py --document letter.txt --job posting.html --type cover-letter --output reports/ats.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from careerdocs.config import ATSConfig, get_config
from careerdocs.text_cleaner import TextCleaner
from careerdocs.ats import ATSScorer, CoverLetterScoreResult, DocumentType, score_or_none

logger = logging.getLogger(__name__)


def load_text(path: str, cleaner: TextCleaner) -> str:
    """Load a text or saved HTML file"""
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    raw = file_path.read_text(encoding='utf-8', errors='replace')
    if file_path.suffix.lower() in ('.html', '.htm'):
        return cleaner.html_to_text(raw)
    return cleaner.clean_text(raw)


def _bar(value: float) -> str:
    return '█' * int(value / 10)


def print_score_summary(result):
    """Print formatted score summary"""
    print("\n" + "=" * 70)
    print(f"{'ATS COMPATIBILITY SCORE':^70}")
    print("=" * 70)
    print()

    score_color = (
        '\033[92m' if result.overall_score >= 80 else   # Green
        '\033[93m' if result.overall_score >= 60 else   # Yellow
        '\033[91m'                                        # Red
    )
    reset_color = '\033[0m'

    print(f"Document: {result.document_type.value}")
    print(f"Overall Score: {score_color}{result.overall_score}/100{reset_color} ({result.rating.value.upper()})")
    print(result.summary)
    print()

    breakdown = result.breakdown
    print("Component Breakdown:")
    print(f"  Keywords:        {breakdown.keyword_match:5.1f}/100  {_bar(breakdown.keyword_match)}")
    print(f"  Skills:          {breakdown.skills_alignment:5.1f}/100  {_bar(breakdown.skills_alignment)}")

    if isinstance(result, CoverLetterScoreResult):
        print(f"  Narrative:       {result.narrative_quality:5.1f}/100  {_bar(result.narrative_quality)}")
        print(f"  Personalization: {result.personalization_score:5.1f}/100  {_bar(result.personalization_score)}")
        print(f"  Tone:            {result.tone_professionalism:5.1f}/100  {_bar(result.tone_professionalism)}")
        print(f"  Length:          {result.length_compliance:5.1f}/100  {_bar(result.length_compliance)}")
        print(f"  Call to action:  {'yes' if result.call_to_action_present else 'no'}")
    else:
        print(f"  Job title:       {breakdown.job_title_match:5.1f}/100  {_bar(breakdown.job_title_match)}")
        print(f"  Experience:      {breakdown.experience_relevance:5.1f}/100  {_bar(breakdown.experience_relevance)}")
        print(f"  Format:          {breakdown.format_compliance:5.1f}/100  {_bar(breakdown.format_compliance)}")
    print()


def print_keywords(result, limit: int = 15):
    """Print matched and missing keywords"""
    print("=" * 70)
    print("KEYWORDS")
    print("=" * 70)
    print()

    print(f"  Matched ({len(result.matched_keywords)}): {', '.join(result.matched_keywords[:limit]) or '-'}")
    print(f"  Missing ({len(result.missing_keywords)}): {', '.join(result.missing_keywords[:limit]) or '-'}")
    print()


def print_suggestions(result):
    """Print suggestions"""
    if not result.suggestions:
        return

    print("=" * 70)
    print("SUGGESTIONS")
    print("=" * 70)
    print()

    for i, suggestion in enumerate(result.suggestions, 1):
        print(f"  {i}. {suggestion}")
    print()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Score a document for ATS compatibility')
    parser.add_argument(
        '--document',
        required=True,
        help='Resume or cover letter text file'
    )
    parser.add_argument(
        '--job',
        required=True,
        help='Job description text or HTML file'
    )
    parser.add_argument(
        '--type',
        default='resume',
        choices=['resume', 'cover-letter'],
        help='Document type (default: resume)'
    )
    parser.add_argument(
        '--config',
        help='ATS config YAML (default: $ATS_CONFIG or config/ats.yaml)'
    )
    parser.add_argument(
        '--output',
        help='Write the result as JSON to this file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(message)s'
    )

    config = ATSConfig.from_yaml(args.config) if args.config else get_config()
    cleaner = TextCleaner()

    try:
        document_text = load_text(args.document, cleaner)
        job_description = load_text(args.job, cleaner)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1

    result = score_or_none(ATSScorer(config), document_text, job_description, DocumentType.parse(args.type))
    if result is None:
        print("Error: ATS scoring unavailable (see log for details)")
        return 1

    print_score_summary(result)
    print_keywords(result)
    print_suggestions(result)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, indent=2)
        print(f"✓ Result saved to {output_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
