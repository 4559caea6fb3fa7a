import pytest

from careerdocs.config import ATSConfig
from careerdocs.ats import CoverLetterRules, JobDescriptionParser, ResumeRules


@pytest.fixture
def parser():
    return JobDescriptionParser()


@pytest.fixture
def resume_rules(config):
    return ResumeRules(config)


@pytest.fixture
def letter_rules(config):
    return CoverLetterRules(config)


def words(n: int) -> str:
    return " ".join(["word"] * n)


class TestJobDescriptionParser:

    def test_extracts_labelled_fields(self, parser, job_description):
        jd = parser.parse(job_description)

        assert jd.title == "Python Developer"
        assert jd.company == "Acme Analytics"
        assert jd.required_experience_years == 3

    def test_company_from_at_phrase(self, parser):
        jd = parser.parse("Join our platform team at Globex Corporation, building tools.")
        assert jd.company == "Globex"

    def test_missing_labels(self, parser):
        jd = parser.parse("We are hiring someone great.")

        assert jd.title is None
        assert jd.company is None
        assert jd.required_experience_years is None

    def test_find_years(self):
        assert JobDescriptionParser.find_years("2 years here, 10+ years there, 1 year") == [2, 10, 1]


class TestJobTitleMatch:

    def test_no_title_label_scores_100(self, resume_rules, parser):
        jd = parser.parse("We need help")
        assert resume_rules.score_job_title_match("anything", jd) == 100.0

    def test_title_present_verbatim(self, resume_rules, parser):
        jd = parser.parse("Job Title: Data Analyst\nDetails")
        assert resume_rules.score_job_title_match("Senior DATA ANALYST at Initech", jd) == 100.0

    def test_title_absent_gets_partial_credit(self, resume_rules, parser):
        jd = parser.parse("Job Title: Data Analyst\nDetails")
        assert resume_rules.score_job_title_match("Barista", jd) == 50.0


class TestExperienceRelevance:

    def test_no_requirement_scores_100(self, resume_rules, parser):
        jd = parser.parse("No experience needed")
        assert resume_rules.score_experience_relevance("", jd) == 100.0

    def test_no_years_in_document_scores_50(self, resume_rules, parser):
        jd = parser.parse("5+ years experience")
        assert resume_rules.score_experience_relevance("Lots of experience", jd) == 50.0

    def test_meets_requirement(self, resume_rules, parser):
        jd = parser.parse("5+ years experience")
        assert resume_rules.score_experience_relevance("2 years at A, 6 years at B", jd) == 100.0

    def test_partial_ratio(self, resume_rules, parser):
        jd = parser.parse("4 years experience")
        assert resume_rules.score_experience_relevance("1 year at A, 3 years at B", jd) == pytest.approx(75.0)


class TestFormatCompliance:

    def test_clean_long_document(self, resume_rules):
        assert resume_rules.score_format_compliance("x" * 600) == 100.0

    def test_chart_in_short_resume(self, resume_rules):
        text = "Chart " + "x" * 394
        assert len(text) == 400
        assert resume_rules.score_format_compliance(text) == 50.0

    def test_markers_are_case_sensitive(self, resume_rules):
        assert resume_rules.score_format_compliance("a table " + "x" * 600) == 100.0
        assert resume_rules.score_format_compliance("a Table " + "x" * 600) == 80.0

    def test_threshold_and_markers_come_from_config(self):
        rules = ResumeRules(ATSConfig(layout_markers=["Graph"], min_document_chars=10))
        assert rules.score_format_compliance("Graph of growth") == 80.0


class TestNarrativeQuality:

    def test_three_paragraphs_with_metrics(self, letter_rules):
        text = "One.\n\nWe increased revenue.\n\nThree."
        assert letter_rules.score_narrative_quality(text) == 100.0

    def test_too_few_paragraphs_without_metrics(self, letter_rules):
        assert letter_rules.score_narrative_quality("Just one paragraph.") == 65.0

    def test_too_many_paragraphs(self, letter_rules):
        text = "\n\n".join(["Grew sales 20%."] * 7)
        assert letter_rules.score_narrative_quality(text) == 90.0

    def test_blank_lines_with_whitespace_split_paragraphs(self, letter_rules):
        text = "One 10+ clients.\n  \nTwo.\r\n\r\nThree."
        assert letter_rules.score_narrative_quality(text) == 100.0


class TestPersonalization:

    def test_mentions_company(self, letter_rules, parser):
        jd = parser.parse("Company: Acme\nRole")
        assert letter_rules.score_personalization("I admire ACME's mission", jd) == 100.0

    def test_missing_company_and_boilerplate(self, letter_rules, parser):
        jd = parser.parse("Company: Acme\nRole")
        text = "To whom it may concern, I am writing to apply for this role."
        assert letter_rules.score_personalization(text, jd) == 50.0

    def test_no_company_found(self, letter_rules, parser):
        jd = parser.parse("we need someone")
        assert letter_rules.score_personalization("Dear Hiring Manager", jd) == 90.0


class TestTone:

    def test_greeting_and_closing(self, letter_rules):
        assert letter_rules.score_tone_professionalism("Dear Sam,\n...\nKind regards") == 100.0

    def test_neither_greeting_nor_closing(self, letter_rules):
        assert letter_rules.score_tone_professionalism("Hi. I want the job.") == 60.0


class TestLengthCompliance:

    @pytest.mark.parametrize("count,expected", [
        (350, 100.0),
        (300, 100.0),
        (400, 100.0),
        (150, 40.0),
        (199, 40.0),
        (250, 70.0),
        (200, 70.0),
        (401, 70.0),
    ])
    def test_step_function(self, letter_rules, count, expected):
        assert letter_rules.score_length_compliance(words(count)) == expected


class TestCallToAction:

    def test_detects_phrase(self, letter_rules):
        assert letter_rules.has_call_to_action("I would WELCOME the chance to talk")

    def test_absent(self, letter_rules):
        assert not letter_rules.has_call_to_action("Thanks for reading")
