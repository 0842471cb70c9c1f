import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from models.analysis_models import Skill, Term  # noqa: E402
from services.match_analyzer import (  # noqa: E402
    MAX_MATCHED_SKILLS,
    MAX_MISSING_SKILLS,
    analyze_keyword_matching,
    analyze_skill_matching,
)
from services.text_processor import MAX_TERMS, TextProcessor  # noqa: E402


def term(text, importance, frequency=1):
    return Term(text=text, importance=importance, frequency=frequency)


def skill(name, confidence, category="technical", frequency=1):
    return Skill(name=name, category=category, frequency=frequency, confidence=confidence)


class KeywordMatchingTests(unittest.TestCase):
    def test_records_found_terms_and_resume_frequency(self):
        resume_terms = [term("python", 0.9, 3), term("docker", 0.6, 2)]
        job_terms = [term("kubernetes", 0.92, 3), term("python", 0.61, 2)]

        result = analyze_keyword_matching(resume_terms, job_terms)

        self.assertEqual(result.total_job_terms, 2)
        self.assertEqual(result.matched_count, 1)
        self.assertEqual(result.percentage, 50)
        self.assertEqual([d.term for d in result.details], ["kubernetes", "python"])
        self.assertFalse(result.details[0].found)
        self.assertEqual(result.details[0].frequency, 0)
        self.assertTrue(result.details[1].found)
        self.assertEqual(result.details[1].frequency, 3)
        self.assertEqual(result.details[1].importance, 0.61)

    def test_fuzzy_match_counts_as_found(self):
        result = analyze_keyword_matching(
            [term("development", 0.5, 4)],
            [term("developer", 0.5)],
        )
        self.assertEqual(result.percentage, 100)
        self.assertEqual(result.details[0].frequency, 4)

    def test_details_sorted_by_importance(self):
        job_terms = [term("alpha", 0.2), term("omega", 0.9), term("delta", 0.5)]
        result = analyze_keyword_matching([], job_terms)
        self.assertEqual([d.term for d in result.details], ["omega", "delta", "alpha"])

    def test_no_job_terms_gives_zero_percentage(self):
        result = analyze_keyword_matching([term("python", 0.9)], [])
        self.assertEqual(result.total_job_terms, 0)
        self.assertEqual(result.matched_count, 0)
        self.assertEqual(result.percentage, 0)
        self.assertEqual(result.details, [])

    def test_percentage_rounds_half_up(self):
        job_terms = [term("alpha", 0.5)] + [
            term(text, 0.5) for text in ("qqqq", "wwww", "xxxx", "yyyy", "zzzz", "vvvv", "kkkk")
        ]
        result = analyze_keyword_matching([term("alpha", 0.5)], job_terms)
        # 1 / 8 = 12.5%
        self.assertEqual(result.percentage, 13)

    def test_term_cap_can_evict_a_previously_matching_term(self):
        # 49 fillers plus "manager" fill the cap exactly; "alphaz" sits just outside it
        processor = TextProcessor()
        fillers = " ".join(f"filler{i:02d}" for i in range(MAX_TERMS - 1))
        resume = f"{fillers} {fillers} manager manager alphaz"
        job_terms = processor.extract_terms(processor.normalize("alphaz manager managers"))

        def percentage(text):
            resume_terms = processor.extract_terms(processor.normalize(text))
            return analyze_keyword_matching(resume_terms, job_terms).percentage

        self.assertEqual(percentage(resume), 67)
        # repeating "alphaz" ranks it first and pushes "manager" past the cap
        self.assertEqual(percentage(resume + " alphaz alphaz"), 33)


class SkillMatchingTests(unittest.TestCase):
    def test_splits_matched_and_missing(self):
        resume_skills = [skill("python", 0.9, frequency=3), skill("leadership", 0.2, "soft")]
        job_skills = [skill("kubernetes", 0.6, frequency=2), skill("python", 0.3), skill("docker", 0.3)]

        result = analyze_skill_matching(resume_skills, job_skills)

        self.assertEqual([s.name for s in result.matched], ["python"])
        self.assertAlmostEqual(result.matched[0].confidence, 0.9)
        self.assertEqual([s.name for s in result.missing], ["kubernetes", "docker"])
        self.assertAlmostEqual(result.missing[0].importance, 0.6)
        self.assertEqual(result.missing[0].category, "technical")

    def test_fuzzy_match_is_consistent_in_both_directions(self):
        result = analyze_skill_matching([skill("java", 0.3)], [skill("javascript", 0.3)])
        self.assertEqual([s.name for s in result.matched], ["java"])
        self.assertEqual(result.missing, [])

    def test_lists_are_capped(self):
        many = [skill(f"tool{i:02d}", round(0.05 * (i % 20), 2)) for i in range(20)]
        result = analyze_skill_matching(many, many)
        self.assertEqual(len(result.matched), MAX_MATCHED_SKILLS)
        confidences = [s.confidence for s in result.matched]
        self.assertEqual(confidences, sorted(confidences, reverse=True))

        result = analyze_skill_matching([], many)
        self.assertEqual(result.matched, [])
        self.assertEqual(len(result.missing), MAX_MISSING_SKILLS)

    def test_no_skills_on_either_side(self):
        result = analyze_skill_matching([], [])
        self.assertEqual(result.matched, [])
        self.assertEqual(result.missing, [])


if __name__ == "__main__":
    unittest.main()
