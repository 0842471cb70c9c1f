import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from services.skill_extractor import SkillExtractor  # noqa: E402
from services.text_processor import TextProcessor  # noqa: E402


class SkillExtractorTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.extractor = SkillExtractor()
        cls.processor = TextProcessor()

    def extract(self, text):
        return self.extractor.extract(self.processor.normalize(text))

    def test_counts_frequency_and_orders_by_confidence(self):
        skills = self.extract("Python, Django and PostgreSQL. Python again; python!")

        self.assertEqual([s.name for s in skills], ["python", "django", "postgresql"])
        python = skills[0]
        self.assertEqual(python.category, "technical")
        self.assertEqual(python.frequency, 3)
        self.assertAlmostEqual(python.confidence, 0.9)
        self.assertAlmostEqual(skills[1].confidence, 0.3)

    def test_soft_skills_use_lower_weight(self):
        skills = self.extract("Leadership through leadership.")
        self.assertEqual(len(skills), 1)
        self.assertEqual(skills[0].name, "leadership")
        self.assertEqual(skills[0].category, "soft")
        self.assertAlmostEqual(skills[0].confidence, 0.4)

    def test_confidence_is_capped_at_one(self):
        skills = self.extract("aws aws aws aws aws")
        self.assertEqual(skills[0].frequency, 5)
        self.assertEqual(skills[0].confidence, 1)

    def test_dotted_names_match_their_normalized_form(self):
        names = [s.name for s in self.extract("Built APIs with Node.js and ASP.NET")]
        self.assertIn("node.js", names)
        self.assertIn("asp.net", names)

    def test_matches_whole_words_only(self):
        names = [s.name for s in self.extract("JavaScript and good manners")]
        self.assertIn("javascript", names)
        self.assertNotIn("java", names)
        self.assertNotIn("go", names)

    def test_multi_word_skills(self):
        names = [s.name for s in self.extract("Machine learning and problem solving")]
        self.assertIn("machine learning", names)
        self.assertIn("problem solving", names)

    def test_no_name_appears_twice(self):
        skills = self.extract("C++ and C# and React Native and React")
        names = [s.name for s in skills]
        self.assertEqual(len(names), len(set(names)))
        self.assertNotIn("c#", names)

    def test_absent_skills_are_omitted(self):
        self.assertEqual(self.extract(""), [])
        self.assertEqual(self.extract("Quilt fudge yoyo."), [])


if __name__ == "__main__":
    unittest.main()
