import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from services.lexical_matcher import matches, similarity  # noqa: E402


class LexicalMatcherTests(unittest.TestCase):
    def test_exact_match_ignores_case(self):
        self.assertTrue(matches("Python", "python"))
        self.assertEqual(similarity("Docker", "docker"), 1.0)

    def test_near_matches_pass_threshold(self):
        # java/javascript: Jaro 0.8 plus a four-character prefix bonus
        self.assertAlmostEqual(similarity("java", "javascript"), 0.88)
        self.assertTrue(matches("java", "javascript"))
        self.assertTrue(matches("developer", "development"))

    def test_unrelated_words_do_not_match(self):
        self.assertFalse(matches("docker", "kubernetes"))
        self.assertFalse(matches("leadership", "aws"))
        self.assertFalse(matches("quilt", "required"))

    def test_match_is_symmetric(self):
        pairs = [
            ("java", "javascript"),
            ("docker", "kubernetes"),
            ("react", "react native"),
            ("mysql", "postgresql"),
        ]
        for a, b in pairs:
            self.assertEqual(matches(a, b), matches(b, a))
            self.assertAlmostEqual(similarity(a, b), similarity(b, a))


if __name__ == "__main__":
    unittest.main()
