"""
Score aggregation.

Combines the keyword, skill and section analyses into the overall 0-100
score and computes the two auxiliary scores reported beside it.
"""

import re
import logging

from models.analysis_models import KeywordMatchResult, SectionScores, SkillMatchResult
from services.scoring_utils import HEADER_PATTERN, round_half_up

logger = logging.getLogger(__name__)

# Component weights (sum to 1.0)
WEIGHTS = {
    'keywords': 0.30,
    'skills': 0.25,
    'sections': 0.45,
}

DATE_RANGE_PATTERN = re.compile(r'\b\d{4}-\d{4}\b')


def calculate_overall_score(keyword_matches: KeywordMatchResult,
                            skill_matches: SkillMatchResult,
                            sections: SectionScores) -> int:
    """Calculate the weighted overall score"""
    keyword_score = keyword_matches.percentage

    matched = len(skill_matches.matched)
    total_skills = matched + len(skill_matches.missing)
    skills_score = (matched / total_skills) * 100 if total_skills > 0 else 0

    section_values = [section.score for _, section in sections.items()]
    section_score = sum(section_values) / len(section_values)

    overall = (
        keyword_score * WEIGHTS['keywords'] +
        skills_score * WEIGHTS['skills'] +
        section_score * WEIGHTS['sections']
    )
    logger.debug(
        f"Keyword score {keyword_score}, skills score {skills_score:.2f}, "
        f"section score {section_score:.2f} -> overall {overall:.2f}"
    )

    return round_half_up(max(min(overall, 100), 0))


def calculate_readability_score(text: str) -> int:
    """
    Score sentence and word length.

    Returns 0 for text without sentences or words, otherwise a value in
    [60, 100].
    """
    sentences = [s for s in re.split(r'[.!?]+', text) if s.strip()]
    words = text.split()

    if not sentences or not words:
        return 0

    avg_words_per_sentence = len(words) / len(sentences)
    avg_chars_per_word = sum(len(word) for word in words) / len(words)

    score = 100
    if avg_words_per_sentence > 20:
        score -= 10
    if avg_chars_per_word > 6:
        score -= 10

    return max(score, 60)


def calculate_ats_compatibility_score(text: str) -> int:
    """Score characters and layout habits that trip up ATS parsers"""
    score = 80

    if re.search(r'[^\x00-\x7F]', text):
        score -= 5
    if '\t' in text:
        score -= 5
    if re.search(r' {3,}', text):
        score -= 5

    if HEADER_PATTERN.search(text):
        score += 10
    if DATE_RANGE_PATTERN.search(text):
        score += 5

    return max(min(score, 100), 0)
