"""
Rule-based improvement suggestions.

Each rule is a (predicate, priority, builder) triple evaluated in order over
the analysis context. Matching rules contribute one suggestion each; the
list is then ranked by priority and capped.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple

from models.analysis_models import (
    KeywordMatchResult,
    SectionScores,
    SkillMatchResult,
    Suggestion,
)

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 8
SECTION_SCORE_THRESHOLD = 70


@dataclass(frozen=True)
class SuggestionContext:
    keyword_matches: KeywordMatchResult
    skill_matches: SkillMatchResult
    sections: SectionScores


Rule = Tuple[Callable[[SuggestionContext], bool], int, Callable[[SuggestionContext, int], Suggestion]]


def _keyword_rule_applies(ctx: SuggestionContext) -> bool:
    return ctx.keyword_matches.percentage < 40


def _build_keyword_suggestion(ctx: SuggestionContext, priority: int) -> Suggestion:
    return Suggestion(
        category='keyword',
        priority=priority,
        text='Include more keywords from the job description to improve ATS compatibility',
        impact_description='Could increase score by 10-15 points',
    )


def _skill_rule_applies(ctx: SuggestionContext) -> bool:
    return len(ctx.skill_matches.missing) > 3


def _build_skill_suggestion(ctx: SuggestionContext, priority: int) -> Suggestion:
    top_missing = ', '.join(skill.name for skill in ctx.skill_matches.missing[:3])
    return Suggestion(
        category='skill',
        priority=priority,
        text=f'Consider adding experience with: {top_missing}',
        impact_description='Could improve skill matching significantly',
    )


SECTION_SUGGESTIONS = {
    'formatting': 'Improve resume formatting with clear headers and bullet points',
    'keywords': 'Increase keyword density by incorporating more job-specific terms',
    'experience': 'Add more quantified achievements and specific experience details',
    'education': 'Include relevant education and certifications',
    'skills': 'Expand skills section with both technical and soft skills',
}

SECTION_PRIORITIES = {
    'keywords': 4,
}


def _section_rule(section: str) -> Rule:
    def applies(ctx: SuggestionContext) -> bool:
        return getattr(ctx.sections, section).score < SECTION_SCORE_THRESHOLD

    def build(ctx: SuggestionContext, priority: int) -> Suggestion:
        return Suggestion(
            category=section,
            priority=priority,
            text=SECTION_SUGGESTIONS[section],
            impact_description='Will improve section scoring',
        )

    return applies, SECTION_PRIORITIES.get(section, 3), build


RULES: List[Rule] = [
    (_keyword_rule_applies, 5, _build_keyword_suggestion),
    (_skill_rule_applies, 4, _build_skill_suggestion),
    *(_section_rule(section) for section in SECTION_SUGGESTIONS),
]


def generate_suggestions(keyword_matches: KeywordMatchResult,
                         skill_matches: SkillMatchResult,
                         sections: SectionScores) -> List[Suggestion]:
    """Evaluate the rules in order and return the top suggestions by priority"""
    ctx = SuggestionContext(keyword_matches, skill_matches, sections)
    suggestions = [
        build(ctx, priority)
        for applies, priority, build in RULES
        if applies(ctx)
    ]

    # sorted() is stable, so equal priorities keep rule order
    suggestions = sorted(suggestions, key=lambda s: s.priority, reverse=True)
    logger.debug(f"Generated {len(suggestions)} suggestions")
    return suggestions[:MAX_SUGGESTIONS]
