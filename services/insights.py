"""
Report-level views derived from a finished analysis.
"""

from typing import List

from models.analysis_models import AnalysisResult, Insight, ReportSummary
from services.scoring_utils import round_half_up


def _average_section_score(result: AnalysisResult) -> float:
    scores = [section.score for _, section in result.sections.items()]
    return sum(scores) / len(scores)


def build_summary(result: AnalysisResult) -> ReportSummary:
    matched = len(result.matched_skills)
    missing = len(result.missing_skills)
    return ReportSummary(
        total_skills=matched + missing,
        matched_skills_count=matched,
        missing_skills_count=missing,
        keyword_match_percentage=result.keyword_matches.percentage,
        average_section_score=_average_section_score(result),
        high_priority_suggestions=sum(1 for s in result.suggestions if s.priority >= 4),
    )


def get_insights(result: AnalysisResult) -> List[Insight]:
    """Headline messages for the overall score and notable gaps"""
    insights = []

    if result.overall_score >= 90:
        insights.append(Insight(
            type='success',
            message='Excellent ATS compatibility! Your resume should pass most automated screenings.',
        ))
    elif result.overall_score >= 70:
        insights.append(Insight(
            type='warning',
            message='Good ATS score with room for improvement. Consider implementing high-priority suggestions.',
        ))
    else:
        insights.append(Insight(
            type='error',
            message='Your resume may struggle with ATS systems. Significant improvements recommended.',
        ))

    if result.keyword_matches.percentage < 40:
        insights.append(Insight(
            type='warning',
            message='Low keyword match rate. Include more relevant terms from the job description.',
        ))

    if len(result.missing_skills) > 5:
        insights.append(Insight(
            type='info',
            message=f'{len(result.missing_skills)} skills missing. Consider adding relevant ones to your resume.',
        ))

    return insights


def get_improvement_potential(result: AnalysisResult) -> int:
    """Points the average section score could gain by acting on the suggestions"""
    current = _average_section_score(result)
    potential = min(100, current + len(result.suggestions) * 3)
    return round_half_up(potential - current)
