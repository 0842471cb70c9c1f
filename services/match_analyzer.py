import logging
from typing import List

from models.analysis_models import (
    KeywordDetail,
    KeywordMatchResult,
    MatchedSkill,
    MissingSkill,
    Skill,
    SkillMatchResult,
    Term,
)
from services.lexical_matcher import matches
from services.scoring_utils import round_half_up

logger = logging.getLogger(__name__)

MAX_MATCHED_SKILLS = 15
MAX_MISSING_SKILLS = 10


def analyze_keyword_matching(resume_terms: List[Term], job_terms: List[Term]) -> KeywordMatchResult:
    """
    Look up every job-description term among the résumé terms.

    A job term is found when some résumé term matches it exactly or fuzzily;
    the first such résumé term in importance order supplies the frequency.
    """
    details = []
    matched_count = 0

    for job_term in job_terms:
        match = next(
            (term for term in resume_terms if matches(term.text, job_term.text)),
            None,
        )
        if match is not None:
            matched_count += 1
        details.append(KeywordDetail(
            term=job_term.text,
            found=match is not None,
            frequency=match.frequency if match is not None else 0,
            importance=job_term.importance,
        ))

    total = len(job_terms)
    percentage = round_half_up((matched_count / total) * 100) if total > 0 else 0
    logger.debug(f"Keyword matches: {matched_count}/{total} ({percentage}%)")

    return KeywordMatchResult(
        total_job_terms=total,
        matched_count=matched_count,
        percentage=percentage,
        details=sorted(details, key=lambda detail: detail.importance, reverse=True),
    )


def analyze_skill_matching(resume_skills: List[Skill], job_skills: List[Skill]) -> SkillMatchResult:
    """Split skills into résumé skills the job asks for and job skills the résumé lacks"""
    matched = [
        skill for skill in resume_skills
        if any(matches(skill.name, job_skill.name) for job_skill in job_skills)
    ]
    missing = [
        job_skill for job_skill in job_skills
        if not any(matches(skill.name, job_skill.name) for skill in resume_skills)
    ]

    matched.sort(key=lambda skill: skill.confidence, reverse=True)
    missing.sort(key=lambda skill: skill.confidence, reverse=True)
    logger.debug(f"Skills matched: {len(matched)}, missing: {len(missing)}")

    return SkillMatchResult(
        matched=[
            MatchedSkill(name=s.name, confidence=s.confidence, category=s.category)
            for s in matched[:MAX_MATCHED_SKILLS]
        ],
        missing=[
            MissingSkill(name=s.name, importance=s.confidence, category=s.category)
            for s in missing[:MAX_MISSING_SKILLS]
        ],
    )
