import re
import logging
from typing import Optional

from models.analysis_models import (
    EducationSection,
    ExperienceSection,
    FormattingSection,
    KeywordDensitySection,
    SectionScores,
    SkillsSection,
)
from services.scoring_utils import HEADER_PATTERN, round_half_up
from services.vocabulary import Vocabulary, load_vocabulary

logger = logging.getLogger(__name__)


class SectionAnalyzer:
    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        self.vocabulary = vocabulary or load_vocabulary()

        self.format_indicators = {
            'headers': HEADER_PATTERN,
            'bullet_points': re.compile(r'[•\-*]'),
        }

        # "5 years of experience", "3+ yrs exp"
        self.experience_patterns = [
            re.compile(r'(\d+)\+?\s*years?\s*(?:of\s*)?(?:experience|exp)', re.IGNORECASE),
            re.compile(r'(\d+)\+?\s*yrs?\s*(?:of\s*)?(?:experience|exp)', re.IGNORECASE),
        ]
        self.achievement_pattern = re.compile(
            r'\d+%|increased|improved|reduced|grew|generated|\$\d+', re.IGNORECASE
        )

        self.degree_patterns = {
            'bachelor': re.compile(r'\b(?:bachelors?|b\.?a|b\.?s|b\.?sc|b\.?tech|beng)\b', re.IGNORECASE),
            'master': re.compile(r'\b(?:masters?|m\.?a|m\.?s|m\.?sc|m\.?tech|mba|meng)\b', re.IGNORECASE),
            'doctorate': re.compile(r'\b(?:ph\.?d|doctorate|doctoral)\b', re.IGNORECASE),
            'associate': re.compile(r'\b(?:associate|diploma|certificate)s?\b', re.IGNORECASE),
        }
        self.relevant_fields = [
            'computer science', 'engineering', 'information technology',
            'software', 'business', 'management', 'marketing'
        ]

        self.tech_keywords = ['programming', 'software', 'technical', 'coding', 'development']
        self.soft_keywords = ['communication', 'leadership', 'teamwork', 'management']

    def analyze(self, resume_text: str, job_description: str) -> SectionScores:
        """
        Score the five résumé sections
        """
        sections = SectionScores(
            formatting=self.analyze_formatting(resume_text),
            keywords=self.analyze_keyword_density(resume_text, job_description),
            experience=self.analyze_experience(resume_text),
            education=self.analyze_education(resume_text),
            skills=self.analyze_skills_section(resume_text),
        )
        logger.debug(
            "Section scores: " + ", ".join(f"{name}={s.score}" for name, s in sections.items())
        )
        return sections

    def analyze_formatting(self, text: str) -> FormattingSection:
        """Score structure and length"""
        score = 80
        issues = []

        if not self.format_indicators['headers'].search(text):
            score -= 10
            issues.append('Consider using clear section headers')

        if not self.format_indicators['bullet_points'].search(text):
            score -= 10
            issues.append('Use bullet points for better readability')

        if len(text) < 1000:
            score -= 15
            issues.append('Resume appears too short')
        elif len(text) > 4000:
            score -= 5
            issues.append('Resume might be too long')

        return FormattingSection(
            score=max(score, 0),
            feedback='Good formatting and structure' if not issues else 'Formatting could be improved',
            issues=issues,
        )

    def analyze_keyword_density(self, resume_text: str, job_description: str) -> KeywordDensitySection:
        """Share of significant job-description words that appear verbatim in the résumé"""
        resume_words = set(resume_text.lower().split())
        stopwords = self.vocabulary.density_stopwords

        # dict keeps first-seen order while dropping duplicates
        job_keywords = list(dict.fromkeys(
            word for word in job_description.lower().split()
            if len(word) > 3 and word not in stopwords
        ))

        matched_count = sum(1 for keyword in job_keywords if keyword in resume_words)
        percentage = (matched_count / len(job_keywords)) * 100 if job_keywords else 0
        score = round_half_up(min(percentage * 1.2, 100))

        return KeywordDensitySection(
            score=score,
            feedback='Good keyword optimization' if score > 70 else 'Consider including more relevant keywords',
            matched_count=matched_count,
            total_count=len(job_keywords),
        )

    def analyze_experience(self, text: str) -> ExperienceSection:
        """Score stated years of experience and quantified achievements"""
        score = 70
        years_found = 0

        for pattern in self.experience_patterns:
            for match in pattern.finditer(text):
                years_found = max(years_found, int(match.group(1)))

        relevant_experience = years_found > 0
        if relevant_experience:
            score += min(years_found * 5, 25)

        if len(self.achievement_pattern.findall(text)) > 3:
            score += 15

        return ExperienceSection(
            score=min(score, 100),
            feedback=(
                'Strong experience section with quantifiable achievements'
                if relevant_experience else
                'Consider adding more specific experience details'
            ),
            years_found=years_found,
            relevant_experience=relevant_experience,
        )

    def analyze_education(self, text: str) -> EducationSection:
        """Score degrees and fields of study"""
        score = 60
        degree_found = False
        relevant_degree = False

        for pattern in self.degree_patterns.values():
            if pattern.search(text):
                degree_found = True
                score += 20

        text_lower = text.lower()
        for field in self.relevant_fields:
            if field in text_lower:
                relevant_degree = True
                score += 15

        return EducationSection(
            score=min(score, 100),
            feedback='Education section present' if degree_found else 'Consider adding education details',
            degree_found=degree_found,
            relevant_degree=relevant_degree,
        )

    def analyze_skills_section(self, text: str) -> SkillsSection:
        """Score the spread of technical and soft skill mentions"""
        text_lower = text.lower()
        technical_skills = sum(1 for keyword in self.tech_keywords if keyword in text_lower)
        soft_skills = sum(1 for keyword in self.soft_keywords if keyword in text_lower)

        total_skills = technical_skills + soft_skills

        return SkillsSection(
            score=min(total_skills * 10, 100),
            feedback='Good mix of technical and soft skills' if total_skills > 5 else 'Consider adding more relevant skills',
            technical_skills=technical_skills,
            soft_skills=soft_skills,
        )
