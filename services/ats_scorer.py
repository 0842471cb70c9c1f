import time
import logging
from typing import Optional

from models.analysis_models import AnalysisResult
from services.exceptions import AnalysisError
from services.match_analyzer import analyze_keyword_matching, analyze_skill_matching
from services.score_aggregator import (
    calculate_ats_compatibility_score,
    calculate_overall_score,
    calculate_readability_score,
)
from services.section_analyzer import SectionAnalyzer
from services.skill_extractor import SkillExtractor
from services.suggestion_engine import generate_suggestions
from services.text_processor import TextProcessor
from services.vocabulary import Vocabulary, load_vocabulary

logger = logging.getLogger(__name__)


class ATSScorer:
    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        vocabulary = vocabulary or load_vocabulary()
        self.text_processor = TextProcessor(vocabulary)
        self.skill_extractor = SkillExtractor(vocabulary)
        self.section_analyzer = SectionAnalyzer(vocabulary)

    def analyze_resume(self, resume_text: str, job_description: str) -> AnalysisResult:
        """
        Score a résumé against a job description.

        Runs the whole pipeline once and returns the complete result. Any
        failure is re-raised as AnalysisError; no partial result is returned.
        """
        logger.info(
            f"Starting analysis: resume {len(resume_text or '')} chars, "
            f"job description {len(job_description or '')} chars"
        )
        start_time = time.perf_counter()

        try:
            # Preprocess both documents
            processed_resume = self.text_processor.normalize(resume_text)
            processed_job = self.text_processor.normalize(job_description)

            # Extract terms and skills
            resume_terms = self.text_processor.extract_terms(processed_resume)
            job_terms = self.text_processor.extract_terms(processed_job)
            resume_skills = self.skill_extractor.extract(processed_resume)
            job_skills = self.skill_extractor.extract(processed_job)

            # Compare the documents
            keyword_matches = analyze_keyword_matching(resume_terms, job_terms)
            skill_matches = analyze_skill_matching(resume_skills, job_skills)
            sections = self.section_analyzer.analyze(resume_text, job_description)

            suggestions = generate_suggestions(keyword_matches, skill_matches, sections)
            overall_score = calculate_overall_score(keyword_matches, skill_matches, sections)

            readability_score = calculate_readability_score(resume_text)
            ats_compatibility_score = calculate_ats_compatibility_score(resume_text)

            processing_time_ms = int((time.perf_counter() - start_time) * 1000)

            result = AnalysisResult(
                overall_score=overall_score,
                matched_skills=skill_matches.matched,
                missing_skills=skill_matches.missing,
                keyword_matches=keyword_matches,
                sections=sections,
                suggestions=suggestions,
                readability_score=readability_score,
                ats_compatibility_score=ats_compatibility_score,
                processing_time_ms=processing_time_ms,
            )
        except Exception as e:
            logger.error(f"Resume analysis failed: {str(e)}", exc_info=True)
            raise AnalysisError(f"Resume analysis failed: {str(e)}") from e

        logger.info(f"Analysis completed with score {overall_score} in {processing_time_ms} ms")
        return result
