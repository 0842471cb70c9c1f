import re
import logging
from typing import List, Optional, Tuple

from models.analysis_models import Skill
from services.text_processor import TextProcessor
from services.vocabulary import Vocabulary, load_vocabulary

logger = logging.getLogger(__name__)

# Confidence gained per occurrence
CATEGORY_WEIGHTS = {
    'technical': 0.3,
    'soft': 0.2,
}


class SkillExtractor:
    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        self.vocabulary = vocabulary or load_vocabulary()
        self.text_processor = TextProcessor(self.vocabulary)
        self.skill_patterns = self._compile_patterns()

    def _compile_patterns(self) -> List[Tuple[str, str, re.Pattern]]:
        """
        Build (name, category, pattern) entries from both vocabularies.

        Names are searched in their normalized form ("node.js" -> "node js")
        as whole words. An entry whose normalized form was already taken by an
        earlier one is skipped.
        """
        entries = []
        seen = set()
        sources = (
            ('technical', self.vocabulary.technical_skills),
            ('soft', self.vocabulary.soft_skills),
        )
        for category, names in sources:
            for name in names:
                search_form = self.text_processor.normalize(name)
                if not search_form or search_form in seen:
                    continue
                seen.add(search_form)
                pattern = re.compile(r'(?<!\w)' + re.escape(search_form) + r'(?!\w)')
                entries.append((name, category, pattern))
        return entries

    def extract(self, normalized_text: str) -> List[Skill]:
        """Return vocabulary skills present in the text, highest confidence first"""
        found_skills = []

        for name, category, pattern in self.skill_patterns:
            frequency = len(pattern.findall(normalized_text))
            if frequency == 0:
                continue
            found_skills.append(Skill(
                name=name,
                category=category,
                frequency=frequency,
                confidence=min(frequency * CATEGORY_WEIGHTS[category], 1),
            ))

        found_skills.sort(key=lambda skill: skill.confidence, reverse=True)
        logger.debug(f"Found {len(found_skills)} vocabulary skills")
        return found_skills
