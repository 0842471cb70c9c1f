import math
import re
import logging
from collections import Counter
from typing import List, Optional

from models.analysis_models import Term
from services.vocabulary import Vocabulary, load_vocabulary

logger = logging.getLogger(__name__)

MAX_TERMS = 50
MIN_TERM_LENGTH = 3
MIN_IMPORTANCE = 0.1


class TextProcessor:
    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        self.vocabulary = vocabulary or load_vocabulary()
        self.normalization_patterns = [
            (r'[^\w\s]', ' '),  # Punctuation and symbols to spaces
            (r'\s+', ' '),      # Whitespace runs to single space
        ]

    def normalize(self, text: str) -> str:
        """
        Lowercase text, strip punctuation and collapse whitespace
        """
        text = text.lower()
        for pattern, replacement in self.normalization_patterns:
            text = re.sub(pattern, replacement, text)
        return text.strip()

    def tokenize(self, normalized_text: str) -> List[str]:
        """Split normalized text into word tokens, dropping stopwords"""
        stopwords = self.vocabulary.term_stopwords
        return [
            token for token in re.split(r'\W+', normalized_text)
            if token and token not in stopwords
        ]

    def extract_terms(self, normalized_text: str) -> List[Term]:
        """
        Rank the salient terms of one document.

        Importance is tf * idf where the idf is computed over a collection
        holding only this document, so every term gets the same
        1 + ln(1 / 2) factor and ranking follows raw frequency.
        """
        counts = Counter(self.tokenize(normalized_text))
        document_count = 1
        terms = []

        for token, frequency in counts.items():
            docs_with_term = 1
            idf = 1 + math.log(document_count / (1 + docs_with_term))
            importance = frequency * idf
            if len(token) < MIN_TERM_LENGTH or importance <= MIN_IMPORTANCE:
                continue
            terms.append(Term(text=token, importance=importance, frequency=frequency))

        terms.sort(key=lambda term: term.importance, reverse=True)
        logger.debug(f"Extracted {len(terms)} terms from {len(counts)} distinct tokens")
        return terms[:MAX_TERMS]
