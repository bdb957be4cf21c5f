"""
Concept normalization: rewrite known multi-word phrases as single identifiers.

    "Define the long-term vision" -> "Define the LongTermVision"
"""
import re
from typing import List, Pattern, Tuple

from graphdl.lexicon import Lexicon


class ConceptNormalizer:
    def __init__(self, lexicon: Lexicon):
        # Longest phrase first so "respiratory protection equipment" wins over
        # "protection equipment".
        self._patterns: List[Tuple[Pattern, str]] = [
            (re.compile(r"\b" + re.escape(phrase) + r"\b", re.IGNORECASE), concept_id)
            for phrase, concept_id in lexicon.concept_phrases()
        ]

    def normalize(self, text: str) -> str:
        for pattern, concept_id in self._patterns:
            text = pattern.sub(concept_id, text)
        return text
