"""
Slot extraction for a single, unexpanded statement.

Walks the tagged token stream once, left to right:

    [lead-in modifiers] PREDICATE object... PREPOSITION [modifiers] complement...

Object and complement capture stop at ".", ";" or ")". Determiners are
dropped from both; commas are dropped from the object.
"""
import logging
from typing import List, Optional

from graphdl.concepts import ConceptNormalizer
from graphdl.lexicon import Lexicon
from graphdl.statement import ParsedStatement
from graphdl.tagger import PosTagger
from graphdl.tokenizer import PosTag, Token

logger = logging.getLogger(__name__)

TERMINATORS = frozenset({".", ";", ")"})
UNKNOWN_PENALTY = 0.1

_PREDICATE_TAGS = (PosTag.VERB, PosTag.UNKNOWN_VERB_LIKE)
_MODIFIER_TAGS = (PosTag.ADVERB, PosTag.ADJECTIVE)


class SlotExtractor:
    def __init__(self, lexicon: Lexicon):
        self.normalizer = ConceptNormalizer(lexicon)
        self.tagger = PosTagger(lexicon)

    def extract(self, text: str) -> ParsedStatement:
        normalized = self.normalizer.normalize(text)
        tokens = self.tagger.tag_text(normalized)

        unknown = [t.text for t in tokens if t.pos in (PosTag.UNKNOWN, PosTag.UNKNOWN_CAPITALIZED)]
        penalized = sum(1 for t in tokens if t.pos == PosTag.UNKNOWN)

        modifiers: List[str] = []
        i = 0
        n = len(tokens)

        # Lead-in: everything before the first verb-like token
        while i < n and tokens[i].pos not in _PREDICATE_TAGS:
            if tokens[i].pos in _MODIFIER_TAGS:
                modifiers.append(tokens[i].text)
            i += 1

        predicate = None
        if i < n:
            predicate = tokens[i].text
            i += 1

        object_words: List[str] = []
        while i < n and tokens[i].pos != PosTag.PREPOSITION:
            token = tokens[i]
            if _is_terminator(token):
                break
            if token.pos != PosTag.DETERMINER and token.text != ",":
                object_words.append(token.text)
            i += 1

        preposition = None
        if i < n and tokens[i].pos == PosTag.PREPOSITION:
            preposition = tokens[i].normalized
            i += 1

        while i < n and tokens[i].pos in (PosTag.DETERMINER,) + _MODIFIER_TAGS:
            if tokens[i].pos in _MODIFIER_TAGS:
                modifiers.append(tokens[i].text)
            i += 1

        complement_words: List[str] = []
        while i < n:
            token = tokens[i]
            if _is_terminator(token):
                break
            if token.pos != PosTag.DETERMINER:
                complement_words.append(token.text)
            i += 1

        statement = ParsedStatement(
            original=text,
            predicate=predicate,
            object=_join(object_words),
            preposition=preposition,
            complement=_join(complement_words),
            modifiers=tuple(modifiers),
            confidence=1.0 - UNKNOWN_PENALTY * penalized,
            unknown_words=tuple(unknown),
        )
        logger.debug(f"Slots for '{text}': {statement.predicate} | {statement.object} | "
                     f"{statement.preposition} | {statement.complement}")
        return statement


def _is_terminator(token: Token) -> bool:
    return token.pos == PosTag.PUNCTUATION and token.text in TERMINATORS


def _join(words: List[str]) -> Optional[str]:
    return " ".join(words) if words else None
