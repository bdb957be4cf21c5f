"""
Two-pass part-of-speech tagger driven by the Lexicon.

Pass 1 looks each token up independently; pass 2 fixes "-ing" words that
act as nouns ("building permits", "training").
"""
import logging
from dataclasses import replace
from typing import List

from graphdl.lexicon import Lexicon
from graphdl.tokenizer import PosTag, Token, tokenize

logger = logging.getLogger(__name__)


class PosTagger:
    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    def tag_text(self, text: str) -> List[Token]:
        return self.tag(tokenize(text))

    def tag(self, tokens: List[Token]) -> List[Token]:
        tagged = [replace(token, pos=self._lookup(token)) for token in tokens]
        return self._retag_gerunds(tagged)

    def _lookup(self, token: Token) -> PosTag:
        word = token.normalized
        lex = self.lexicon

        if word in lex.determiners:
            return PosTag.DETERMINER
        if word in lex.pronouns:
            return PosTag.PRONOUN
        if word in lex.verbs or word in lex.gerunds:
            return PosTag.VERB
        if word in lex.prepositions:
            return PosTag.PREPOSITION
        if word in lex.conjunctions:
            return PosTag.CONJUNCTION
        if word in lex.adverbs:
            return PosTag.ADVERB
        if word in lex.adjectives:
            return PosTag.ADJECTIVE
        if token.text[:1].isupper():
            # Concept identifiers inserted by the normalizer are known nouns
            if word in lex.concepts:
                return PosTag.NOUN
            return PosTag.UNKNOWN_CAPITALIZED
        if token.text[:1].islower():
            return PosTag.UNKNOWN_VERB_LIKE
        if token.is_punctuation:
            return PosTag.PUNCTUATION
        return PosTag.UNKNOWN

    def _retag_gerunds(self, tokens: List[Token]) -> List[Token]:
        result = list(tokens)
        for i in range(len(result) - 1):
            current, following = result[i], result[i + 1]
            if not current.is_gerund_verb:
                continue
            if (
                following.is_nominal
                or following.pos == PosTag.UNKNOWN
                or (following.pos == PosTag.VERB and not following.normalized.endswith("ing"))
                or following.is_capitalized
            ):
                result[i] = replace(current, pos=PosTag.NOUN)

        if result and result[-1].is_gerund_verb:
            result[-1] = replace(result[-1], pos=PosTag.NOUN)
        return result
