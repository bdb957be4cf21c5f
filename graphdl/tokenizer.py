"""
Tokenizer: statement text -> ordered Token list.

Only letter runs (with an optional apostrophe suffix, as in "company's") and
the punctuation marks . , ; : - / ( ) survive. Digits and other symbols are
dropped.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

TOKEN_PATTERN = re.compile(r"[a-zA-Z]+(?:'[a-z]+)?|[.,;:\-/()]")

PUNCTUATION = frozenset(".,;:-/()")


class PosTag(str, Enum):
    DETERMINER = "DET"
    PRONOUN = "PRON"
    VERB = "VERB"
    PREPOSITION = "PREP"
    CONJUNCTION = "CONJ"
    ADVERB = "ADV"
    ADJECTIVE = "ADJ"
    NOUN = "NOUN"
    UNKNOWN_VERB_LIKE = "UNK-VERB"
    UNKNOWN_CAPITALIZED = "UNK-CAP"
    PUNCTUATION = "PUNCT"
    UNKNOWN = "UNK"


@dataclass(frozen=True)
class Token:
    text: str
    normalized: str
    position: int
    pos: Optional[PosTag] = None

    @property
    def is_punctuation(self) -> bool:
        return self.text in PUNCTUATION

    @property
    def is_capitalized(self) -> bool:
        return self.text[:1].isupper()

    @property
    def is_nominal(self) -> bool:
        return self.pos in (PosTag.NOUN, PosTag.UNKNOWN_CAPITALIZED)

    @property
    def is_gerund_verb(self) -> bool:
        return self.pos == PosTag.VERB and self.normalized.endswith("ing")


def tokenize(text: str) -> List[Token]:
    """Split text into untagged tokens; position is the ordinal in the output."""
    return [
        Token(text=match, normalized=match.lower(), position=index)
        for index, match in enumerate(TOKEN_PATTERN.findall(text))
    ]
