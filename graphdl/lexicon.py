"""
Lexicon: the read-only word tables shared by every parsing stage.

Closed word classes come from graphdl.vocabulary; concepts and conjunctions
are loaded from the generated JSON tables under graphdl/data/.
"""
from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from graphdl import vocabulary

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DATA_DIR_ENV = "GRAPHDL_DATA_DIR"

CONJUNCTION_TYPES = {"coordinating", "subordinating", "correlative"}
EXPANSION_POLICIES = {"cartesian", "compound", "conditional"}


@dataclass(frozen=True)
class VerbEntry:
    """A known verb and its derived surface forms."""

    canonical_form: str
    predicate: str
    event: str
    activity: str
    actor: str

    @classmethod
    def from_base(cls, base: str) -> "VerbEntry":
        base = base.lower()
        return cls(
            canonical_form=base,
            predicate=base,
            event=_past_form(base),
            activity=_gerund_form(base),
            actor=_actor_form(base),
        )


@dataclass(frozen=True)
class ConceptEntry:
    """A multi-word noun phrase with a single PascalCase identifier."""

    id: str
    base_noun: str
    modifiers: str = ""

    def lookup_keys(self) -> List[str]:
        """
        Lowercase phrases that resolve to this concept.

        Example for PerformanceManagement:
            "performancemanagement", "performance management"
        """
        keys = [self.id.lower()]
        spaced = re.sub(r"([A-Z])", r" \1", self.id).strip().lower()
        if spaced != keys[0]:
            keys.append(spaced)
        phrase = f"{self.modifiers} {self.base_noun}".strip().lower()
        if phrase and phrase not in keys:
            keys.append(phrase)
        return keys


@dataclass(frozen=True)
class ConjunctionEntry:
    word: str
    type: str
    expansion: str


@dataclass(frozen=True)
class Lexicon:
    """Immutable word tables. Build one with LexiconLoader.load()."""

    verbs: Dict[str, VerbEntry] = field(default_factory=dict)
    # "-ing" surface forms, for the tagger only; is_verb() stays base-form
    gerunds: Dict[str, VerbEntry] = field(default_factory=dict)
    concepts: Dict[str, ConceptEntry] = field(default_factory=dict)
    conjunctions: Dict[str, ConjunctionEntry] = field(default_factory=dict)
    prepositions: FrozenSet[str] = frozenset()
    determiners: FrozenSet[str] = frozenset()
    pronouns: FrozenSet[str] = frozenset()
    adverbs: FrozenSet[str] = frozenset()
    adjectives: FrozenSet[str] = frozenset()

    def is_verb(self, word: str) -> bool:
        return word.lower() in self.verbs

    def is_gerund(self, word: str) -> bool:
        return word.lower() in self.gerunds

    def is_concept(self, phrase: str) -> bool:
        return phrase.lower() in self.concepts

    def coordinators(self) -> Tuple[str, ...]:
        """Conjunctions whose expansion policy produces alternatives ("and", "or")."""
        return tuple(
            word for word, entry in self.conjunctions.items()
            if entry.expansion == "cartesian"
        )

    def concept_phrases(self) -> List[Tuple[str, str]]:
        """(phrase, concept id) pairs, longest phrase first, ties in table order."""
        pairs = [(phrase, entry.id) for phrase, entry in self.concepts.items()]
        return sorted(pairs, key=lambda pair: len(pair[0]), reverse=True)


class LexiconLoader:
    """
    Builds a Lexicon from the packaged data directory.

    Usage:
        lexicon = LexiconLoader().load()
        lexicon = LexiconLoader(data_dir="my_tables/", extra_verbs=["onboard"]).load()
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        extra_verbs: Iterable[str] = (),
        adjectives: Optional[Iterable[str]] = None,
    ):
        env_dir = os.environ.get(DATA_DIR_ENV)
        self.data_dir = Path(data_dir or env_dir or DATA_DIR)
        self.extra_verbs = list(extra_verbs)
        self.adjectives = adjectives

    def load(self) -> Lexicon:
        verbs = {
            base: VerbEntry.from_base(base)
            for base in sorted(set(vocabulary.KNOWN_VERBS) | set(self.extra_verbs))
        }
        gerunds = {
            entry.activity: entry for entry in verbs.values()
            if entry.activity not in verbs
        }
        concepts = self._load_concepts()
        conjunctions = self._load_conjunctions()

        adjectives = self.adjectives if self.adjectives is not None else vocabulary.KNOWN_ADJECTIVES

        lexicon = Lexicon(
            verbs=verbs,
            gerunds=gerunds,
            concepts=concepts,
            conjunctions=conjunctions,
            prepositions=frozenset(vocabulary.KNOWN_PREPOSITIONS),
            determiners=frozenset(vocabulary.KNOWN_DETERMINERS),
            pronouns=frozenset(vocabulary.KNOWN_PRONOUNS),
            adverbs=frozenset(vocabulary.KNOWN_ADVERBS),
            adjectives=frozenset(w.lower() for w in adjectives),
        )
        logger.info(
            f"Lexicon loaded: {len(verbs)} verbs, {len(concepts)} concept keys, "
            f"{len(conjunctions)} conjunctions"
        )
        return lexicon

    def _read_json(self, name: str) -> dict:
        path = self.data_dir / name
        if not path.exists():
            raise FileNotFoundError(f"Lexicon data file not found: {path}")
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def _load_concepts(self) -> Dict[str, ConceptEntry]:
        index: Dict[str, ConceptEntry] = {}
        for record in self._read_json("concepts.json").get("concepts", []):
            if not record.get("id") or not record.get("base_noun"):
                raise ValueError(f"Malformed concept record: {record}")
            entry = ConceptEntry(
                id=record["id"],
                base_noun=record["base_noun"],
                modifiers=record.get("modifiers", ""),
            )
            for key in entry.lookup_keys():
                index[key] = entry
        return index

    def _load_conjunctions(self) -> Dict[str, ConjunctionEntry]:
        table: Dict[str, ConjunctionEntry] = {}
        for record in self._read_json("conjunctions.json").get("conjunctions", []):
            word = record.get("word", "").lower()
            if not word:
                raise ValueError(f"Malformed conjunction record: {record}")
            if record.get("type") not in CONJUNCTION_TYPES:
                raise ValueError(f"Unknown conjunction type for '{word}': {record.get('type')}")
            if record.get("expansion") not in EXPANSION_POLICIES:
                raise ValueError(f"Unknown expansion policy for '{word}': {record.get('expansion')}")
            table[word] = ConjunctionEntry(
                word=word,
                type=record["type"],
                expansion=record["expansion"],
            )
        return table


def load_lexicon(data_dir: Optional[Path] = None) -> Lexicon:
    """Convenience wrapper around LexiconLoader(data_dir).load()."""
    return LexiconLoader(data_dir).load()


# --- Surface-form derivation for VerbEntry ---

def _doubles_final(base: str) -> bool:
    """One-syllable consonant-vowel-consonant words double the last letter: plan -> planning."""
    vowels = "aeiou"
    if len(base) < 3 or base[-1] in vowels + "wxy":
        return False
    if base[-2] not in vowels or base[-3] in vowels:
        return False
    return len(re.findall(r"[aeiou]+", base)) == 1


def _gerund_form(base: str) -> str:
    if base.endswith("ie"):
        return base[:-2] + "ying"
    if _doubles_final(base):
        return base + base[-1] + "ing"
    if base.endswith("e") and not base.endswith("ee"):
        return base[:-1] + "ing"
    return base + "ing"


def _past_form(base: str) -> str:
    if base.endswith("e"):
        return base + "d"
    if _doubles_final(base):
        return base + base[-1] + "ed"
    if len(base) > 1 and base.endswith("y") and base[-2] not in "aeiou":
        return base[:-1] + "ied"
    return base + "ed"


def _actor_form(base: str) -> str:
    if base.endswith("e"):
        return base + "r"
    if _doubles_final(base):
        return base + base[-1] + "er"
    if len(base) > 1 and base.endswith("y") and base[-2] not in "aeiou":
        return base[:-1] + "ier"
    return base + "er"
