"""
Named heuristic tables used by the coordination expander and the serializer.

The tables are plain constants grouped into a frozen HeuristicTables value so
a caller can swap a table without touching the expansion rules.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple

# Phrases that join a coordinated subject to a coordinated object, as in
# "businesses or departments concerned with production or pricing".
CONNECTOR_PHRASES: Tuple[str, ...] = (
    "concerned with",
    "related to",
    "involved in",
    "responsible for",
    "engaged in",
    "associated with",
    "dealing with",
    "focused on",
    "pertaining to",
    "regarding",
)

# Fixed multi-word nouns that must never be split by a shared-suffix rule.
COMPOUND_IDIOMS: FrozenSet[str] = frozenset({
    "record keeping", "record-keeping", "policy changes", "cost reduction",
    "quality control", "data management", "risk management",
    "project management", "change management", "time management",
    "resource allocation", "budget allocation", "staff development",
    "team building", "problem solving", "decision making", "policy making",
    "rule making", "law enforcement", "code enforcement",
})

# A gerund suffix ("keeping", "planning") glued to a middle word makes a
# compound noun, unless the middle word is one of these action verbs.
GERUND_EXEMPT_VERBS: FrozenSet[str] = frozenset({
    "assign", "delegate", "implement", "develop", "manage", "create",
    "ensure", "maintain", "review", "approve", "coordinate", "direct",
    "evaluate", "identify", "analyze", "perform", "conduct", "establish",
    "prepare", "provide", "support", "monitor", "report", "document",
    "communicate", "facilitate", "generate", "produce", "process",
    "recommend", "select", "determine", "define", "design", "plan",
    "organize", "lead", "guide", "handle", "negotiate", "resolve",
    "validate", "verify", "test", "train", "assess", "measure", "inspect",
    "investigate", "research", "execute", "deliver",
})

# Nominal heads that form a compound with the word in front of them.
COMPOUND_SUFFIXES: FrozenSet[str] = frozenset({
    "changes", "reduction", "allocation", "management", "development",
    "building", "solving", "making", "enforcement", "control", "planning",
    "analysis", "assessment", "evaluation", "implementation",
})

# Middle words that still coordinate in front of a compound suffix.
CORE_ACTION_VERBS: FrozenSet[str] = frozenset({
    "assign", "implement", "develop", "manage", "create", "ensure",
})

# Endings that keep a hyphenated or scoped modifier attached to its noun
# ("long-term", "part time", "entry level").
MODIFIER_ENDINGS: Tuple[str, ...] = ("term", "time", "level")

# Prepositions that split a verb-anchored statement into object and complement.
COMPLEMENT_PREPOSITIONS: Tuple[str, ...] = (
    "of", "to", "for", "with", "from", "in", "on", "at", "by",
)

# Prepositions that split an object phrase into a dotted path.
PATH_PREPOSITIONS: FrozenSet[str] = frozenset({
    "of", "in", "on", "at", "to", "for", "with", "from", "by",
})

# Endings that mark an unlisted word as a likely verb.
INFINITIVE_SUFFIXES: Tuple[str, ...] = ("ize", "ate", "ify", "ect", "uce", "ase")

# Words dropped from PascalCase path segments.
PATH_STOPWORDS: FrozenSet[str] = frozenset({"and", "or", "but", "the", "a", "an"})


@dataclass(frozen=True)
class HeuristicTables:
    """Bundle of the tables above, injectable into the expander and serializer."""

    connector_phrases: Tuple[str, ...] = CONNECTOR_PHRASES
    compound_idioms: FrozenSet[str] = COMPOUND_IDIOMS
    gerund_exempt_verbs: FrozenSet[str] = GERUND_EXEMPT_VERBS
    compound_suffixes: FrozenSet[str] = COMPOUND_SUFFIXES
    core_action_verbs: FrozenSet[str] = CORE_ACTION_VERBS
    modifier_endings: Tuple[str, ...] = MODIFIER_ENDINGS
    complement_prepositions: Tuple[str, ...] = COMPLEMENT_PREPOSITIONS
    path_prepositions: FrozenSet[str] = PATH_PREPOSITIONS
    infinitive_suffixes: Tuple[str, ...] = INFINITIVE_SUFFIXES
    path_stopwords: FrozenSet[str] = PATH_STOPWORDS

    def is_compound_phrase(self, middle: str, suffix: str) -> bool:
        """
        True when ``middle suffix`` reads as one compound noun.

        Either the pair is a known idiom, or the suffix is a gerund and the
        middle is not an action verb, or the suffix is a nominal compound head.
        """
        middle = middle.lower()
        suffix = suffix.lower()
        if f"{middle} {suffix}" in self.compound_idioms:
            return True
        if suffix.endswith("ing") and middle not in self.gerund_exempt_verbs:
            return True
        if suffix in self.compound_suffixes and middle not in self.core_action_verbs:
            return True
        return False

    def is_scoped_modifier(self, middle: str) -> bool:
        """True for modifiers like "long-term" that bind to the word after them."""
        middle = middle.lower()
        return "-" in middle or middle.endswith(self.modifier_endings)

    def has_infinitive_ending(self, word: str) -> bool:
        return word.lower().endswith(self.infinitive_suffixes)

    def connector_verbs(self) -> Tuple[str, ...]:
        """Two-word connectors, e.g. ("concerned with", ...), for path rendering."""
        return tuple(p for p in self.connector_phrases if " " in p)


DEFAULT_TABLES = HeuristicTables()
