"""
The Serializer (ParsedStatement -> GraphDL).

Leaves render as dotted paths, e.g.

    "Develop plans for sustainable regeneration"
        -> "develop.Plans.for.SustainableRegeneration"

and internal nodes as a bracketed list of their children:

    "[prepare.Reports, present.Reports]"
"""
import re
from typing import List, Optional

from graphdl.heuristics import DEFAULT_TABLES, HeuristicTables
from graphdl.lexicon import Lexicon
from graphdl.statement import ParsedStatement

_STRIP_CHARS = re.compile(r"[,;:()'./]")
_CONJUNCTIONS = {"and", "or", "but"}

_LEADING_INFINITIVE = re.compile(r"^to\s+(\w+)\s+(.+)$", re.IGNORECASE)
_EMBEDDED_INFINITIVE = re.compile(r"^(.+?)\s+to\s+(\w+)\s+(.+)$", re.IGNORECASE)


def to_pascal_case(text: str, tables: HeuristicTables = DEFAULT_TABLES) -> str:
    """
    Concatenate the significant words of text in PascalCase.

    Punctuation is stripped, articles and conjunctions dropped, hyphenated
    words split ("long-term plan" -> "LongTermPlan"). Words that are already
    PascalCase identifiers ("TradingStrategy") keep their inner capitals.
    """
    parts: List[str] = []
    for word in text.split():
        word = _STRIP_CHARS.sub("", word)
        if not word or word.lower() in tables.path_stopwords:
            continue
        for piece in word.split("-"):
            if piece:
                parts.append(_capitalize(piece))
    return "".join(parts)


def _capitalize(word: str) -> str:
    if word[0].isupper() and any(c.isupper() for c in word[1:]) and not word.isupper():
        return word
    return word[0].upper() + word[1:].lower()


def _without_conjunctions(words: List[str]) -> List[str]:
    return [w for w in words if w.lower() not in _CONJUNCTIONS]


def _split_on_preposition(words: List[str], tables: HeuristicTables) -> Optional[str]:
    """Render "A B prep C D" as "AB.prep.CD" when prep is strictly inside."""
    for i, word in enumerate(words):
        if 0 < i < len(words) - 1 and word.lower() in tables.path_prepositions:
            before = to_pascal_case(" ".join(_without_conjunctions(words[:i])), tables)
            after = to_pascal_case(" ".join(_without_conjunctions(words[i + 1:])), tables)
            return _join_path([before, word.lower(), after])
    return None


def _join_path(segments: List[str]) -> str:
    return ".".join(s for s in segments if s)


class GraphDLSerializer:
    def __init__(self, lexicon: Optional[Lexicon] = None, tables: HeuristicTables = DEFAULT_TABLES):
        self.lexicon = lexicon
        self.tables = tables

    def serialize(self, statement: ParsedStatement) -> str:
        if not isinstance(statement, ParsedStatement):
            raise ValueError(f"Expected a ParsedStatement, got {type(statement).__name__}")

        if statement.expansions:
            return "[" + ", ".join(self.serialize(child) for child in statement.expansions) + "]"

        parts: List[str] = []
        if statement.predicate:
            parts.append(statement.predicate.lower())
        if statement.object:
            parts.append(self._render_object(statement.object))
        if statement.preposition:
            parts.append(statement.preposition.lower())
        if statement.complement:
            parts.append(self._render_complement(statement.complement, statement.preposition))
        return _join_path(parts)

    def _is_known_verb(self, word: str) -> bool:
        return self.lexicon is not None and self.lexicon.is_verb(word)

    def _looks_like_verb(self, word: str) -> bool:
        if word.lower().endswith("ing"):
            return False
        return self._is_known_verb(word) or self.tables.has_infinitive_ending(word)

    def _render_object(self, text: str) -> str:
        path = _split_on_preposition(text.split(), self.tables)
        return path if path is not None else to_pascal_case(text, self.tables)

    def _render_complement(self, text: str, preposition: Optional[str]) -> str:
        words = text.split()
        pascal = to_pascal_case(text, self.tables)

        if preposition and preposition.lower() == "to":
            if len(words) >= 2:
                if self._looks_like_verb(words[0]):
                    return _join_path([words[0].lower(), to_pascal_case(" ".join(words[1:]), self.tables)])
                return pascal
            if words and not words[0].lower().endswith("ing") and self._is_known_verb(words[0]):
                return words[0].lower()
            return pascal

        match = _LEADING_INFINITIVE.match(text)
        if match:
            verb, rest = match.groups()
            if self._looks_like_verb(verb):
                return _join_path([verb.lower(), to_pascal_case(rest, self.tables)])
            return pascal

        match = _EMBEDDED_INFINITIVE.match(text)
        if match:
            before, verb, rest = match.groups()
            if self._looks_like_verb(verb):
                return _join_path([
                    to_pascal_case(before, self.tables), "to", verb.lower(),
                    to_pascal_case(rest, self.tables),
                ])
            return pascal

        for connector in self.tables.connector_verbs():
            match = re.match(rf"^(.+?)\s+{re.escape(connector)}\s+(.+)$", text, re.IGNORECASE)
            if match:
                verb, prep = connector.split(" ", 1)
                return _join_path([
                    to_pascal_case(match.group(1), self.tables), verb, prep,
                    to_pascal_case(match.group(2), self.tables),
                ])

        path = _split_on_preposition(_without_conjunctions(words), self.tables)
        return path if path is not None else pascal


def to_graphdl(statement: ParsedStatement, lexicon: Optional[Lexicon] = None,
               tables: HeuristicTables = DEFAULT_TABLES) -> str:
    """Serialize a statement tree; lexicon enables verb detection in complements."""
    return GraphDLSerializer(lexicon, tables).serialize(statement)
