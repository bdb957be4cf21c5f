"""
Statement parser for imperative task statements.

    parser = GraphDLParser().initialize()
    statement = parser.parse("Prepare or present reports")
    parser.to_graphdl(statement)   # "[prepare.Reports, present.Reports]"

StatementParser decides how a statement splits: coordinated verbs first
("Research/Resolve", "Collect, synthesize, and report", "Prepare or
present"), then coordinated objects and complements. Every alternative is
slot-extracted independently.
"""
import logging
import re
from collections import namedtuple
from typing import List, Optional, Sequence

from graphdl.expander import CoordinationExpander, unique_in_order
from graphdl.heuristics import DEFAULT_TABLES, HeuristicTables
from graphdl.lexicon import Lexicon, LexiconLoader
from graphdl.serializer import to_graphdl
from graphdl.slots import SlotExtractor
from graphdl.statement import ParsedStatement
from graphdl.unknown_tracker import UnknownWordTracker

logger = logging.getLogger(__name__)

Rule = namedtuple("Rule", ["name", "detect", "build"])

SLASH_VERBS = re.compile(r"^(?P<first>\w+)/(?P<second>\w+)\s+(?P<rest>.+)$")


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


class StatementParser:
    """Turns one statement into a ParsedStatement tree. Needs a loaded Lexicon."""

    def __init__(self, lexicon: Lexicon, tables: HeuristicTables = DEFAULT_TABLES):
        self.lexicon = lexicon
        self.tables = tables
        self.slots = SlotExtractor(lexicon)
        self.expander = CoordinationExpander(lexicon, tables)

        conj = "|".join(re.escape(word) for word in sorted(lexicon.coordinators()))
        self._verb_list = re.compile(
            rf"^(?P<verbs>\w+,\s*\w+(?:,\s*\w+)*),?\s+(?P<conj>{conj})\s+(?P<last>\w+)\s+(?P<rest>.+)$",
            re.IGNORECASE)
        self._verb_pair = re.compile(
            rf"^(?P<first>\w+)\s+(?P<conj>{conj})\s+(?P<second>\w+)\s+(?P<rest>.+)$",
            re.IGNORECASE)

        self.rules = (
            Rule("slash_verbs", self._detect_slash_verbs, self._build_slash_verbs),
            Rule("verb_list", self._detect_verb_list, self._build_verb_list),
            Rule("verb_pair", self._detect_verb_pair, self._build_verb_pair),
            Rule("coordinated_text", self.expander.has_coordination, self._build_coordinated),
        )

    def parse(self, text: str) -> ParsedStatement:
        for rule in self.rules:
            match = rule.detect(text)
            if match:
                logger.debug(f"Statement rule '{rule.name}' claimed '{text}'")
                return rule.build(text, match)
        return self.parse_single(text)

    def parse_single(self, text: str) -> ParsedStatement:
        """Slot-extract text as one statement, without any expansion."""
        return self.slots.extract(text)

    def _expand_verbs(self, verbs: Sequence[str], rest: str) -> List[ParsedStatement]:
        """One leaf per verb and per object alternative, verbs in order."""
        expand_rest = self.expander.has_coordination(rest)
        texts: List[str] = []
        for verb in verbs:
            # An unlisted verb keeps its case so the tagger still reads it as verb-like
            head = _capitalize(verb) if self.lexicon.is_verb(verb) else verb
            text = f"{head} {rest}"
            texts.extend(self.expander.expand_statement(text) if expand_rest else [text])
        return [self.parse_single(text) for text in unique_in_order(texts)]

    # --- "Research/Resolve order exceptions" ---

    def _detect_slash_verbs(self, text):
        match = SLASH_VERBS.match(text)
        if match and self.lexicon.is_verb(match.group("first")) and self.lexicon.is_verb(match.group("second")):
            return match
        return None

    def _build_slash_verbs(self, text, match):
        first, second, rest = match.group("first"), match.group("second"), match.group("rest")
        summary = ParsedStatement(
            original=text,
            predicate=_capitalize(first),
            object=f"and {second} {rest}",
        )
        return summary.with_expansions(self._expand_verbs([first, second], rest))

    # --- "Collect, synthesize, analyze, and report environmental data" ---

    def _detect_verb_list(self, text):
        match = self._verb_list.match(text)
        if not match:
            return None
        verbs = self._listed_verbs(match)
        rest_words = match.group("rest").split()
        # Only the lead verb must be listed; later ones may be missing from the lexicon
        if len(verbs) < 3 or not self.lexicon.is_verb(verbs[0]):
            return None
        if rest_words and self.lexicon.is_verb(rest_words[0]):
            return None
        return match

    @staticmethod
    def _listed_verbs(match) -> List[str]:
        verbs = [v.strip() for v in match.group("verbs").split(",") if v.strip()]
        return verbs + [match.group("last")]

    def _build_verb_list(self, text, match):
        verbs = self._listed_verbs(match)
        rest = match.group("rest")
        summary = ParsedStatement(
            original=text,
            predicate=verbs[0],
            object=" and ".join(verbs[1:]) + f" {rest}",
        )
        return summary.with_expansions(self._expand_verbs(verbs, rest))

    # --- "Prepare or present reports" ---

    def _detect_verb_pair(self, text):
        match = self._verb_pair.match(text)
        if match and self.lexicon.is_verb(match.group("first")) and self.lexicon.is_verb(match.group("second")):
            return match
        return None

    def _build_verb_pair(self, text, match):
        first, second, rest = match.group("first"), match.group("second"), match.group("rest")
        summary = ParsedStatement(
            original=text,
            predicate=_capitalize(first),
            object=f"{match.group('conj')} {second} {rest}",
        )
        return summary.with_expansions(self._expand_verbs([first, second], rest))

    # --- coordinated objects and complements ---

    def _build_coordinated(self, text, match):
        summary = self.parse_single(text)
        variants = self.expander.expand_statement(text)
        if len(variants) <= 1:
            return summary
        return summary.with_expansions([self.parse_single(v) for v in variants])


class GraphDLParser:
    """
    Facade over lexicon loading, parsing, serialization and unknown-word stats.

    initialize() must be called before parse() or to_graphdl().
    """

    def __init__(self, tracker: Optional[UnknownWordTracker] = None,
                 tables: HeuristicTables = DEFAULT_TABLES):
        self.tables = tables
        self.tracker = tracker if tracker is not None else UnknownWordTracker()
        self.lexicon: Optional[Lexicon] = None
        self._parser: Optional[StatementParser] = None

    @property
    def is_initialized(self) -> bool:
        return self._parser is not None

    def initialize(self, loader: Optional[LexiconLoader] = None) -> "GraphDLParser":
        self.lexicon = (loader or LexiconLoader()).load()
        self._parser = StatementParser(self.lexicon, self.tables)
        return self

    def _require_initialized(self) -> StatementParser:
        if self._parser is None:
            raise RuntimeError("Parser not initialized. Call initialize() first.")
        return self._parser

    def parse(self, text: str) -> ParsedStatement:
        statement = self._require_initialized().parse(text)
        self.tracker.add_parse(statement)
        return statement

    def to_graphdl(self, statement: ParsedStatement) -> str:
        self._require_initialized()
        return to_graphdl(statement, self.lexicon, self.tables)

    def get_unknown_words(self, limit: int = 100):
        return self.tracker.get_top_unknown(limit)

    def export_unknown_words(self, path) -> int:
        return self.tracker.export_tsv(path)
