"""
Coordinate expansion: one coordinated phrase -> its uncoordinated alternatives.

    expand("plans, procedures, and guidelines")
        -> ["plans", "procedures", "guidelines"]
    expand_statement("Inspect generation or mechanical equipment")
        -> ["Inspect generation equipment", "Inspect mechanical equipment"]

Both entry points walk an ordered rule list; the first rule whose detector
fires and whose resolver does not decline determines the whole result.
Every recursive call is made on a strictly smaller phrase (fewer coordination
markers, then fewer words), which bounds the recursion.
"""
import logging
import re
from collections import namedtuple
from itertools import product
from typing import Callable, List, Optional, Tuple

from graphdl.heuristics import DEFAULT_TABLES, HeuristicTables
from graphdl.lexicon import Lexicon

logger = logging.getLogger(__name__)

Rule = namedtuple("Rule", ["name", "detect", "resolve"])

SUCH_AS = re.compile(r"\bsuch\s+as\b", re.IGNORECASE)
SUCH_AS_SPLIT = re.compile(r"^(.+?)\s+such\s+as\s+(.+)$", re.IGNORECASE)
SLASH_SPLIT = re.compile(r"\s*/\s*")
BOTH_PREFIX = re.compile(r"^both\s+", re.IGNORECASE)


def unique_in_order(items: List[str]) -> List[str]:
    """Drop repeated alternatives, keeping the first occurrence."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


class CoordinationExpander:
    def __init__(self, lexicon: Lexicon, tables: HeuristicTables = DEFAULT_TABLES):
        self.lexicon = lexicon
        self.tables = tables

        coordinators = lexicon.coordinators()
        if not coordinators:
            raise ValueError("Lexicon has no conjunction with a 'cartesian' expansion policy")
        self._coordinators = frozenset(word.lower() for word in coordinators)
        conj = "|".join(re.escape(word) for word in sorted(coordinators))
        preps = "|".join(re.escape(word) for word in tables.complement_prepositions)
        flags = re.IGNORECASE

        self._coord_word = re.compile(rf"\b(?:{conj})\b", flags)
        self._example_split = re.compile(rf"\s*,\s*(?:(?:{conj})\s+)?|\s+(?:{conj})\s+", flags)
        self._conj_split = re.compile(rf"\s+(?:{conj})\s+", flags)
        self._oxford = re.compile(
            rf"^(?P<first>.+?),\s*(?P<middle>.+?),?\s*\b(?:{conj})\s+(?P<last>.+)$", flags)
        self._shared_suffix = re.compile(
            rf"^(?P<left>.+?)\s+(?:{conj})\s+(?P<middle>\S+)\s+(?P<suffix>.+)$", flags)
        self._simple = re.compile(rf"^(?P<left>.+?)\s+(?:{conj})\s+(?P<right>.+)$", flags)

        self._verb_complement = re.compile(
            rf"^(?P<verb>\w+)\s+(?P<object>.+?)\s+(?P<prep>{preps})\s+(?P<complement>.+)$", flags)
        self._verb_comma_list = re.compile(r"^(?P<verb>\w+)\s+(?P<rest>.+?,\s*.+)$")
        self._verb_rest = re.compile(r"^(?P<verb>\w+)\s+(?P<rest>.+)$")
        self._verb_shared_suffix = re.compile(
            rf"^(?P<verb>\w+)\s+(?P<left>.+?)\s+(?:{conj})\s+(?P<middle>\S+)\s+(?P<suffix>.+)$", flags)
        self._verb_simple = re.compile(
            rf"^(?P<verb>\w+)\s+(?P<left>.+?)\s+(?:{conj})\s+(?P<right>.+)$", flags)
        self._verb_such_as = re.compile(r"^(?P<verb>\w+)\s+(?P<rest>.+?\s+such\s+as\s+.+)$", flags)

        self.phrase_rules: Tuple[Rule, ...] = (
            Rule("such_as", self._detect_such_as, self._resolve_such_as),
            Rule("slash", self._detect_slash, self._resolve_slash),
            Rule("connector", self._detect_connector, self._resolve_connector),
            Rule("oxford_list", self._oxford.match, self._resolve_oxford),
            Rule("comma_list", self._detect_comma_list, self._resolve_comma_list),
            Rule("plain", self._detect_plain, lambda phrase, _: [phrase]),
            Rule("correlative", BOTH_PREFIX.match, self._resolve_correlative),
            Rule("shared_suffix", self._shared_suffix.match, self._resolve_shared_suffix),
            Rule("simple", self._simple.match, self._resolve_simple),
        )
        self.statement_rules: Tuple[Rule, ...] = (
            Rule("verb_complement", self._verb_match(self._verb_complement), self._resolve_verb_complement),
            Rule("verb_comma_list", self._verb_match(self._verb_comma_list), self._resolve_verb_list),
            Rule("verb_slash", self._detect_verb_slash, self._resolve_verb_slash),
            Rule("verb_shared_suffix", self._verb_match(self._verb_shared_suffix), self._resolve_verb_shared_suffix),
            Rule("verb_simple", self._verb_match(self._verb_simple), self._resolve_verb_simple),
            Rule("verb_such_as", self._verb_match(self._verb_such_as), self._resolve_verb_list),
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def expand(self, phrase: str) -> List[str]:
        """Expand an isolated noun or complement phrase."""
        return self._dispatch(self.phrase_rules, phrase)

    def expand_statement(self, text: str) -> List[str]:
        """Expand a whole statement led by a lexicon verb, keeping the verb on every result."""
        return self._dispatch(self.statement_rules, text)

    def has_coordination(self, text: str) -> bool:
        """True if text holds and/or, a comma, a slash or "such as"."""
        return bool(
            self._coord_word.search(text)
            or "," in text
            or "/" in text
            or SUCH_AS.search(text)
        )

    def complexity(self, text: str) -> Tuple[int, int]:
        markers = (
            len(self._coord_word.findall(text))
            + text.count(",")
            + text.count("/")
            + len(SUCH_AS.findall(text))
        )
        return markers, len(text.split())

    # ------------------------------------------------------------------
    # Dispatch and recursion guard
    # ------------------------------------------------------------------

    def _dispatch(self, rules: Tuple[Rule, ...], text: str) -> List[str]:
        for rule in rules:
            match = rule.detect(text)
            if not match:
                continue
            result = rule.resolve(text, match)
            if result is None:
                continue
            result = unique_in_order(result)
            if len(result) > 1:
                logger.debug(f"Rule '{rule.name}' expanded '{text}' into {len(result)} alternatives")
            return result
        return [text]

    def _recurse(self, child: str, parent: str,
                 expand_fn: Optional[Callable[[str], List[str]]] = None) -> List[str]:
        child = child.strip()
        if not child:
            return []
        if self.complexity(child) < self.complexity(parent):
            return (expand_fn or self.expand)(child)
        logger.debug(f"Not re-expanding '{child}': no smaller than '{parent}'")
        return [child]

    def _recurse_all(self, children: List[str], parent: str,
                     expand_fn: Optional[Callable[[str], List[str]]] = None) -> List[str]:
        results: List[str] = []
        for child in children:
            results.extend(self._recurse(child, parent, expand_fn))
        return results

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def split_such_as(self, phrase: str) -> List[str]:
        """"X such as A, B, or C" -> ["X", "A", "B", "C"]."""
        match = SUCH_AS_SPLIT.match(phrase)
        if not match:
            return [phrase]
        prefix = re.sub(r",\s*$", "", match.group(1).strip())
        examples = [p.strip() for p in self._example_split.split(match.group(2)) if p.strip()]
        return [prefix] + examples

    def split_slash(self, text: str) -> List[str]:
        """Distribute the words around a slash group: "a b/c d" -> ["a b d", "a c d"]."""
        words = text.split()
        slashed = [i for i, word in enumerate(words) if "/" in word]
        if not slashed:
            return [text]
        first, last = slashed[0], slashed[-1]
        prefix, suffix = words[:first], words[last + 1:]
        alternatives = [a for a in SLASH_SPLIT.split(" ".join(words[first:last + 1])) if a]
        return [" ".join(prefix + [alt] + suffix) for alt in alternatives]

    def is_concept_pair(self, middle: str, suffix: str) -> bool:
        middle, suffix = middle.lower(), suffix.lower()
        candidates = (
            f"{middle.replace('-', ' ')} {suffix}",
            f"{middle.replace('-', '')}{suffix.replace(' ', '')}",
            f"{middle}-{suffix}",
        )
        return any(self.lexicon.is_concept(c) for c in candidates)

    def _suppress_shared_suffix(self, left: str, middle: str, suffix: str, anchored: bool) -> bool:
        # "A or B or C": the tail is another conjunct, not a shared suffix
        words = suffix.split()
        if words and words[0].lower() in self._coordinators:
            return True
        if middle.lower() in self.lexicon.determiners:
            return True
        if self.is_concept_pair(middle, suffix):
            return True
        if anchored and self.tables.is_scoped_modifier(middle):
            return True
        if self.tables.is_compound_phrase(middle, suffix):
            return True
        left_is_verb = len(left.split()) == 1 and self.lexicon.is_verb(left)
        if self.lexicon.is_verb(middle) and not left_is_verb:
            return True
        return False

    def _distribute_suffix(self, lefts: List[str], middles: List[str], suffix: str) -> List[str]:
        results = []
        for left in lefts:
            words = left.split()
            if words and words[-1].lower() == suffix.lower():
                results.append(left)
            else:
                results.append(f"{left} {suffix}")
        results.extend(f"{middle} {suffix}" for middle in middles)
        return results

    def _split_conjoined(self, text: str) -> List[str]:
        match = self._simple.match(text)
        if not match:
            return [text]
        return [match.group("left").strip(), match.group("right").strip()]

    def _split_object_list(self, text: str) -> List[str]:
        match = self._oxford.match(text)
        if match:
            items = [match.group("first")] + match.group("middle").split(",") + [match.group("last")]
            return [item.strip() for item in items if item.strip()]
        if self._coord_word.search(text):
            return [p.strip() for p in self._conj_split.split(text) if p.strip()]
        if "," in text:
            return [p.strip() for p in text.split(",") if p.strip()]
        return [text]

    # ------------------------------------------------------------------
    # Phrase rules
    # ------------------------------------------------------------------

    def _detect_such_as(self, phrase):
        return SUCH_AS.search(phrase) and SUCH_AS_SPLIT.match(phrase)

    def _resolve_such_as(self, phrase, match):
        return self._recurse_all(self.split_such_as(phrase), phrase)

    def _detect_slash(self, phrase):
        return "/" in phrase and not self._coord_word.search(phrase)

    def _resolve_slash(self, phrase, match):
        alternatives = self.split_slash(phrase)
        if len(alternatives) <= 1:
            return None
        return self._recurse_all(alternatives, phrase)

    def _detect_connector(self, phrase):
        if not self._coord_word.search(phrase):
            return None
        for connector in self.tables.connector_phrases:
            found = re.search(rf"\b{re.escape(connector)}\b", phrase, re.IGNORECASE)
            if found:
                return found
        return None

    def _resolve_connector(self, phrase, match):
        subject = phrase[:match.start()].strip()
        target = phrase[match.end():].strip()
        connector = match.group(0)

        if not self._coord_word.search(subject) or "," in subject:
            return None
        if "," not in target and not self._coord_word.search(target):
            return None

        subjects = self._split_conjoined(subject)
        targets = self._split_object_list(target)
        if len(subjects) <= 1 and len(targets) <= 1:
            return None
        return [f"{s} {connector} {t}" for s, t in product(subjects, targets)]

    def _resolve_oxford(self, phrase, match):
        items = [match.group("first")] + match.group("middle").split(",") + [match.group("last")]
        return self._recurse_all(items, phrase)

    def _detect_comma_list(self, phrase):
        return "," in phrase and not self._coord_word.search(phrase)

    def _resolve_comma_list(self, phrase, match):
        items = [p for p in phrase.split(",") if p.strip()]
        if len(items) <= 1:
            return None
        return self._recurse_all(items, phrase)

    def _detect_plain(self, phrase):
        return not self._coord_word.search(phrase)

    def _resolve_correlative(self, phrase, match):
        return self._recurse(phrase[match.end():], phrase)

    def _resolve_shared_suffix(self, phrase, match):
        left, middle, suffix = match.group("left"), match.group("middle"), match.group("suffix")
        if self._suppress_shared_suffix(left, middle, suffix, anchored=False):
            return None
        results = self._distribute_suffix(
            self._recurse(left, phrase), self._recurse(middle, phrase), suffix)
        if self.has_coordination(suffix):
            results = self._recurse_all(results, phrase)
        return results

    def _resolve_simple(self, phrase, match):
        return self._recurse_all([match.group("left"), match.group("right")], phrase)

    # ------------------------------------------------------------------
    # Statement rules (verb-anchored)
    # ------------------------------------------------------------------

    def _verb_match(self, pattern):
        def detect(text):
            match = pattern.match(text)
            if match and self.lexicon.is_verb(match.group("verb")):
                return match
            return None
        return detect

    def _resolve_verb_complement(self, text, match):
        verb, prep = match.group("verb"), match.group("prep")
        objects = self._recurse(match.group("object"), text)
        complements = self._recurse(match.group("complement"), text)
        return [f"{verb} {o} {prep} {c}" for o, c in product(objects, complements)]

    def _resolve_verb_list(self, text, match):
        items = self._recurse(match.group("rest"), text)
        if len(items) <= 1:
            return None
        return [f"{match.group('verb')} {item}" for item in items]

    def _detect_verb_slash(self, text):
        if "/" not in text or self._coord_word.search(text):
            return None
        return self._verb_match(self._verb_rest)(text)

    def _resolve_verb_slash(self, text, match):
        alternatives = self.split_slash(match.group("rest"))
        if len(alternatives) <= 1:
            return None
        return [f"{match.group('verb')} {alt}" for alt in alternatives]

    def _resolve_verb_shared_suffix(self, text, match):
        verb = match.group("verb")
        left, middle, suffix = match.group("left"), match.group("middle"), match.group("suffix")
        if self._suppress_shared_suffix(left, middle, suffix, anchored=True):
            return None
        combined = self._distribute_suffix(
            self._recurse(left, text), self._recurse(middle, text), suffix)
        results = [f"{verb} {phrase}" for phrase in combined]
        if self.has_coordination(suffix):
            results = self._recurse_all(results, text, self.expand_statement)
        return results

    def _resolve_verb_simple(self, text, match):
        verb = match.group("verb")
        parts = self._recurse_all([match.group("left"), match.group("right")], text)
        return [f"{verb} {part}" for part in parts]
