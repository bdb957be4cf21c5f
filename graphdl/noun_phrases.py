"""
Occupational-title expander.

Splits coordinated job titles into one title per role:

    "Excavating and Loading Machine and Dragline Operators, Surface Mining"
        -> "Excavating Machine Operators, Surface Mining"
           "Loading Machine Operators, Surface Mining"
           "Dragline Operators, Surface Mining"

    "Radio, Cellular, and Tower Equipment Installers and Repairers"
        -> "Radio Equipment Installers", "Radio Equipment Repairers", ...

Works on the title's own structure (modifiers, head nouns, trailing context)
and is independent of the statement parser.
"""
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

# Nouns that end an occupation title and name the role itself
HEAD_NOUNS = {
    'operators', 'operator',
    'installers', 'installer',
    'repairers', 'repairer',
    'technicians', 'technician',
    'specialists', 'specialist',
    'managers', 'manager',
    'supervisors', 'supervisor',
    'workers', 'worker',
    'assistants', 'assistant',
    'clerks', 'clerk',
    'inspectors', 'inspector',
    'testers', 'tester',
    'analysts', 'analyst',
    'engineers', 'engineer',
    'scientists', 'scientist',
    'representatives', 'representative',
    'attendants', 'attendant',
    'aides', 'aide',
    'therapists', 'therapist',
    'instructors', 'instructor',
    'mechanics', 'mechanic',
    'drivers', 'driver',
    'assemblers', 'assembler',
    'fabricators', 'fabricator',
    'setters', 'setter',
    'tenders', 'tender',
    'handlers', 'handler',
    'loaders', 'loader',
    'movers', 'mover',
    'packers', 'packer',
    'sorters', 'sorter',
}

CONTEXT_PATTERN = re.compile(r",\s*([A-Z][a-z]+(?:\s+[A-Z]?[a-z]+){0,2})$")
COMMA_AND_SPLIT = re.compile(r",\s*(?:and\s+)?", re.IGNORECASE)
AND_SPLIT = re.compile(r"\s+and\s+", re.IGNORECASE)
AND_PAIR = re.compile(r"^(.+?)\s+and\s+(.+)$", re.IGNORECASE)

STRUCTURE_SIMPLE = "simple"
STRUCTURE_COMPOUND = "compound"
STRUCTURE_COORDINATED = "coordinated"


@dataclass(frozen=True)
class NounPhraseExpansion:
    original: str
    expansions: List[str]
    structure: str
    head_noun: Optional[str] = None
    context_modifier: Optional[str] = None


class NounPhraseExpander:
    def expand(self, phrase: str) -> NounPhraseExpansion:
        original = phrase.strip()
        main, context = self.extract_context_modifier(original)
        heads = self.find_head_nouns(main)

        if not heads:
            return NounPhraseExpansion(
                original=original,
                expansions=_with_context(self._simple_expand(main), context),
                structure=STRUCTURE_SIMPLE,
                context_modifier=context,
            )

        if len(heads) > 1:
            # "Installers and Repairers": one title per modifier and per role
            modifier_part = main[:_word_index(main, heads[0])].strip()
            titles = [
                f"{modifier} {head}" if modifier else head
                for modifier in self._expand_modifier_list(modifier_part)
                for head in heads
            ]
            return NounPhraseExpansion(
                original=original,
                expansions=_with_context(titles, context) or [main],
                structure=STRUCTURE_COMPOUND,
                head_noun=" and ".join(heads),
                context_modifier=context,
            )

        head = heads[0]
        modifier_part = main[:_word_index(main, head)].strip()
        titles = [
            f"{modifier} {head}" if modifier else head
            for modifier in self._expand_nested_modifiers(modifier_part)
        ]
        return NounPhraseExpansion(
            original=original,
            expansions=_with_context(titles, context) or [main],
            structure=STRUCTURE_COORDINATED,
            head_noun=head,
            context_modifier=context,
        )

    def extract_context_modifier(self, phrase: str) -> Tuple[str, Optional[str]]:
        """
        Split off a trailing ", Context Words" qualifier.

        "Operators, Surface Mining" -> ("Operators", "Surface Mining"). A trailing
        item ending in a head noun is a list item, not a context.
        """
        match = CONTEXT_PATTERN.search(phrase)
        if match:
            context = match.group(1).strip()
            if context.lower().split()[-1] not in HEAD_NOUNS:
                return phrase[:phrase.rfind(",")].strip(), context
        return phrase, None

    def find_head_nouns(self, phrase: str) -> List[str]:
        heads = []
        for word in phrase.split():
            word = word.replace(",", "")
            if word.lower() in HEAD_NOUNS:
                heads.append(word)
        return heads

    def _simple_expand(self, phrase: str) -> List[str]:
        if "," in phrase:
            parts = COMMA_AND_SPLIT.split(phrase)
        elif AND_SPLIT.search(phrase):
            parts = AND_SPLIT.split(phrase)
        else:
            parts = [phrase]
        return [p.strip() for p in parts if p.strip()]

    def _expand_nested_modifiers(self, modifiers: str) -> List[str]:
        """
        "Excavating and Loading Machine and Dragline"
            -> ["Excavating Machine", "Loading Machine", "Dragline"]

        A single word borrows the trailing words of the multi-word part after it.
        """
        if not modifiers:
            return [""]

        parts = [p.strip() for p in AND_SPLIT.split(modifiers)]
        if len(parts) <= 1:
            if "," in modifiers:
                return self._expand_comma_list(modifiers)
            return [modifiers]

        results = []
        for i, part in enumerate(parts):
            if len(part.split()) == 1 and i < len(parts) - 1:
                following = parts[i + 1].split()
                if len(following) >= 2:
                    results.append(f"{part} {' '.join(following[1:])}")
                    continue
            results.append(part)
        return results

    def _expand_modifier_list(self, modifiers: str) -> List[str]:
        if not modifiers:
            return [""]
        if "," in modifiers:
            return self._expand_comma_list(modifiers)
        if AND_SPLIT.search(modifiers):
            return self._expand_and_pattern(modifiers)
        return [modifiers]

    def _expand_comma_list(self, modifiers: str) -> List[str]:
        """"Radio, Cellular, and Tower Equipment" -> ["Radio Equipment", ..., "Tower Equipment"]."""
        parts = [p.strip() for p in COMMA_AND_SPLIT.split(modifiers) if p.strip()]
        if len(parts) <= 1:
            return [modifiers]

        last_words = parts[-1].split()
        others = parts[:-1]
        if len(last_words) >= 2 and all(len(p.split()) <= 2 for p in others):
            suffix = last_words[-1]
            prefix = " ".join(last_words[:-1])
            return [f"{p} {suffix}" for p in others] + [f"{prefix} {suffix}"]
        return parts

    def _expand_and_pattern(self, modifiers: str) -> List[str]:
        """"Excavating and Loading Machine" -> ["Excavating Machine", "Loading Machine"]."""
        match = AND_PAIR.match(modifiers)
        if not match:
            return [modifiers]

        left, right = match.groups()
        left_words, right_words = left.split(), right.split()
        if len(right_words) >= 2 and left_words[-1].lower() != right_words[-1].lower():
            suffix_len = 1
            if len(right_words) >= 3 and len(left_words) <= 2:
                suffix_len = len(right_words) - 1
            suffix = " ".join(right_words[-suffix_len:])
            right_prefix = " ".join(right_words[:-suffix_len])
            results = [f"{left_exp} {suffix}" for left_exp in self._expand_modifier_list(left)]
            results.append(f"{right_prefix} {suffix}")
            return results

        return [left, right]


def _word_index(phrase: str, word: str) -> int:
    match = re.search(r"\b" + re.escape(word) + r"\b", phrase, re.IGNORECASE)
    return match.start() if match else 0


def _with_context(titles: List[str], context: Optional[str]) -> List[str]:
    if context:
        return [f"{title}, {context}" for title in titles]
    return titles


def expand_noun_phrase(phrase: str) -> List[str]:
    return NounPhraseExpander().expand(phrase).expansions
