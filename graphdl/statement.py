"""
ParsedStatement: the parse tree produced for one task statement.

A statement is either a leaf (no expansions; the slots describe a single
action) or an internal node whose expansions each describe one alternative
reading. Internal nodes keep a best-effort summary in their own slots.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, Optional, Sequence, Tuple


@dataclass(frozen=True)
class ParsedStatement:
    original: str
    predicate: Optional[str] = None
    object: Optional[str] = None
    preposition: Optional[str] = None
    complement: Optional[str] = None
    modifiers: Tuple[str, ...] = ()
    confidence: float = 1.0
    unknown_words: Tuple[str, ...] = ()
    has_conjunction: bool = False
    expansions: Tuple["ParsedStatement", ...] = field(default_factory=tuple)

    @property
    def is_leaf(self) -> bool:
        return not self.expansions

    def leaves(self) -> Iterator["ParsedStatement"]:
        """Yield every leaf below this node, depth first, in expansion order."""
        if self.is_leaf:
            yield self
            return
        for child in self.expansions:
            yield from child.leaves()

    def with_expansions(self, expansions: Sequence["ParsedStatement"]) -> "ParsedStatement":
        """Turn this statement into an internal node over the given children."""
        return replace(self, has_conjunction=True, expansions=tuple(expansions))

    def to_dict(self) -> Dict[str, object]:
        """JSON-friendly dict; unset slots are omitted."""
        result: Dict[str, object] = {"original": self.original}
        for name in ("predicate", "object", "preposition", "complement"):
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        if self.modifiers:
            result["modifiers"] = list(self.modifiers)
        result["confidence"] = self.confidence
        result["unknown_words"] = list(self.unknown_words)
        if self.has_conjunction:
            result["has_conjunction"] = True
        if self.expansions:
            result["expansions"] = [child.to_dict() for child in self.expansions]
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "ParsedStatement":
        if not isinstance(data, dict) or not data.get("original"):
            raise ValueError(f"Invalid statement node: {data!r}")
        expansions = tuple(cls.from_dict(child) for child in data.get("expansions", []))
        return cls(
            original=data["original"],
            predicate=data.get("predicate"),
            object=data.get("object"),
            preposition=data.get("preposition"),
            complement=data.get("complement"),
            modifiers=tuple(data.get("modifiers", ())),
            confidence=data.get("confidence", 1.0),
            unknown_words=tuple(data.get("unknown_words", ())),
            has_conjunction=bool(data.get("has_conjunction", bool(expansions))),
            expansions=expansions,
        )
