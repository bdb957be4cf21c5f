"""
Unknown Word Tracker for lexicon expansion.

Counts words the tagger could not classify across many parses, so the most
frequent ones can be reviewed and added to the verb or concept tables.
"""

import logging
import threading
from collections import Counter
from pathlib import Path
from typing import Dict, List, Tuple

from graphdl.statement import ParsedStatement

logger = logging.getLogger(__name__)

TSV_HEADER = "word\tfrequency\tsuggested_pos"


class UnknownWordTracker:
    """
    Thread-safe frequency table of unknown words.

    Usage:
        tracker = UnknownWordTracker()
        tracker.add_parse(parser.parse("Onboard new hires"))
        tracker.export_tsv("unknown_words.tsv")
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: Counter = Counter()

    def log(self, word: str) -> None:
        """Record one occurrence of an unknown word."""
        if not word:
            return
        with self._lock:
            self._counts[word] += 1

    def add_parse(self, statement: ParsedStatement) -> None:
        """Record the unknown words of a statement and of every expansion below it."""
        for word in statement.unknown_words:
            self.log(word)
        for child in statement.expansions:
            self.add_parse(child)

    def get_top_unknown(self, limit: int = 100) -> List[Tuple[str, int]]:
        """(word, frequency) pairs, most frequent first; ties keep first-seen order."""
        with self._lock:
            ranked = sorted(self._counts.items(), key=lambda x: x[1], reverse=True)
        return ranked[:limit]

    def export_tsv(self, path: Path, limit: int = 1000) -> int:
        """
        Write the most frequent unknown words as TSV.

        Columns: word, frequency, suggested_pos (NOUN when capitalized,
        VERB otherwise). Returns the number of data rows written.
        """
        rows = self.get_top_unknown(limit)
        lines = [TSV_HEADER]
        for word, count in rows:
            lines.append(f"{word}\t{count}\t{suggest_pos(word)}")

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write("\n".join(lines))

        logger.info(f"Exported {len(rows)} unknown words to {path}")
        return len(rows)

    def get_stats(self) -> Dict:
        """Summary numbers for batch logging."""
        with self._lock:
            counts = list(self._counts.values())
        return {
            'total_unknown_words': len(counts),
            'total_occurrences': sum(counts),
            'words_seen_10plus': sum(1 for c in counts if c >= 10),
        }


def suggest_pos(word: str) -> str:
    return "NOUN" if word[:1].isupper() else "VERB"
