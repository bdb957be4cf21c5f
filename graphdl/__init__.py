# This file makes the 'graphdl' directory a Python package.

from graphdl.expander import CoordinationExpander
from graphdl.heuristics import HeuristicTables
from graphdl.lexicon import Lexicon, LexiconLoader, load_lexicon
from graphdl.noun_phrases import NounPhraseExpander, NounPhraseExpansion, expand_noun_phrase
from graphdl.parser import GraphDLParser, StatementParser
from graphdl.serializer import to_graphdl, to_pascal_case
from graphdl.statement import ParsedStatement
from graphdl.unknown_tracker import UnknownWordTracker

__all__ = [
    'CoordinationExpander',
    'HeuristicTables',
    'Lexicon',
    'LexiconLoader',
    'load_lexicon',
    'NounPhraseExpander',
    'NounPhraseExpansion',
    'expand_noun_phrase',
    'GraphDLParser',
    'StatementParser',
    'to_graphdl',
    'to_pascal_case',
    'ParsedStatement',
    'UnknownWordTracker',
]
