"""Core search engine functionality."""

from .edit_distance import distance, within_distance
from .engine import SearchEngine, search_records
from .matcher import FIELD_RULES, FUZZY_THRESHOLD, FieldRule, MatchEngine, match
from .ranker import rank
from .tokenizer import STOP_WORDS, Tokenizer, tokenize

__all__ = [
    "SearchEngine",
    "search_records",
    "MatchEngine",
    "FieldRule",
    "FIELD_RULES",
    "FUZZY_THRESHOLD",
    "Tokenizer",
    "STOP_WORDS",
    "distance",
    "within_distance",
    "match",
    "rank",
    "tokenize",
]
