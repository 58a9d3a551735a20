"""Core search engine functionality."""

from .cache import QueryCache
from .code_matcher import CodeMatcher
from .description_matcher import DescriptionMatcher
from .engine import SearchEngine
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import NormalizedText, TextNormalizer, Token
from .ranker import Ranker

__all__ = [
    "SearchEngine",
    "CodeMatcher",
    "DescriptionMatcher",
    "FuzzyMatcher",
    "TextNormalizer",
    "NormalizedText",
    "Token",
    "Ranker",
    "QueryCache",
]
