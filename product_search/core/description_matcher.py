"""Matching of queries against product descriptions.

Four strategies are tried in a fixed order and the first one that produces a
result wins:

1. exact substring of the whole query
2. query words contained in description words
3. fuzzy word similarity (Levenshtein and bigram Jaccard)
4. crude root matching ("semantic"), when enabled
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from ..config.search_config import SearchConfig
from ..models.match import HighlightRange, MatchKind, SearchResult
from ..models.product import Product
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import NormalizedText, TextNormalizer, Token

EXACT_SUBSTRING_BASE_SCORE = 6000.0
EXACT_SUBSTRING_SPAN_SCORE = 1000.0
WORD_EXACT_BASE_SCORE = 5000.0
WORD_EXACT_WORD_SCORE = 200.0
FUZZY_WORD_SCORE = 800.0
SEMANTIC_ROOT_SCORE = 150.0
SEMANTIC_MIN_SCORE = 100.0

MIN_WORD_LENGTH = 2
MIN_SEMANTIC_WORD_LENGTH = 3
MIN_ROOT_LENGTH = 3


@dataclass(frozen=True)
class DescriptionContext:
    """Everything a strategy needs to score one product against one query."""
    
    product: Product
    description: NormalizedText
    tokens: List[Token]
    query: str
    query_words: List[str]

    def highlight(self, start: int, end: int) -> HighlightRange:
        """Build a highlight range in original description coordinates."""
        source_start, source_end = self.description.to_source_span(start, end)
        return HighlightRange(start=source_start, end=source_end)

    def result(
        self,
        score: float,
        match_kind: MatchKind,
        highlight_ranges: Optional[List[HighlightRange]] = None,
    ) -> SearchResult:
        """Wrap a strategy's score and spans into a result for this product."""
        return SearchResult(
            product=self.product,
            score=score,
            match_kind=match_kind,
            matched_text=self.product.description,
            highlight_ranges=tuple(highlight_ranges or ()),
        )


Strategy = Callable[[DescriptionContext], Optional[SearchResult]]


def root_of(word: str) -> str:
    """Crude stem: drop up to two trailing characters, keeping at least three."""
    return word[:max(MIN_ROOT_LENGTH, len(word) - 2)]


class DescriptionMatcher:
    """Runs the description strategies in precedence order."""
    
    def __init__(self, config: SearchConfig, normalizer: Optional[TextNormalizer] = None) -> None:
        """
        Initialize the description matcher.
        
        Args:
            config: Engine configuration
            normalizer: Shared text normalizer
        """
        self.config = config
        self.normalizer = normalizer or TextNormalizer()
        self.fuzzy_matcher = FuzzyMatcher(
            threshold=config.fuzzy_threshold,
            enable_ngram=config.enable_ngram,
        )
        
        self.strategies: List[Strategy] = [
            self.match_exact_substring,
            self.match_word_exact,
            self.match_fuzzy,
        ]
        if config.enable_semantic:
            self.strategies.append(self.match_semantic)
    
    def build_context(self, product: Product, query: str) -> DescriptionContext:
        """Normalize a product description and tokenize both sides."""
        description = self.normalizer.normalize_with_offsets(product.description)
        return DescriptionContext(
            product=product,
            description=description,
            tokens=self.normalizer.tokenize(description.text),
            query=query,
            query_words=[token.text for token in self.normalizer.tokenize(query)],
        )
    
    def match(self, product: Product, query: str) -> Optional[SearchResult]:
        """
        Match a normalized query against a product description.
        
        Args:
            product: Catalog record
            query: Normalized, non-empty query
            
        Returns:
            Result of the first strategy that matches, or None
        """
        if not query:
            return None
        
        context = self.build_context(product, query)
        if not context.description.text:
            return None
        
        for strategy in self.strategies:
            result = strategy(context)
            if result is not None:
                return result
        
        return None
    
    def match_exact_substring(self, context: DescriptionContext) -> Optional[SearchResult]:
        """The whole query appears verbatim in the description."""
        description = context.description.text
        start = description.find(context.query)
        if start < 0:
            return None
        
        score = EXACT_SUBSTRING_BASE_SCORE + (
            len(context.query) / len(description) * EXACT_SUBSTRING_SPAN_SCORE
        )
        return context.result(
            score,
            MatchKind.DESCRIPTION_EXACT,
            [context.highlight(start, start + len(context.query))],
        )
    
    def match_word_exact(self, context: DescriptionContext) -> Optional[SearchResult]:
        """Query words appear inside description words."""
        score = 0.0
        ranges: List[HighlightRange] = []
        
        for query_word in context.query_words:
            if len(query_word) < MIN_WORD_LENGTH:
                continue
            
            for token in context.tokens:
                if query_word in token.text:
                    score += len(query_word) / len(token.text) * WORD_EXACT_WORD_SCORE
                    ranges.append(context.highlight(token.start, token.end))
        
        if score <= 0:
            return None
        
        return context.result(WORD_EXACT_BASE_SCORE + score, MatchKind.DESCRIPTION_EXACT, ranges)
    
    def match_fuzzy(self, context: DescriptionContext) -> Optional[SearchResult]:
        """Query words are close to description words."""
        score = 0.0
        ranges: List[HighlightRange] = []
        
        for query_word in context.query_words:
            if len(query_word) < MIN_WORD_LENGTH:
                continue
            
            best = self.fuzzy_matcher.find_best_token(query_word, context.tokens)
            if best is None:
                continue
            
            token, similarity = best
            score += similarity * FUZZY_WORD_SCORE
            ranges.append(context.highlight(token.start, token.end))
        
        if score <= 0 or score < self.config.fuzzy_threshold * 1000:
            return None
        
        return context.result(score, MatchKind.DESCRIPTION_FUZZY, ranges)
    
    def match_semantic(self, context: DescriptionContext) -> Optional[SearchResult]:
        """Query words share a crude root with description words."""
        score = 0.0
        
        for query_word in context.query_words:
            if len(query_word) < MIN_SEMANTIC_WORD_LENGTH:
                continue
            
            query_root = root_of(query_word)
            for token in context.tokens:
                description_root = root_of(token.text)
                if description_root in query_root or query_root in description_root:
                    score += SEMANTIC_ROOT_SCORE
        
        if score <= SEMANTIC_MIN_SCORE:
            return None
        
        return context.result(score, MatchKind.DESCRIPTION_SEMANTIC)
