"""String similarity primitives for typo-tolerant description matching."""

from typing import Optional, Sequence, Set, Tuple

from rapidfuzz.distance import Levenshtein

from .normalizer import Token


class FuzzyMatcher:
    """Scores words against each other with edit-distance and bigram similarity."""
    
    def __init__(self, threshold: float = 0.6, enable_ngram: bool = True, ngram_size: int = 2) -> None:
        """
        Initialize the fuzzy matcher.
        
        Args:
            threshold: Minimum similarity for a word to count as matched
            enable_ngram: Whether to also consider n-gram similarity
            ngram_size: Length of the character n-grams
        """
        self.threshold = threshold
        self.enable_ngram = enable_ngram
        self.ngram_size = ngram_size
    
    @staticmethod
    def edit_distance(source: str, target: str) -> int:
        """Levenshtein distance with unit insertion, deletion and substitution costs."""
        return Levenshtein.distance(source, target)
    
    def levenshtein_similarity(self, source: str, target: str) -> float:
        """
        Edit distance scaled to a similarity in [0, 1].
        
        Args:
            source: First word
            target: Second word
            
        Returns:
            (max_len - distance) / max_len, or 1.0 for two empty strings
        """
        max_len = max(len(source), len(target))
        if max_len == 0:
            return 1.0
        return (max_len - self.edit_distance(source, target)) / max_len
    
    def get_ngrams(self, text: str) -> Set[str]:
        """
        Extract the set of character n-grams of a word.
        
        The word is padded with ``n - 1`` spaces on both sides so its first
        and last characters form boundary n-grams.
        """
        n = self.ngram_size
        padding = " " * (n - 1)
        padded = f"{padding}{text}{padding}"
        return {padded[i:i + n] for i in range(len(padded) - n + 1)}
    
    def ngram_similarity(self, source: str, target: str) -> float:
        """
        Jaccard similarity of the two words' n-gram sets.
        
        Args:
            source: First word
            target: Second word
            
        Returns:
            |intersection| / |union|, 1.0 when both sets are empty
        """
        ngrams_source = self.get_ngrams(source)
        ngrams_target = self.get_ngrams(target)
        
        if not ngrams_source and not ngrams_target:
            return 1.0
        if not ngrams_source or not ngrams_target:
            return 0.0
        
        intersection = len(ngrams_source & ngrams_target)
        union = len(ngrams_source | ngrams_target)
        return intersection / union
    
    def find_best_token(
        self,
        query_word: str,
        candidates: Sequence[Token],
    ) -> Optional[Tuple[Token, float]]:
        """
        Find the candidate token most similar to a query word.
        
        Each candidate scores the higher of its Levenshtein and (when enabled)
        n-gram similarity. Scores below the threshold are ignored and the
        earliest candidate wins ties.
        
        Args:
            query_word: Normalized query word
            candidates: Normalized description tokens
            
        Returns:
            Tuple of (best_token, similarity) or None
        """
        best_token = None
        best_score = 0.0
        
        for candidate in candidates:
            similarity = self.levenshtein_similarity(query_word, candidate.text)
            if self.enable_ngram:
                similarity = max(similarity, self.ngram_similarity(query_word, candidate.text))
            
            if similarity > best_score and similarity >= self.threshold:
                best_token = candidate
                best_score = similarity
        
        if best_token is None:
            return None
        
        return best_token, best_score
