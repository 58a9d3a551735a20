"""Text normalization utilities for consistent query and description matching."""

import re
import unicodedata
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited word and its position in the normalized text."""
    
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class NormalizedText:
    """
    Normalized text plus a map back to the source string.
    
    ``offsets[i]`` is the index in the source string of the character that
    produced ``text[i]``.
    """
    
    text: str
    offsets: Tuple[int, ...]

    def to_source_span(self, start: int, end: int) -> Tuple[int, int]:
        """
        Translate a ``[start, end)`` span of ``text`` into source offsets.
        
        Args:
            start: Inclusive start in normalized text
            end: Exclusive end in normalized text (must be > start)
            
        Returns:
            Tuple of (source_start, source_end)
        """
        return self.offsets[start], self.offsets[end - 1] + 1


class TextNormalizer:
    """Handles text normalization for consistent word processing."""
    
    def __init__(self) -> None:
        """Initialize the normalizer."""
        self.token_regex = re.compile(r'\S+')
    
    def normalize(self, text: str) -> str:
        """
        Normalize text for comparison.
        
        Lowercases, strips diacritical marks and trims surrounding whitespace.
        
        Args:
            text: Input text to normalize
            
        Returns:
            Normalized text
        """
        return self.normalize_with_offsets(text).text
    
    def normalize_with_offsets(self, text: str) -> NormalizedText:
        """
        Normalize text and remember where each output character came from.
        
        Args:
            text: Input text to normalize
            
        Returns:
            NormalizedText with the source offset of every character
        """
        if not text:
            return NormalizedText("", ())
        
        chars: List[str] = []
        offsets: List[int] = []
        for index, char in enumerate(text):
            # Decompose to base + combining marks and keep only the base
            for folded in unicodedata.normalize('NFD', char.lower()):
                if unicodedata.combining(folded):
                    continue
                chars.append(folded)
                offsets.append(index)
        
        start, end = 0, len(chars)
        while start < end and chars[start].isspace():
            start += 1
        while end > start and chars[end - 1].isspace():
            end -= 1
        
        return NormalizedText("".join(chars[start:end]), tuple(offsets[start:end]))
    
    def tokenize(self, text: str) -> List[Token]:
        """
        Split already-normalized text into whitespace-delimited tokens.
        
        Args:
            text: Normalized text
            
        Returns:
            List of tokens with their positions
        """
        if not text:
            return []
        
        return [
            Token(match.group(), match.start(), match.end())
            for match in self.token_regex.finditer(text)
        ]
