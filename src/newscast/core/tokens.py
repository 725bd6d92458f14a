"""
Token counting, slicing and truncation against a token budget.
"""
import math
import logging
from typing import Optional, Tuple

import tiktoken

from newscast.config import TOKEN_ENCODING

logger = logging.getLogger(__name__)

CHARS_PER_TOKEN = 4

class TokenBudgeter:
    """Measures text in model tokens, or in 4-char units when tokenization is unavailable."""

    def __init__(self, encoding_name: str = TOKEN_ENCODING, encoding=None):
        self.encoding_name = encoding_name
        self._encoding = encoding
        self._unavailable = False

    def _get_encoding(self):
        if self._encoding is None and not self._unavailable:
            try:
                self._encoding = tiktoken.get_encoding(self.encoding_name)
            except Exception as e:
                logger.warning(f"Token counting failed ({e}), falling back to character-based budgeting")
                self._unavailable = True
        return self._encoding

    def _encode(self, text: str) -> Optional[list]:
        encoding = self._get_encoding()
        if encoding is None:
            return None
        try:
            return encoding.encode(text, disallowed_special=())
        except Exception as e:
            logger.warning(f"Token encoding failed ({e}), using character heuristic")
            return None

    def count(self, text: str) -> int:
        tokens = self._encode(text)
        if tokens is None:
            return math.ceil(len(text) / CHARS_PER_TOKEN)
        return len(tokens)

    def slice(self, text: str, token_range: Tuple[int, int]) -> str:
        """Return the text covered by tokens [start, end)."""
        start, end = token_range
        tokens = self._encode(text)
        if tokens is not None:
            try:
                return self._encoding.decode(tokens[start:end])
            except Exception as e:
                logger.warning(f"Token decoding failed ({e}), slicing on characters")
        return text[start * CHARS_PER_TOKEN:end * CHARS_PER_TOKEN]

    def truncate(self, text: str, max_tokens: int) -> str:
        """Clip text to at most max_tokens. Never raises for oversized input."""
        if self.count(text) <= max_tokens:
            return text
        return self.slice(text, (0, max_tokens))

    def split(self, text: str, budget: int) -> list:
        """Consecutive, non-overlapping chunks of at most `budget` tokens."""
        total = self.count(text)
        return [self.slice(text, (i, i + budget)) for i in range(0, total, budget)]