"""
Newsletter classification and summarization using the OpenAI API.
"""
import logging
from functools import reduce
from typing import Optional

from newscast.config import CHUNK_TOKENS
from newscast.core.api_client import APIClient
from newscast.core.models import CategoryResult
from newscast.core.tokens import TokenBudgeter
from newscast.processing.prompt_manager import PromptManager
from newscast.processing.response_parser import parse_category_response

logger = logging.getLogger(__name__)

class ChunkSummarizer:
    """Classifies a newsletter and summarizes it chunk by chunk.

    Content within the chunk budget goes out in a single request. Longer
    content is split into consecutive token-bounded chunks: the first chunk
    fixes the category and opens the summary, and each following chunk is
    sent with the running summary as context and its reply appended.
    """

    def __init__(self, api_client: APIClient, budgeter: Optional[TokenBudgeter] = None,
                 chunk_tokens: int = CHUNK_TOKENS):
        self.api_client = api_client
        self.budgeter = budgeter or TokenBudgeter()
        self.chunk_tokens = chunk_tokens
        self.pm = PromptManager()

    def summarize(self, content: str) -> CategoryResult:
        token_count = self.budgeter.count(content)
        if token_count <= self.chunk_tokens:
            return self.process_single_chunk(content)

        chunks = self.budgeter.split(content, self.chunk_tokens)
        logger.info(f"Content exceeds token limit. Processing in {len(chunks)} chunks ({token_count} tokens)...")

        first = self._ask(self.pm.get('first_chunk'), chunks[0])
        opening = parse_category_response(first)

        last_index = len(chunks) - 1
        summary = reduce(
            lambda running, item: self._continue(running, item[1], item[0] == last_index),
            enumerate(chunks[1:], start=1),
            opening.summary
        )
        return CategoryResult(topic=opening.topic, summary=summary)

    def process_single_chunk(self, content: str) -> CategoryResult:
        """Classify and summarize content that fits in one request."""
        return parse_category_response(self._ask(self.pm.get('single'), content))

    def _continue(self, running_summary: str, chunk: str, is_last: bool) -> str:
        prompt = self.pm.get('continuation', running_summary=running_summary, is_last=is_last)
        return f"{running_summary}\n{self._ask(prompt, chunk)}"

    def _ask(self, system_prompt: str, content: str) -> str:
        return self.api_client.chat([
            {'role': 'system', 'content': system_prompt},
            {'role': 'user', 'content': content}
        ])
