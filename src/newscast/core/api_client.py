"""
OpenAI chat client for newsletter summarization.
"""
import time
import logging
from typing import List, Dict, Optional
from tenacity import retry, wait_random_exponential, stop_after_attempt, retry_if_exception_type
from openai import OpenAI, RateLimitError, APIError

from newscast.config import OPENAI_MODEL, LLM_TEMPERATURE, LLM_MAX_TOKENS, LLM_MAX_ATTEMPTS
from newscast.core.monitor import RequestMonitor

logger = logging.getLogger(__name__)

class APIClient:
    """OpenAI chat client. One blocking request per call, errors propagate."""

    def __init__(self, monitor: Optional[RequestMonitor] = None, client: Optional[OpenAI] = None,
                 model: str = OPENAI_MODEL):
        self.monitor = monitor or RequestMonitor()
        self.client = client or OpenAI()
        self.model = model
        logger.info(f"Using model {self.model}")

    @retry(
        wait=wait_random_exponential(min=0.1, max=10),
        stop=stop_after_attempt(LLM_MAX_ATTEMPTS),
        retry=retry_if_exception_type((RateLimitError, APIError)),
        reraise=True
    )
    def chat(self, messages: List[Dict[str, str]], max_tokens: int = LLM_MAX_TOKENS,
             temperature: float = LLM_TEMPERATURE) -> str:
        """Make a chat completion request and return the reply text."""
        estimated_tokens = sum(len(m['content']) // 4 for m in messages) + max_tokens

        start_time = time.time()
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature
            )
        except Exception:
            self.monitor.record_request('llm', False, time.time() - start_time)
            raise

        self.monitor.record_request('llm', True, time.time() - start_time, estimated_tokens)
        return resp.choices[0].message.content or ''
