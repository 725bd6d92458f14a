"""
Prompt management for newsletter classification and summarization.
"""
from newscast.core.models import TOPIC_CATEGORIES

class PromptManager:
    """Manages system prompts for the summarization stages."""

    def __init__(self):
        self.prompts = {
            'single': self._single_prompt,
            'first_chunk': self._first_chunk_prompt,
            'continuation': self._continuation_prompt
        }

    def get(self, prompt_type: str, **kwargs) -> str:
        """Get a prompt with interpolated variables."""
        if prompt_type not in self.prompts:
            raise ValueError(f"Unknown prompt type: {prompt_type}")
        return self.prompts[prompt_type](**kwargs)

    @staticmethod
    def _categories() -> str:
        return ', '.join(TOPIC_CATEGORIES)

    def _single_prompt(self) -> str:
        return f"""Analyze and summarize the newsletter content. First determine the most relevant category from: {self._categories()}. Then provide a concise summary focusing on key announcements and insights. Format the response as:
CATEGORY: [chosen category]
SUMMARY: [your summary]"""

    def _first_chunk_prompt(self) -> str:
        return f"""Analyze the first part of this newsletter content. Determine the most relevant category from: {self._categories()} and begin summarizing key points. Format as:
CATEGORY: [chosen category]
SUMMARY: [your summary]"""

    def _continuation_prompt(self, running_summary: str, is_last: bool) -> str:
        part = 'final' if is_last else 'next'
        return f"""Continue analyzing the {part} part of the newsletter. Incorporate this into the previous summary. Previous summary context:
{running_summary}"""
