"""
Parsing of CATEGORY:/SUMMARY: model replies.

Model output is untrusted text. Every reply goes through
parse_category_response, which always yields a CategoryResult whose topic
is one of the known categories.
"""
import re
import logging

from newscast.core.models import CategoryResult, TOPIC_CATEGORIES, FALLBACK_CATEGORY

logger = logging.getLogger(__name__)

CATEGORY_PATTERN = re.compile(r'CATEGORY:\s*([A-Z_]+)', re.IGNORECASE)
SUMMARY_PATTERN = re.compile(r'SUMMARY:\s*([\s\S]+)', re.IGNORECASE)

def parse_category_response(raw: str) -> CategoryResult:
    """Extract category and summary, falling back to OTHER and the raw reply."""
    raw = raw or ''

    category_match = CATEGORY_PATTERN.search(raw)
    if category_match:
        topic = category_match.group(1).strip().upper()
        if topic not in TOPIC_CATEGORIES:
            logger.warning(f"Unknown category {topic!r} in model reply, using {FALLBACK_CATEGORY}")
            topic = FALLBACK_CATEGORY
    else:
        logger.warning(f"No CATEGORY marker in model reply, using {FALLBACK_CATEGORY}")
        topic = FALLBACK_CATEGORY

    summary_match = SUMMARY_PATTERN.search(raw)
    summary = summary_match.group(1).strip() if summary_match else raw

    return CategoryResult(topic=topic, summary=summary)
