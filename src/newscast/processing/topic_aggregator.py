"""
Grouping of summarized newsletters by topic.
"""
from typing import Iterable, Tuple

from newscast.core.models import CategoryResult, DigestItem, EmailRecord, TopicBucket, TOPIC_CATEGORIES

def empty_buckets() -> TopicBucket:
    return {topic: [] for topic in TOPIC_CATEGORIES}

def aggregate(results: Iterable[Tuple[EmailRecord, CategoryResult]]) -> TopicBucket:
    """Place each result in its topic bucket, keeping input order within a bucket."""
    buckets = empty_buckets()
    for email, result in results:
        buckets[result.topic].append(DigestItem(
            subject=email.subject,
            sender=email.sender,
            received_at=email.received_at,
            summary=result.summary
        ))
    return buckets
