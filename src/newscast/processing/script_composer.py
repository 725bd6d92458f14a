"""
Two-speaker dialogue script built from the topic buckets.
"""
import re
from datetime import datetime
from typing import List, Optional

from newscast.core.models import DigestItem, ScriptLine, Speaker, TopicBucket, TOPIC_CATEGORIES

SENTENCE_BOUNDARY = re.compile(r'(?<=\.)\s+')

OPENING = (
    "Welcome to your daily newsletter roundup! It's {time}, and I'm here with our expert "
    "analyst to break down today's key stories."
)
OPENING_REPLY = (
    "Thanks for having me! I've reviewed all the newsletters, and we've got some "
    "interesting developments to discuss."
)
TOPIC_INTRO = "Let's dive into {topic}. What are the key updates in this area?"
FOLLOW_UP = "That's interesting! What else did they mention?"
NEXT_ITEM = "What other updates do we have in this area?"
CLOSING_QUESTION = "That wraps up our newsletter summary for today. Any final thoughts?"
CLOSING_REMARK = (
    "Thanks for breaking this down with me. Remember to check the email summary for more "
    "details on any stories that caught your interest."
)
SIGN_OFF = "Thanks for listening, and we'll catch you in the next summary!"

def format_clock(now: datetime) -> str:
    """12-hour time without a leading zero, e.g. '9:05 AM'."""
    hour = now.hour % 12 or 12
    return f"{hour}:{now.minute:02d} {'AM' if now.hour < 12 else 'PM'}"

def topic_display_name(topic: str) -> str:
    return topic.lower().replace('_', ' ')

def split_sentences(summary: str) -> List[str]:
    return SENTENCE_BOUNDARY.split(summary.strip())

def _host(text: str) -> ScriptLine:
    return ScriptLine(speaker=Speaker.HOST, text=text)

def _guest(text: str) -> ScriptLine:
    return ScriptLine(speaker=Speaker.GUEST, text=text)

def _item_lines(item: DigestItem) -> List[ScriptLine]:
    sentences = split_sentences(item.summary)
    lines = [_guest(f"From {item.sender}, we have {sentences[0]}")]
    if len(sentences) > 1:
        lines.append(_host(FOLLOW_UP))
        lines.append(_guest(' '.join(sentences[1:])))
    return lines

def compose(buckets: TopicBucket, now: Optional[datetime] = None) -> List[ScriptLine]:
    """Render the digest dialogue.

    The only time-dependent content is the clock in the opening line; for a
    fixed ``now`` the output depends on the bucket contents alone.
    """
    now = now or datetime.now()
    script = [
        _host(OPENING.format(time=format_clock(now))),
        _guest(OPENING_REPLY),
    ]

    for topic in TOPIC_CATEGORIES:
        items = buckets.get(topic, [])
        if not items:
            continue
        script.append(_host(TOPIC_INTRO.format(topic=topic_display_name(topic))))
        for index, item in enumerate(items):
            script.extend(_item_lines(item))
            if index < len(items) - 1:
                script.append(_host(NEXT_ITEM))

    script.append(_host(CLOSING_QUESTION))
    script.append(_guest(CLOSING_REMARK))
    script.append(_host(SIGN_OFF))
    return script
