"""
HTML recap of the digest, one section per topic.
"""
from html import escape
from urllib.parse import quote

from newscast.core.models import DigestItem, TopicBucket, TOPIC_CATEGORIES

AUDIO_CID = 'summary-audio'

def gmail_search_link(subject: str) -> str:
    return f"https://mail.google.com/mail/u/0/#search/subject:({quote(subject, safe='')})"

def render_item(item: DigestItem) -> str:
    summary = escape(item.summary).replace('\n', '<br>')
    return f"""
      <div style="margin-bottom: 20px; padding: 15px; border: 1px solid #ddd; border-radius: 8px; background-color: #f9f9f9;">
        <h3 style="color: #2c3e50; margin-bottom: 10px;">{escape(item.subject)}</h3>
        <p style="color: #666;"><strong>From:</strong> {escape(item.sender)}</p>
        <p style="color: #666;"><strong>Date:</strong> {item.received_at.strftime('%Y-%m-%d %H:%M')}</p>
        <div style="margin-top: 15px; line-height: 1.6;">
          {summary}
        </div>
        <div style="margin-top: 15px; padding-top: 15px; border-top: 1px solid #ddd;">
          <a href="{escape(gmail_search_link(item.subject))}" style="color: #3498db; text-decoration: none;">
            View Original Email
          </a>
        </div>
      </div>"""

def render_topic_sections(buckets: TopicBucket) -> str:
    sections = []
    for topic in TOPIC_CATEGORIES:
        items = buckets.get(topic, [])
        if not items:
            continue
        sections.append(f"""
    <div style="margin-bottom: 40px;">
      <h2 style="color: #2c3e50; border-bottom: 2px solid #3498db; padding-bottom: 10px;">
        {topic.replace('_', ' ')}
      </h2>{''.join(render_item(item) for item in items)}
    </div>""")
    return ''.join(sections)

def render_digest_html(buckets: TopicBucket) -> str:
    """Full mail body with an audio player bound to the attached MP3."""
    return f"""
<div style="font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto;">
  <h1 style="color: #2c3e50; text-align: center; margin-bottom: 30px;">
    Your Daily Newsletter Summary
  </h1>
  <div style="text-align: center; margin: 20px 0;">
    <audio controls>
      <source src="cid:{AUDIO_CID}" type="audio/mpeg">
      Your browser does not support the audio element.
    </audio>
  </div>{render_topic_sections(buckets)}
</div>
"""
