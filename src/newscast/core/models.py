"""
Pydantic models for the digest pipeline.
"""
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List
from pydantic import BaseModel, ConfigDict, field_validator

TOPIC_CATEGORIES = [
    'TECH_NEWS',
    'BUSINESS',
    'SECURITY',
    'PRODUCT_UPDATES',
    'INDUSTRY_NEWS',
    'EDUCATIONAL',
    'OTHER'
]
FALLBACK_CATEGORY = 'OTHER'

class Speaker(str, Enum):
    HOST = 'host'
    GUEST = 'guest'

class EmailRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    subject: str
    sender: str
    body: str
    received_at: datetime

class CategoryResult(BaseModel):
    topic: str
    summary: str

    @field_validator('topic')
    @classmethod
    def known_topic(cls, value: str) -> str:
        topic = value.strip().upper()
        return topic if topic in TOPIC_CATEGORIES else FALLBACK_CATEGORY

class DigestItem(BaseModel):
    subject: str
    sender: str
    received_at: datetime
    summary: str

class ScriptLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    speaker: Speaker
    text: str

class AudioSegment(BaseModel):
    index: int
    path: Path

# Ordered category -> items, every category present
TopicBucket = Dict[str, List[DigestItem]]
