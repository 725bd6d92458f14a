"""
Mailbox collaborators supplying EmailRecords to the pipeline.
"""
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

import yaml
from pydantic import ValidationError

from newscast.config import EXCLUDED_SENDERS
from newscast.core.models import EmailRecord
from newscast.utils.file_utils import ProcessedDatabase

logger = logging.getLogger(__name__)

class MailSource(Protocol):
    def fetch(self, max_results: int, days_back: int) -> List[EmailRecord]:
        ...

    def mark_read(self, email_id: str) -> None:
        ...

def is_excluded(sender: str, excluded: Sequence[str]) -> bool:
    return any(name in sender for name in excluded)

class ExportMailSource:
    """Reads unread messages from a YAML/JSON inbox export.

    The export is either a list of messages or a mapping with a ``messages``
    key. Each message carries id, subject, from (or sender), date (or
    received_at) and a plain-text body. Read state lives in a
    ProcessedDatabase next to the export.
    """

    def __init__(self, export_path: Path, processed_db: ProcessedDatabase,
                 excluded_senders: Sequence[str] = EXCLUDED_SENDERS,
                 include_read: bool = False):
        self.export_path = export_path
        self.processed_db = processed_db
        self.excluded_senders = list(excluded_senders)
        self.include_read = include_read

    def _load_messages(self) -> list:
        with open(self.export_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or []
        if isinstance(data, dict):
            data = data.get('messages', [])
        return data

    @staticmethod
    def _to_record(raw: dict) -> EmailRecord:
        return EmailRecord(
            id=str(raw.get('id', '')),
            subject=raw.get('subject') or '',
            sender=raw.get('from') or raw.get('sender') or '',
            body=raw.get('body') or '',
            received_at=raw.get('date') or raw.get('received_at'),
        )

    def fetch(self, max_results: int, days_back: int, now: Optional[datetime] = None) -> List[EmailRecord]:
        now = now or datetime.now()
        cutoff = now - timedelta(days=days_back)
        logger.info(f"Reading inbox export {self.export_path} (after {cutoff:%Y-%m-%d %H:%M})")

        candidates = []
        for raw in self._load_messages():
            if not isinstance(raw, dict):
                logger.warning(f"Skipping malformed message {raw!r}: not a mapping")
                continue
            try:
                record = self._to_record(raw)
            except ValidationError as e:
                logger.warning(f"Skipping malformed message {raw.get('id')!r}: {e}")
                continue
            if not self.include_read and self.processed_db.is_processed(record.id):
                continue
            received = record.received_at
            if received.tzinfo is not None:
                received = received.astimezone().replace(tzinfo=None)
            if received < cutoff:
                continue
            candidates.append(record)

        emails = []
        for record in candidates[:max_results]:
            if is_excluded(record.sender, self.excluded_senders):
                logger.info(f"Skipping excluded sender: {record.sender}")
                continue
            if not record.body.strip():
                continue
            emails.append(record)
        return emails

    def mark_read(self, email_id: str) -> None:
        self.processed_db.mark(email_id, 'read')
        logger.info(f"Marked email {email_id} as read")
