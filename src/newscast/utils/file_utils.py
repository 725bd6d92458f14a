"""
File handling utilities.
"""
import json
import logging
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

class ProcessedDatabase:
    """Simple JSON-based database of email ids that were already digested."""

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.data = {}
        self.load()

    def load(self):
        """Load the database from file."""
        if self.db_path.exists():
            try:
                with open(self.db_path, 'r', encoding='utf-8') as f:
                    self.data = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load processed DB: {e}")
                self.data = {}

    def save(self):
        """Save the database to file."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.db_path, 'w', encoding='utf-8') as f:
            json.dump(self.data, f, ensure_ascii=False, indent=2)

    def is_processed(self, key: str) -> bool:
        return key in self.data

    def mark(self, key: str, status: str = 'read'):
        """Mark an email with the given status."""
        self.data[key] = {'status': status, 'timestamp': datetime.now().isoformat()}
        self.save()
