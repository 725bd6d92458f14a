"""
newscast - command line entry point.

Fetches unread newsletters, summarizes and classifies each one, renders a
two-speaker audio digest plus an HTML recap and mails both.
"""
import sys
import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from newscast.config import AUDIO_DIR, DAYS_BACK, INBOX_EXPORT, MAX_RESULTS, STATE_DIR
from newscast.core.models import CategoryResult, EmailRecord
from newscast.core.monitor import RequestMonitor
from newscast.processing.chunk_summarizer import ChunkSummarizer
from newscast.processing.script_composer import compose
from newscast.processing.topic_aggregator import aggregate
from newscast.output.html_renderer import render_digest_html
from newscast.mail.source import ExportMailSource, MailSource
from newscast.mail.sender import DigestMailer
from newscast.audio.pipeline import AudioPipeline
from newscast.utils.file_utils import ProcessedDatabase

logger = logging.getLogger(__name__)

class DigestRunner:
    """Runs one digest end to end. Any failure aborts before delivery."""

    def __init__(self, args, source: MailSource, summarizer: ChunkSummarizer,
                 audio_pipeline: AudioPipeline, mailer: DigestMailer,
                 monitor: Optional[RequestMonitor] = None):
        self.args = args
        self.source = source
        self.summarizer = summarizer
        self.audio_pipeline = audio_pipeline
        self.mailer = mailer
        self.monitor = monitor or RequestMonitor()

    @classmethod
    def from_args(cls, args) -> 'DigestRunner':
        # Imported here so --dry-run works without cloud credentials
        from newscast.core.api_client import APIClient
        from newscast.audio.tts_client import SpeechClient

        monitor = RequestMonitor()
        processed_db = ProcessedDatabase(STATE_DIR / 'processed.json')
        source = ExportMailSource(Path(args.inbox), processed_db, include_read=args.overwrite)
        if args.dry_run:
            return cls(args, source, None, None, None, monitor)
        summarizer = ChunkSummarizer(APIClient(monitor))
        audio_pipeline = AudioPipeline(SpeechClient(monitor), AUDIO_DIR)
        return cls(args, source, summarizer, audio_pipeline, DigestMailer(), monitor)

    def summarize_all(self, emails: List[EmailRecord]) -> List[Tuple[EmailRecord, CategoryResult]]:
        """Summarize newsletters one at a time, in fetch order."""
        results = []
        for email in tqdm(emails, desc='Newsletters'):
            logger.info(f"Processing: {email.subject}")
            result = self.summarizer.summarize(email.body)
            logger.info(f"Classified as: {result.topic}")
            results.append((email, result))
        return results

    def run(self) -> Optional[Path]:
        """Main execution method. Returns the audio path, or None if nothing was done."""
        emails = self.source.fetch(self.args.max_results, self.args.days_back)
        if not emails:
            logger.info("No new newsletters found for processing")
            return None

        if self.args.dry_run:
            for email in emails:
                print('→', email.received_at.strftime('%Y-%m-%d'), email.sender, '⇒', email.subject)
            return None

        buckets = aggregate(self.summarize_all(emails))

        now = datetime.now()
        script = compose(buckets, now=now)
        logger.info(f"Generating audio for {len(script)} script lines...")
        audio_path = self.audio_pipeline.synthesize(script, run_date=now.date())

        html = render_digest_html(buckets)
        if self.args.no_send:
            html_path = audio_path.with_suffix('.html')
            html_path.write_text(html, encoding='utf-8')
            logger.info(f"Recap written to {html_path}, skipping delivery")
        else:
            self.mailer.send(html, audio_path, run_date=now.date())
            for email in emails:
                self.source.mark_read(email.id)

        self.monitor.log_status()
        logger.info(f"✅ Digest complete: {len(emails)} newsletters, {audio_path}")
        return audio_path

def create_argument_parser():
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(prog='newscast', description='Summarize unread newsletters into an audio digest')

    parser.add_argument('--inbox', default=str(INBOX_EXPORT), help='Inbox export (YAML or JSON)')
    parser.add_argument('--max-results', type=int, default=MAX_RESULTS, help='Maximum messages to consider')
    parser.add_argument('--days-back', type=int, default=DAYS_BACK, help='Only messages from the last N days')
    parser.add_argument('--overwrite', action='store_true', help='Include messages already marked read')
    parser.add_argument('--dry-run', action='store_true', help='Show what would be summarized')
    parser.add_argument('--no-send', action='store_true', help='Write the HTML recap next to the audio instead of mailing it')

    return parser

def main(argv=None) -> int:
    """Main entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s - %(message)s'
    )
    args = create_argument_parser().parse_args(argv)

    try:
        DigestRunner.from_args(args).run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"❌ Process failed: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
