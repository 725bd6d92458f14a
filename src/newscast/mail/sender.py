"""
SMTP delivery of the finished digest.
"""
import logging
import smtplib
from datetime import date
from email.mime.audio import MIMEAudio
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from pathlib import Path
from typing import Optional

from newscast.config import SMTP_HOST, SMTP_PORT, SENDER_EMAIL, SENDER_APP_PASSWORD, RECIPIENT_EMAIL
from newscast.core.errors import ConfigurationError, DeliveryError
from newscast.output.html_renderer import AUDIO_CID

logger = logging.getLogger(__name__)

class DigestMailer:
    """Sends the HTML recap with the audio digest attached."""

    def __init__(self, smtp_host: str = SMTP_HOST, smtp_port: int = SMTP_PORT,
                 sender: Optional[str] = SENDER_EMAIL, password: Optional[str] = SENDER_APP_PASSWORD,
                 recipient: Optional[str] = RECIPIENT_EMAIL, smtp_factory=smtplib.SMTP_SSL):
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.sender = sender
        self.password = password
        self.recipient = recipient
        self.smtp_factory = smtp_factory

    def build_message(self, html: str, audio_path: Path, run_date: Optional[date] = None) -> MIMEMultipart:
        run_date = run_date or date.today()
        msg = MIMEMultipart('related')
        msg['Subject'] = f"Newsletter Summaries - {run_date.strftime('%m/%d/%Y')}"
        msg['From'] = f'"Newsletter Summarizer" <{self.sender}>'
        msg['To'] = self.recipient
        msg.attach(MIMEText(html, 'html'))

        audio = MIMEAudio(Path(audio_path).read_bytes(), 'mpeg')
        audio.add_header('Content-ID', f'<{AUDIO_CID}>')
        audio.add_header('Content-Disposition', 'attachment', filename='summary.mp3')
        msg.attach(audio)
        return msg

    def send(self, html: str, audio_path: Path, run_date: Optional[date] = None):
        if not all([self.sender, self.password, self.recipient]):
            raise ConfigurationError("SENDER_EMAIL, SENDER_APP_PASSWORD and RECIPIENT_EMAIL must be set")

        msg = self.build_message(html, audio_path, run_date)
        try:
            with self.smtp_factory(self.smtp_host, self.smtp_port) as server:
                server.login(self.sender, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending enhanced summary email: {e}")
            raise DeliveryError(f"Could not send digest to {self.recipient}: {e}") from e
        logger.info(f"Enhanced summary email sent successfully to {self.recipient}")
