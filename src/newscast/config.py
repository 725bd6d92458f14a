"""
Runtime configuration loaded from the environment.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Language model
OPENAI_MODEL = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')
LLM_TEMPERATURE = float(os.getenv('LLM_TEMPERATURE', '0.7'))
LLM_MAX_TOKENS = int(os.getenv('LLM_MAX_TOKENS', '750'))
LLM_MAX_ATTEMPTS = int(os.getenv('LLM_MAX_ATTEMPTS', '1'))

# Token budgeting
CHUNK_TOKENS = int(os.getenv('CHUNK_TOKENS', '15000'))
TOKEN_ENCODING = os.getenv('TOKEN_ENCODING', 'o200k_base')

# Audio
AUDIO_DIR = Path(os.getenv('AUDIO_DIR', './audio'))
FFMPEG_BINARY = os.getenv('FFMPEG_BINARY', 'ffmpeg')

# Mailbox
INBOX_EXPORT = Path(os.getenv('INBOX_EXPORT', './inbox.yaml'))
STATE_DIR = Path(os.getenv('STATE_DIR', './.cache'))
EXCLUDED_SENDERS = [
    s.strip() for s in os.getenv('EXCLUDED_SENDERS', 'ByteByteGo,HuggingFace').split(',')
    if s.strip()
]
MAX_RESULTS = int(os.getenv('MAX_RESULTS', '10'))
DAYS_BACK = int(os.getenv('DAYS_BACK', '7'))

# Delivery
SMTP_HOST = os.getenv('SMTP_HOST', 'smtp.gmail.com')
SMTP_PORT = int(os.getenv('SMTP_PORT', '465'))
SENDER_EMAIL = os.getenv('SENDER_EMAIL')
SENDER_APP_PASSWORD = os.getenv('SENDER_APP_PASSWORD')
RECIPIENT_EMAIL = os.getenv('RECIPIENT_EMAIL')
