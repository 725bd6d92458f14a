import subprocess
from datetime import datetime
from pathlib import Path

import pytest

from newscast.core.models import EmailRecord
from newscast.core.tokens import TokenBudgeter


class CharEncoding:
    """One token per character; keeps chunk arithmetic easy to follow."""

    def encode(self, text, disallowed_special=()):
        return [ord(c) for c in text]

    def decode(self, tokens):
        return ''.join(chr(t) for t in tokens)


class FakeAPIClient:
    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def chat(self, messages, max_tokens=750, temperature=0.7):
        self.calls.append(messages)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeSpeechClient:
    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def synthesize(self, text, profile):
        self.calls.append((text, profile))
        if self.fail_on is not None and len(self.calls) - 1 == self.fail_on:
            raise RuntimeError("tts unavailable")
        return f"[{profile.name}] {text}\n".encode('utf-8')


class FakeFfmpeg:
    """Stands in for subprocess.run: concatenates the inputs in argument order."""

    def __init__(self, returncode=0, stderr=''):
        self.returncode = returncode
        self.stderr = stderr
        self.commands = []

    def __call__(self, command, capture_output=True, text=True):
        self.commands.append(command)
        if self.returncode == 0:
            inputs = [command[i + 1] for i, arg in enumerate(command) if arg == '-i']
            Path(command[-1]).write_bytes(b''.join(Path(p).read_bytes() for p in inputs))
        return subprocess.CompletedProcess(command, self.returncode, '', self.stderr)


@pytest.fixture
def char_budgeter():
    return TokenBudgeter(encoding=CharEncoding())


@pytest.fixture
def fallback_budgeter():
    return TokenBudgeter(encoding_name='no-such-encoding')


@pytest.fixture
def make_email():
    def _make(id='m1', subject='Weekly Update', sender='Tech Weekly <news@tech.example>',
              body='Body text.', received_at=datetime(2026, 10, 18, 8, 30)):
        return EmailRecord(id=id, subject=subject, sender=sender, body=body, received_at=received_at)
    return _make
