"""
Google Cloud Text-to-Speech client.
"""
import time
import logging
from typing import Optional

from google.cloud import texttospeech

from newscast.audio.voices import VoiceProfile
from newscast.core.monitor import RequestMonitor

logger = logging.getLogger(__name__)

class SpeechClient:
    """Synthesizes one line of dialogue to MP3 bytes per call."""

    def __init__(self, monitor: Optional[RequestMonitor] = None,
                 client: Optional[texttospeech.TextToSpeechClient] = None):
        self.monitor = monitor or RequestMonitor()
        self.client = client or texttospeech.TextToSpeechClient()

    def synthesize(self, text: str, profile: VoiceProfile) -> bytes:
        voice = texttospeech.VoiceSelectionParams(
            language_code=profile.language_code,
            name=profile.name,
            ssml_gender=texttospeech.SsmlVoiceGender[profile.ssml_gender]
        )
        audio_config = texttospeech.AudioConfig(
            audio_encoding=texttospeech.AudioEncoding.MP3,
            speaking_rate=profile.speaking_rate,
            pitch=profile.pitch
        )

        start_time = time.time()
        try:
            response = self.client.synthesize_speech(
                input=texttospeech.SynthesisInput(text=text),
                voice=voice,
                audio_config=audio_config
            )
        except Exception:
            self.monitor.record_request('tts', False, time.time() - start_time)
            raise

        self.monitor.record_request('tts', True, time.time() - start_time)
        return response.audio_content
