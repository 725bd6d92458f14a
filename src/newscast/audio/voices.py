"""
Fixed voice profiles keyed by speaker role.
"""
from dataclasses import dataclass
from typing import Dict

from newscast.core.models import Speaker

AUDIO_EXTENSION = 'mp3'

@dataclass(frozen=True)
class VoiceProfile:
    language_code: str
    name: str
    ssml_gender: str
    speaking_rate: float
    pitch: float

VOICE_PROFILES: Dict[Speaker, VoiceProfile] = {
    Speaker.HOST: VoiceProfile(
        language_code='en-US',
        name='en-US-Neural2-D',
        ssml_gender='MALE',
        speaking_rate=1.1,
        pitch=1.0
    ),
    Speaker.GUEST: VoiceProfile(
        language_code='en-US',
        name='en-US-Neural2-F',
        ssml_gender='FEMALE',
        speaking_rate=1.0,
        pitch=0.9
    ),
}
