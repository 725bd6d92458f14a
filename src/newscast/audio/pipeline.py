"""
Per-line speech synthesis and ordered concatenation into one MP3.
"""
import logging
import subprocess
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from tqdm import tqdm

from newscast.config import AUDIO_DIR, FFMPEG_BINARY
from newscast.audio.voices import AUDIO_EXTENSION, VOICE_PROFILES
from newscast.core.errors import AudioMergeError
from newscast.core.models import AudioSegment, ScriptLine

logger = logging.getLogger(__name__)

def artifact_filename(run_date: date) -> str:
    return f"newsletter-summary-{run_date.isoformat()}.{AUDIO_EXTENSION}"

def build_concat_command(ffmpeg_binary: str, inputs: Sequence[Path], output: Path) -> List[str]:
    """ffmpeg invocation joining `inputs` in order into one audio-only stream."""
    command = [ffmpeg_binary, '-y', '-loglevel', 'error']
    for path in inputs:
        command += ['-i', str(path)]
    command += ['-filter_complex', f'concat=n={len(inputs)}:v=0:a=1', str(output)]
    return command

class AudioPipeline:
    """Turns an ordered script into a single audio file.

    Segment files are written as audio/segment_<index>.mp3 in script order and
    handed to ffmpeg in that same order. They are removed once the final file
    exists; if ffmpeg fails they stay on disk for inspection.
    """

    def __init__(self, speech_client, audio_dir: Path = AUDIO_DIR,
                 ffmpeg_binary: str = FFMPEG_BINARY,
                 runner: Callable[..., subprocess.CompletedProcess] = subprocess.run):
        self.speech_client = speech_client
        self.audio_dir = Path(audio_dir)
        self.ffmpeg_binary = ffmpeg_binary
        self.runner = runner

    def synthesize(self, script: Sequence[ScriptLine], run_date: Optional[date] = None) -> Path:
        if not script:
            raise ValueError("Cannot synthesize an empty script")

        self.audio_dir.mkdir(parents=True, exist_ok=True)
        segments = self.synthesize_segments(script)

        final_path = self.audio_dir / artifact_filename(run_date or date.today())
        self.merge(segments, final_path)
        self.cleanup(segments)

        logger.info(f"Final audio saved to: {final_path}")
        return final_path

    def synthesize_segments(self, script: Sequence[ScriptLine]) -> List[AudioSegment]:
        """One TTS call per line, strictly in order."""
        segments = []
        for index, line in enumerate(tqdm(script, desc='Segments', leave=False)):
            logger.debug(f"Processing segment {index + 1}/{len(script)}")
            audio = self.speech_client.synthesize(line.text, VOICE_PROFILES[line.speaker])
            path = self.audio_dir / f"segment_{index}.{AUDIO_EXTENSION}"
            path.write_bytes(audio)
            segments.append(AudioSegment(index=index, path=path))
        return segments

    def merge(self, segments: Sequence[AudioSegment], output: Path):
        """Concatenate segments with ffmpeg's concat filter."""
        ordered = [s.path for s in sorted(segments, key=lambda s: s.index)]
        command = build_concat_command(self.ffmpeg_binary, ordered, output)

        logger.info(f"Merging {len(ordered)} audio segments...")
        try:
            result = self.runner(command, capture_output=True, text=True)
        except OSError as e:
            logger.error(f"Could not run {self.ffmpeg_binary}: {e}")
            raise AudioMergeError(f"Could not run {self.ffmpeg_binary}: {e}") from e

        if result.returncode != 0 or not output.exists():
            logger.error(f"Error merging audio files (exit {result.returncode}): {result.stderr}")
            raise AudioMergeError(
                f"ffmpeg exited with status {result.returncode}", stderr=result.stderr or ''
            )
        logger.info("Audio merge complete")

    @staticmethod
    def cleanup(segments: Sequence[AudioSegment]):
        for segment in segments:
            try:
                segment.path.unlink()
            except OSError as e:
                logger.warning(f"Could not delete temporary file {segment.path}: {e}")
