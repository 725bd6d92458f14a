"""
Exception hierarchy for the digest pipeline.
"""

class NewscastError(Exception):
    """Base class for pipeline failures."""

class ConfigurationError(NewscastError):
    """Required settings are missing."""

class AudioMergeError(NewscastError):
    """ffmpeg could not produce the final audio file."""

    def __init__(self, message: str, stderr: str = ''):
        super().__init__(message)
        self.stderr = stderr

class DeliveryError(NewscastError):
    """The digest mail could not be sent."""
