"""
newscast - newsletter digests as a two-speaker audio briefing.
"""
__version__ = "0.1.0"
