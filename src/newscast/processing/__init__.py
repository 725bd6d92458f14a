"""
Summarization, bucketing and script composition.
"""
