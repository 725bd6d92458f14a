"""
Recap rendering.
"""
