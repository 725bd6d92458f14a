"""
File helpers.
"""
