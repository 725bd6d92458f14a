"""
Core types, clients and token accounting.
"""
