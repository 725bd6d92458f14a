"""
Speech synthesis and audio assembly.
"""
