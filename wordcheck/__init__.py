"""
Dictionary-based spell checking: tokenization, correctness classification
and edit-distance suggestions.
"""
__version__ = "0.1.0"
