"""
Resume builder backend: resume model, ATS keyword extraction and scoring
"""

__version__ = "1.0.0"
