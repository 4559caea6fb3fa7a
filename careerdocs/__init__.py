# careerdocs/__init__.py
"""
Career document tooling: local ATS compatibility scoring for resumes and cover letters
"""

__version__ = "0.3.0"
