"""
EduPath Guidance

Report-card parsing, APS calculation and grade-specific recommendations.
"""

__version__ = "1.0.0"
