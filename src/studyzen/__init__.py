"""
StudyZen: single-user study-task tracker with points and a completion streak.
"""

__version__ = "0.1.0"
