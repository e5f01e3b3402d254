"""
DwellKey — Dwell-activated on-screen keyboard with word prediction.

Sustained pointer / gaze presence → single key activation → frequency-ranked
word completions. Designed for users with limited motor control.
"""

__version__ = "1.0.0"
__author__ = "DwellKey Team"
