"""
dwell — Dwell activation engine and the timer surface it schedules on.
"""
