"""
output — Best-effort activation audio cue.
"""
