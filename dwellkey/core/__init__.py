"""
core — Constants, configuration, per-target transition map and event log.
"""
