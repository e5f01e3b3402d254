"""
keyboard — Spanish QWERTY layout, text composition and dwell wiring.
"""
