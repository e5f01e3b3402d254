"""
predict — Frequency-ranked prefix trie and the word prediction engine.
"""
