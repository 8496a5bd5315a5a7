"""
Command-line tools for scoring token payloads offline.
"""
