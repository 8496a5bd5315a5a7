"""
API server package: HTTP interface to the scan pipeline.

Scores provider payloads on request; rate limits per client with token buckets.
"""
