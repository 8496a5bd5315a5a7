"""
Analytics: provider adapters and the token scan pipeline.

Turns raw upstream payloads into scoring signals and runs the full scan:
adapt -> score each category -> overall + confidence.
Modules: providers, scan_pipeline.
"""

from tokenhealth.analytics.scan_pipeline import ScanResult, run_token_scan

__all__ = [
    "ScanResult",
    "run_token_scan",
]
