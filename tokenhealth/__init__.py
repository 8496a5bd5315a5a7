"""
TokenHealthScan: multi-source token health scoring.

Folds partial data from security scanners, market-data aggregators, social
platforms and code-hosting APIs into five category scores (security,
liquidity, tokenomics, community, development), one overall score, and an
independent confidence score. The scoring core is pure and deterministic;
provider adapters, the scan pipeline, HTTP service and CLI sit around it.
"""

__version__ = "0.1.0"
