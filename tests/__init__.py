"""Test package for uptime_effects.

The tests exercise the applicative instances, the uptime clients and the
aggregation service under every wrapper.  No test touches the network; the
asynchronous paths use in-memory lookups.  Run ``pytest`` from the project
root.
"""
