"""
Test Fixtures and Utilities

Shared synthetic YNAB data and an in-memory quote source.

All test data is synthetic and does not contain real financial information.
"""
