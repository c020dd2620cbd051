"""
Test Suite for the YNAB Price Tracker

Test Structure:
- fixtures/: Shared synthetic YNAB data and quote sources
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and end-to-end sync tests

Test Data:
All test data uses synthetic financial information.
"""
