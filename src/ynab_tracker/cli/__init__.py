"""
Command Line Interface Package

This package provides:
- Main CLI entry point (ynab-tracker)
- Tracker commands (ynab-tracker tracker sync/show/parse)
- Configuration management and environment support
- Progress reporting and error handling
"""
