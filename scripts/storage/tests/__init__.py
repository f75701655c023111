"""Test suite for todo-context storage backends.

This package contains tests for the key-value storage layer, covering the memory,
JSON and SQLite backends, the fail-safe adapter, and backend configuration.
"""
