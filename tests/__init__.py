#!/usr/bin/env python3
"""
Test suite for the volunteer matching service.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip tests that touch a database engine
    python -m pytest tests/ -v -m "not db"

Database tests use an in-memory SQLite database; no server is required.
"""
