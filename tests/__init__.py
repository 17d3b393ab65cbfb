#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only tests that do not touch a database
    python -m pytest tests/ -v -m "not db"

    # Run only database tests
    python -m pytest tests/ -v -m "db"

Database tests run against a throwaway SQLite file, so no external
database server is needed.
"""
