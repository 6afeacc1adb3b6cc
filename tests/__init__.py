"""Test suite for railtrace.

- unit/: Unit tests for the core, domain protocols and adapters
"""
