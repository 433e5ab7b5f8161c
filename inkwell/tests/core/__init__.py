"""Unit tests for core domain logic.

These tests exercise core business logic without external dependencies.
All external ports are replaced with doubles from tests/doubles/.
"""
