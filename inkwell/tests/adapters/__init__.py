"""Tests for adapter implementations.

These tests verify adapter behavior against the port contracts,
using only in-process resources (stdout, logging, memory).
"""
