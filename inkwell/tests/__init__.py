"""Test suite for the Inkwell publishing system.

Organized into three categories:

1. core/: Unit tests for domain models and services
   - Fast, no I/O
   - Uses the doubles from doubles/ for every port

2. adapters/: Tests for adapter implementations
   - Stdout notifications, logging adapter, in-memory stores

3. doubles/: Dummy, Stub, Fake, Spy and Mock implementations of the ports
   - Each with its own verification contract
"""
