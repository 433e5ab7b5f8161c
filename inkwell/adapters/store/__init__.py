"""Store adapters for persistence and querying.

Implementations:
- In-memory (process-local dictionaries, used by the composition root)
"""
