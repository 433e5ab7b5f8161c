"""External adapters for the Inkwell publishing system.

This package provides implementations of the core port interfaces.

Adapter Organization:

- notification/: Adapters for notifying people (stdout)
- logger/: LoggerPort implementations backed by the logging module
- store/: In-memory repositories and comment storage
- cli/: Command-line interface commands
"""
