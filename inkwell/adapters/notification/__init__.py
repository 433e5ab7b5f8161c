"""Notification adapters for telling people about domain events.

Implementations:
- Stdout (prints the message a real e-mail sender would deliver)
"""
