"""Command-line interface adapters.

Provides CLI commands for driving the Inkwell services:
- publish: Publish a new article
- register: Register a new user
- update-email: Change a user's e-mail address
- comment: Comment on an article
- list-users / list-articles: Inspect stored data
"""
