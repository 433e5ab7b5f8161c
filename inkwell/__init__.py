"""Inkwell: articles, users, and the services that publish and update them."""
