"""Domain layer — identifier types, grammar, and generation.

This layer depends only on stdlib and python-ulid.
It must never import from services, output, commands, or config.
"""
