"""Domain layer — document types, catalog tables, and rule passes.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
