"""Domain layer — pure validators, formatters, and enums.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
