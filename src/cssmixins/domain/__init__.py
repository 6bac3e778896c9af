"""Domain layer — type tags and configuration records.

This layer depends only on stdlib and pydantic.
It must never import from validation, mixins, commands, or config.
"""
