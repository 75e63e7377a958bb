"""Domain layer: service records and launcher output items.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
