"""Service layer: registry loading and input classification.

Services may import from the domain layer.
They must never import from commands or output.
"""
