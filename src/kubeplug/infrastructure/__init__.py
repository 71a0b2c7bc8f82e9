"""Infrastructure layer — filesystem queries and process introspection.

This layer may import from domain (error kinds only).
It must never import from services, commands, or output.
"""
