"""Domain layer — installation layout, path rules, and error kinds.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
"""
