"""Domain layer: rules, lifecycle stages, and field checks.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
