"""Infrastructure layer: database schema, engine, and the store.

Infrastructure may import from domain and config, never from services
or commands.
"""
