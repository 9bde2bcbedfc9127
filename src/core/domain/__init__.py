"""Domain models and entities.

Why:
- Holds the plain value records (Pydantic v2) the examples operate on.
- The domain knows nothing about consoles or the CLI.
"""
