"""Core capability contracts.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- Services depend on these abstractions and never on a concrete adapter.
"""
