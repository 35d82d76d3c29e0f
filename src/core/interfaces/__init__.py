"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- The CLI depends on the contract, so tests can swap the transport.
"""
