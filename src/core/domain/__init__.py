"""Domain models and value objects.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about httpx, Rich or Typer.
"""
