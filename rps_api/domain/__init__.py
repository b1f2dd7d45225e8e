"""Domain layer (pure logic).

- Keep game rules and pagination arithmetic here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI.
- Randomness is supplied through a move generator object, never read from a global.
"""
