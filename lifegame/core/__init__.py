"""Core gameplay primitives (value types and events).

Kept free of I/O concerns so it can be reused by the game loop, CLI, and tests.
"""
