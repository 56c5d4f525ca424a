"""
Application layer for the chat bounded context.

Use cases coordinate domain entities and ports to fulfill
chat operations. No framework or infrastructure imports allowed.
"""
