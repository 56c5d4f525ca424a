"""
Infrastructure adapters for the chat bounded context.

Each adapter implements a domain port (ABC) on top of the
process-wide SQLAlchemy engine.
"""
