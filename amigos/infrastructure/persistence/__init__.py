"""
Persistence primitives shared by all repository adapters:
schema metadata, engine lifecycle and error classification.
"""
