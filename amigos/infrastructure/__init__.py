"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: database engine management,
the relational schema and SQLAlchemy repositories.
"""
