"""
Data layer - SQLAlchemy models and repositories for the record store.
"""
