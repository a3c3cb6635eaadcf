"""
Infrastructure layer - configuration, logging and database bootstrap.
"""
