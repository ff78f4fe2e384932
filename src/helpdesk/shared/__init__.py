"""
Shared infrastructure: structured logging and application exceptions.
"""
