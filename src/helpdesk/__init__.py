"""
Help desk call management core.

Call list sorting/pagination, call form validation and submission,
and an in-memory dashboard host wiring the two together.
"""

__version__ = "0.1.0"
