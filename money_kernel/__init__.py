"""
Money Kernel - value objects and shared infrastructure for the money JSON
datatype extension:
- ISO 4217 validated Currency and exact-Decimal Money
- Typed, code-carrying exception hierarchy
- Structured JSON logging
"""

__version__ = "0.1.0"
