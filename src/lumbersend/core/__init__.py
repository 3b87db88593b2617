"""Core records, encoding and ports."""
