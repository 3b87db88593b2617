"""Command line interface for lumbersend."""
