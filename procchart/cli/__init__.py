"""Command-line interface for procchart."""
