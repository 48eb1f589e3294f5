"""CLI commands for procchart."""
