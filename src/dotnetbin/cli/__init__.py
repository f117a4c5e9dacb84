"""Command-line interface for dotnetbin."""
