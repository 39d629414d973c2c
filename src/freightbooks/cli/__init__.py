"""Command-line interface for freightbooks."""
