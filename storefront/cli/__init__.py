"""Command line interface for the storefront catalog."""
