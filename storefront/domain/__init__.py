"""Domain layer for the storefront catalog."""
