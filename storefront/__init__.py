"""Storefront - product catalog built on composite, adapter and facade patterns."""

__version__ = "1.0.0"
