"""Marketplace REST API: products, orders and a health check over one JSON document."""

__version__ = "0.1.0"
