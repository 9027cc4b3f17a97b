"""Word lookup services: a dictionary service and an aggregator in front of it."""

__version__ = "0.1.0"
