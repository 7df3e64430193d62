"""Synthetic transaction stream generator for payments-engine load testing."""

__version__ = "0.1.0"
