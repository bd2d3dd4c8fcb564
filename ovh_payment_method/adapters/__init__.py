"""Adapters for external billing APIs."""
