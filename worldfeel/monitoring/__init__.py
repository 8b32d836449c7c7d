"""Prometheus metrics for the worldfeel service."""
