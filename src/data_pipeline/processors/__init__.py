"""Payload processors for the statistics API."""

from .payloads import correlation_matrix, efficiency_records, energy_records, scatter_points

__all__ = ["correlation_matrix", "efficiency_records", "energy_records", "scatter_points"]
