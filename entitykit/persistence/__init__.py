"""Persistence layer: reference data services and database helpers."""
