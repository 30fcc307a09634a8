"""Data acquisition from the wger REST API."""
