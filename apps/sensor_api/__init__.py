"""Sensor API - named point locations with proximity search."""
