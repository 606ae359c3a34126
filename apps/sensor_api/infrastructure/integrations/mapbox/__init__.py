"""Mapbox Integration."""

from sensor_api.infrastructure.integrations.mapbox.mapbox_geocoder import MapboxGeocoder

__all__ = ["MapboxGeocoder"]
