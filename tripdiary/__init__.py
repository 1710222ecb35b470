"""Trip diary backend: AI trip planning and diary writing API."""
