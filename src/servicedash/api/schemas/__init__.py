"""Request/response models for the REST API."""
