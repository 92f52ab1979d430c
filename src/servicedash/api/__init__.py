"""REST API for the dashboard documents (mounted under ``/api``)."""
