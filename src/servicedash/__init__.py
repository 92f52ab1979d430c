"""servicedash - a self-hosted services dashboard.

Curated links with names, URLs, descriptions and optional images, stored as
flat JSON documents behind a small REST API, plus a client that keeps working
from a local cache when the API cannot be reached.
"""

__version__ = "0.1.0"
