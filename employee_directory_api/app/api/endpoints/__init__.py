"""Domain routers for the HTTP API."""
