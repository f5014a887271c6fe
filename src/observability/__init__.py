"""Error reporting and observability."""
