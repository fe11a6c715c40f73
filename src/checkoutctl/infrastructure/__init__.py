"""Infrastructure layer — the in-memory store services run against."""
