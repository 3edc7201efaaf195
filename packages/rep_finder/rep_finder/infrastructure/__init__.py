"""Infrastructure: cache store, logging and metrics."""
