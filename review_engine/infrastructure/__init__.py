"""Infrastructure layer - adapters, in-memory stores and observability."""
