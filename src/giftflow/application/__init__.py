"""Application layer – event store, publishing pipeline, use cases."""
