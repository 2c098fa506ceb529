"""Application layer: catalog loading, querying and aggregation."""
