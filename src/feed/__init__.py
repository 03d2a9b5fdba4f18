"""Readers that turn GTFS flat files into typed record batches."""
