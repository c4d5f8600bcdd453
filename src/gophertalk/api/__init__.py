"""HTTP API for Gopher Talk."""
