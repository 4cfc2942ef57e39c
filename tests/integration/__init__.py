"""Integration tests against the FastAPI mock backend."""
