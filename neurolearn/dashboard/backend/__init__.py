"""Dashboard backend - FastAPI application serving the learning session."""
