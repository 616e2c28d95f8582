"""Property tests for core modules."""
