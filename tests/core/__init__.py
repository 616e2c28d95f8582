"""Tests for core object store modules."""
