"""Tests for shared contracts."""
