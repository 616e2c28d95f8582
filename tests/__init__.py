"""Tests for zgit."""
