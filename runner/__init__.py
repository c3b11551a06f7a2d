"""Smoke runner for a running file server."""
