"""Shared service utilities (HTTP session with retry)."""
