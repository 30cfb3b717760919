"""Shared utilities for the AES-256 encryption helper."""
