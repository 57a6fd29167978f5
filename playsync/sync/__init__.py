"""Sync orchestration."""
