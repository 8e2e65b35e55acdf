"""Shared kernel - configuration and logging used by every layer."""
