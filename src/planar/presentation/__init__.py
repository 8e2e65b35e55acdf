"""Presentation Layer - user facing entry points."""
