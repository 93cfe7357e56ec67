"""Shared utilities for smoke_demo."""
