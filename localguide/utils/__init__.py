"""Shared helpers for the Local Guide backend."""
