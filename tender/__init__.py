"""Tender recipe discovery backend."""
