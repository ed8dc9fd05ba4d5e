"""Debate Arena HTTP API."""
