"""Envelope model and runtime configuration."""
