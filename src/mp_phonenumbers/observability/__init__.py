"""Observability - structured logging for the phone number engine."""
