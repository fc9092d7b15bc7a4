"""Kernel: error hierarchy and value types."""
