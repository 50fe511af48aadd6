"""Adapters binding domain ports to storage and external tools."""
