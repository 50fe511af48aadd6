"""Domain layer: alias records, stores, parsing, resolution and orchestration."""
