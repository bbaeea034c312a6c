"""Application layer: use cases and the protocols they depend on."""
