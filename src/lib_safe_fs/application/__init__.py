"""Application-layer contracts."""
