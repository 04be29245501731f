"""Format-aware readers for JSON, YAML and TOML documents."""
