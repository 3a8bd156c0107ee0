"""Application helpers: logging, config, metrics and timing."""
