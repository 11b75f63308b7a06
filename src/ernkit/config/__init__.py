"""Configuration — ``ernkit.toml`` settings, section models, and logging."""
