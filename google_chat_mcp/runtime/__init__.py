"""Process entrypoint, CLI and lifecycle."""
