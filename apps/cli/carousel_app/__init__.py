"""Command-line host for carousel exports."""
