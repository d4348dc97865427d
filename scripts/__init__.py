"""Command line helpers run from the repository root."""
