"""Command line interface for relaychat."""
