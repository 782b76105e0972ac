"""Core services shared by the shell and the entry point."""
