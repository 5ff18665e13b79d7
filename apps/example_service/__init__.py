"""Example service configured from the environment."""
