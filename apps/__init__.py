"""
envflag Applications Package.

Contains:
- example_service: Example program configured entirely from EXAMPLE_* variables
"""

__version__ = "0.1.0"
