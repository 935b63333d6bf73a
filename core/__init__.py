"""Core logic for AI Utility Hub.

This package contains the upstream provider, prompt templates and output
normalization. It has ZERO dependency on the web framework.
"""

__version__ = "0.1.0"
