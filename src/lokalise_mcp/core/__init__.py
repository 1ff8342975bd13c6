"""
Core components for Lokalise MCP.

This package provides the Lokalise API client accessor, the error model,
Markdown formatting helpers, logging setup and the retry utilities.
"""

__all__ = ["api", "constants", "errors", "formatting", "logging_setup", "retry", "session"]
