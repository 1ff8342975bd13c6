"""
Lokalise domains.

Each subpackage is a vertical slice of the Lokalise API (types, service,
controller, formatter and the CLI, tool and resource bindings) exposing a
``DOMAIN`` module descriptor.
"""

from lokalise_mcp.domains.registry import DomainRegistry, create_default_registry

__all__ = ["DomainRegistry", "create_default_registry"]
