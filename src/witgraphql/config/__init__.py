"""Configuration module using Pydantic Settings.

Usage:
    from witgraphql.config import SchemaSettings

    settings = SchemaSettings(query_type_name="Component")
"""

from witgraphql.config.settings import SchemaSettings

__all__ = [
    "SchemaSettings",
]
