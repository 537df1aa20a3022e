"""
Vercel to Netlify conversion core.

Pure text transformations plus the helpers that apply them to a project
directory.
"""

from vercel_to_netlify.converter.config_mapper import (
    SourceConfig,
    default_netlify_config,
    map_config,
)
from vercel_to_netlify.converter.env_classifier import (
    ClassifiedEnv,
    PUBLIC_PREFIXES,
    PublicPrefix,
    classify_env,
)
from vercel_to_netlify.converter.env_parser import merge_env_sources, parse_env
from vercel_to_netlify.converter.processor import (
    MigrationResult,
    convert_config_text,
    process_migration,
)

__all__ = [
    "SourceConfig",
    "map_config",
    "default_netlify_config",
    "parse_env",
    "merge_env_sources",
    "classify_env",
    "ClassifiedEnv",
    "PublicPrefix",
    "PUBLIC_PREFIXES",
    "MigrationResult",
    "convert_config_text",
    "process_migration",
]
