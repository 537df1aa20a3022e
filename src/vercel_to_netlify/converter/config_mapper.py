"""
Config Mapper

Translates a vercel.json document into netlify.toml text.
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from vercel_to_netlify.wizard.exceptions import ConfigParseError


# Default publish directories for frameworks Vercel infers them for
FRAMEWORK_PUBLISH_DIRS = {
    "nextjs": ".next",
}

FUNCTIONS_DIRECTORY = "netlify/functions"

BARE_KEY_RE = re.compile(r"^[A-Za-z0-9_-]+$")

_TOML_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}

DEFAULT_NETLIFY_CONFIG = """# Netlify configuration

[build]
  # Your build command
  command = "npm run build"
  # Directory to publish (change based on your framework)
  publish = "dist"

# Example redirect
# [[redirects]]
#   from = "/old-path"
#   to = "/new-path"
#   status = 301

# Example headers
# [[headers]]
#   for = "/*"
#   [headers.values]
#     X-Frame-Options = "DENY"
#     X-XSS-Protection = "1; mode=block"
"""


@dataclass
class Redirect:
    source: str = ""
    destination: str = ""
    permanent: bool = False
    has: Any = None

    @property
    def status(self) -> int:
        return 301 if self.permanent else 302

    @property
    def is_conditional(self) -> bool:
        return self.has is not None


@dataclass
class Rewrite:
    source: str = ""
    destination: str = ""


@dataclass
class HeaderPair:
    key: str
    value: str = ""


@dataclass
class HeaderRule:
    source: str = ""
    headers: List[HeaderPair] = field(default_factory=list)


@dataclass
class SourceConfig:
    """The subset of vercel.json the migrator understands."""
    build_command: Optional[str] = None
    dev_command: Optional[str] = None
    output_directory: Optional[str] = None
    framework: Optional[str] = None
    redirects: List[Redirect] = field(default_factory=list)
    rewrites: List[Rewrite] = field(default_factory=list)
    headers: List[HeaderRule] = field(default_factory=list)
    has_env: bool = False
    has_functions: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "SourceConfig":
        """Build from a decoded vercel.json object.

        Raises:
            ConfigParseError: if the document or one of its lists has the wrong shape
        """
        if not isinstance(data, dict):
            raise ConfigParseError(
                "vercel.json must contain a JSON object",
                details=f"Got {type(data).__name__}"
            )

        return cls(
            build_command=_optional_text(data, "buildCommand"),
            dev_command=_optional_text(data, "devCommand"),
            output_directory=_optional_text(data, "outputDirectory"),
            framework=_optional_text(data, "framework"),
            redirects=[
                Redirect(
                    source=_text(entry.get("source")),
                    destination=_text(entry.get("destination")),
                    permanent=bool(entry.get("permanent")),
                    has=entry.get("has"),
                )
                for entry in _entries(data, "redirects")
            ],
            rewrites=[
                Rewrite(
                    source=_text(entry.get("source")),
                    destination=_text(entry.get("destination")),
                )
                for entry in _entries(data, "rewrites")
            ],
            headers=[
                HeaderRule(
                    source=_text(entry.get("source")),
                    headers=[
                        HeaderPair(key=_text(pair.get("key")), value=_text(pair.get("value")))
                        for pair in _entries(entry, "headers")
                    ],
                )
                for entry in _entries(data, "headers")
            ],
            has_env=data.get("env") is not None,
            has_functions=data.get("functions") is not None,
        )

    @classmethod
    def from_json(cls, text: str) -> "SourceConfig":
        """Parse vercel.json text.

        Raises:
            ConfigParseError: on invalid JSON or an unexpected document shape
        """
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            raise ConfigParseError("vercel.json is not valid JSON", details=str(e))
        return cls.from_dict(data)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _optional_text(data: Dict[str, Any], name: str) -> Optional[str]:
    value = data.get(name)
    if not value:
        return None
    return _text(value)


def _entries(data: Dict[str, Any], name: str) -> List[Dict[str, Any]]:
    value = data.get(name)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigParseError(f"'{name}' must be a list", field=name)
    for entry in value:
        if not isinstance(entry, dict):
            raise ConfigParseError(f"Every '{name}' entry must be an object", field=name)
    return value


def _quote(value: str) -> str:
    """Render a TOML basic string."""
    return '"' + "".join(_escape_char(char) for char in value) + '"'


def _escape_char(char: str) -> str:
    if char in _TOML_ESCAPES:
        return _TOML_ESCAPES[char]
    if ord(char) < 0x20 or ord(char) == 0x7F:
        return f"\\u{ord(char):04X}"
    return char


def _toml_key(key: str) -> str:
    return key if BARE_KEY_RE.match(key) else _quote(key)


def _publish_directory(source: SourceConfig) -> Optional[str]:
    if source.output_directory:
        return source.output_directory
    return FRAMEWORK_PUBLISH_DIRS.get(source.framework or "")


def map_config(source: SourceConfig) -> str:
    """Render netlify.toml text for a source configuration.

    Sections appear in a fixed order (build, redirects, rewrites, headers,
    environment, functions) and only when the source has data for them.
    """
    lines = [
        "# Netlify configuration",
        "# Migrated from vercel.json",
        "",
    ]

    if source.build_command or source.dev_command:
        lines.append("[build]")
        if source.build_command:
            lines.append(f"  command = {_quote(source.build_command)}")
        publish = _publish_directory(source)
        if publish:
            lines.append(f"  publish = {_quote(publish)}")
        lines.append("")

    if source.redirects:
        lines.append("# Redirects")
        for redirect in source.redirects:
            lines.append("[[redirects]]")
            lines.append(f"  from = {_quote(redirect.source)}")
            lines.append(f"  to = {_quote(redirect.destination)}")
            lines.append(f"  status = {redirect.status}")
            if redirect.is_conditional:
                lines.append("  # Note: Conditional redirects may need manual adjustment")
            lines.append("")

    # Netlify has no separate rewrite table; a 200 redirect proxies in place
    if source.rewrites:
        lines.append("# Rewrites")
        for rewrite in source.rewrites:
            lines.append("[[redirects]]")
            lines.append(f"  from = {_quote(rewrite.source)}")
            lines.append(f"  to = {_quote(rewrite.destination)}")
            lines.append("  status = 200")
            lines.append("")

    if source.headers:
        lines.append("# Headers")
        for rule in source.headers:
            lines.append("[[headers]]")
            lines.append(f"  for = {_quote(rule.source)}")
            if rule.headers:
                lines.append("  [headers.values]")
                for pair in rule.headers:
                    lines.append(f"    {_toml_key(pair.key)} = {_quote(pair.value)}")
            lines.append("")

    if source.has_env:
        lines.append("# Environment Variables")
        lines.append("# Note: Environment variables should be set in Netlify UI or netlify.toml")
        lines.append("# See .env.netlify for variables to migrate")
        lines.append("")

    if source.has_functions:
        lines.append("[functions]")
        lines.append(f"  directory = {_quote(FUNCTIONS_DIRECTORY)}")
        lines.append("  # Note: Vercel API routes should be migrated to Netlify Functions")
        lines.append("")

    return "\n".join(lines) + "\n"


def default_netlify_config() -> str:
    """The starter netlify.toml used when there is no usable vercel.json."""
    return DEFAULT_NETLIFY_CONFIG
