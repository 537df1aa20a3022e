"""
vercel-to-netlify: migrate Vercel projects to Netlify

Converts vercel.json and .env files into netlify.toml, environment variable
files, instructions and a setup script.
"""

try:
    from importlib.metadata import version
    __version__ = version("vercel-to-netlify")
except Exception:
    __version__ = "0.0.0"  # Fallback for development

__all__ = ["__version__"]
