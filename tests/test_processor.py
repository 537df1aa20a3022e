"""Tests for the shared migration processor."""

import json
from datetime import date

import pytest


class TestConvertConfigText:
    """Test the default-document policy."""

    @pytest.mark.parametrize("text", [None, "", "   ", "{broken", "[1, 2]", '"just a string"'])
    def test_default_document(self, text):
        """Test missing or unusable input yields the starter netlify.toml."""
        from vercel_to_netlify.converter.config_mapper import default_netlify_config
        from vercel_to_netlify.converter.processor import convert_config_text

        assert convert_config_text(text) == default_netlify_config()

    def test_default_document_content(self):
        """Test the starter document shape."""
        from vercel_to_netlify.converter.config_mapper import default_netlify_config

        content = default_netlify_config()
        assert 'command = "npm run build"' in content
        assert 'publish = "dist"' in content
        assert "# [[redirects]]" in content
        assert "# [[headers]]" in content

    def test_valid_json_is_mapped(self):
        """Test valid vercel.json goes through the mapper."""
        from vercel_to_netlify.converter.processor import convert_config_text

        toml = convert_config_text(json.dumps({"buildCommand": "yarn build"}))
        assert toml.startswith("# Netlify configuration\n# Migrated from vercel.json\n")
        assert 'command = "yarn build"' in toml


class TestProcessMigration:
    """Test process_migration outputs."""

    def test_config_only(self):
        """Test only netlify.toml is produced without env text or checklist."""
        from vercel_to_netlify.converter.processor import process_migration

        result = process_migration(vercel_json='{"buildCommand": "npm run build"}')
        assert set(result.to_dict()) == {"netlifyToml"}

    def test_all_documents(self):
        """Test every document is produced when requested."""
        from vercel_to_netlify.converter.processor import process_migration

        result = process_migration(
            vercel_json=None,
            env_text="NEXT_PUBLIC_X=1\nY=2",
            framework="Next.js",
            include_checklist=True,
            today=date(2024, 3, 4),
        )
        data = result.to_dict()
        assert set(data) == {"netlifyToml", "envFile", "envInstructions", "cliCommands", "checklist"}
        assert data["envFile"].index("Y=2") < data["envFile"].index("NEXT_PUBLIC_X=1")
        assert 'netlify env:set Y "2"' in data["cliCommands"]
        assert "**Generated:** 2024-03-04" in data["checklist"]

    def test_empty_framework_falls_back(self):
        """Test an empty framework name uses the default."""
        from vercel_to_netlify.converter.processor import process_migration

        result = process_migration(include_checklist=True, framework="")
        assert "**Framework:** Next.js" in result.checklist
