"""Tests for generated environment documents and the checklist."""

from datetime import date


class TestEnvFile:
    """Test .env.netlify rendering."""

    def test_private_before_public(self):
        """Test server-side block precedes client-side block."""
        from vercel_to_netlify.converter.env_classifier import classify_env
        from vercel_to_netlify.converter.env_documents import render_env_file

        content = render_env_file(classify_env({"NEXT_PUBLIC_X": "1", "Y": "2", "Z": "3"}))

        server = content.index("# Server-side variables (not exposed to browser)\nY=2\nZ=3\n")
        client = content.index("# Client-side variables (exposed to browser)\nNEXT_PUBLIC_X=1\n")
        assert server < client

    def test_empty_groups_omitted(self):
        """Test a group without variables gets no heading."""
        from vercel_to_netlify.converter.env_classifier import classify_env
        from vercel_to_netlify.converter.env_documents import render_env_file

        content = render_env_file(classify_env({"SECRET": "s"}))
        assert "Server-side variables" in content
        assert "Client-side variables" not in content

    def test_sources_listed(self):
        """Test the source files appear in the header."""
        from vercel_to_netlify.converter.env_classifier import classify_env
        from vercel_to_netlify.converter.env_documents import render_env_file

        content = render_env_file(classify_env({"A": "1"}), sources=[".env", ".env.local"])
        assert "# Migrated from: .env, .env.local" in content


class TestInstructions:
    """Test the migration instructions markdown."""

    def test_counts(self):
        """Test totals and per-group counts."""
        from vercel_to_netlify.converter.env_classifier import classify_env
        from vercel_to_netlify.converter.env_documents import render_instructions

        variables = {"VITE_A": "1", "B": "2", "C": "3"}
        content = render_instructions(variables, classify_env(variables))

        assert "**Total variables found:** 3" in content
        assert "**Public variables:** 1" in content
        assert "**Private variables:** 2" in content
        assert "`REACT_APP_`" in content


class TestCliScript:
    """Test the Netlify CLI setup script."""

    def test_commands(self):
        """Test one env:set line per variable."""
        from vercel_to_netlify.converter.env_documents import render_cli_script

        script = render_cli_script({"A": "1", "B": "two words"})
        assert script.startswith("#!/bin/bash\n")
        assert 'netlify env:set A "1"\n' in script
        assert 'netlify env:set B "two words"\n' in script

    def test_escaping(self):
        """Test quotes, dollars and backticks are escaped."""
        from vercel_to_netlify.converter.env_documents import render_cli_script, shell_escape

        assert shell_escape('say "hi" $HOME `id`') == 'say \\"hi\\" \\$HOME \\`id\\`'
        assert shell_escape("back\\slash") == "back\\\\slash"
        script = render_cli_script({"PASSWORD": 'p"$w'})
        assert 'netlify env:set PASSWORD "p\\"\\$w"' in script

    def test_unsafe_names_left_out(self, caplog):
        """Test names that are not shell identifiers never reach the script."""
        from vercel_to_netlify.converter.env_documents import render_cli_script
        from vercel_to_netlify.converter.env_parser import parse_env

        variables = parse_env("OK$(touch /tmp/marker)=1\nA;rm -rf ~=2\nGOOD=3\n")
        assert len(variables) == 3

        with caplog.at_level("WARNING", logger="vercel_to_netlify"):
            script = render_cli_script(variables)

        assert "touch" not in script
        assert "rm -rf" not in script
        assert 'netlify env:set GOOD "3"' in script
        assert "Leaving" in caplog.text


class TestChecklist:
    """Test checklist rendering."""

    def test_nextjs_items(self):
        """Test Next.js gets framework-specific items."""
        from vercel_to_netlify.converter.checklist import render_checklist

        content = render_checklist("Next.js", today=date(2024, 5, 1))
        assert "**Framework:** Next.js" in content
        assert "**Generated:** 2024-05-01" in content
        assert "Upgrade Next.js to version 13.5 or higher" in content
        assert "### Next.js Specific Testing" in content

    def test_other_framework_generic_items(self):
        """Test other frameworks get generic items."""
        from vercel_to_netlify.converter.checklist import render_checklist

        content = render_checklist("Vue", today=date(2024, 5, 1))
        assert "**Framework:** Vue" in content
        assert "Upgrade Next.js" not in content
        assert "- [ ] Review framework-specific requirements for Netlify" in content
        assert "- [ ] Test framework-specific features" in content

    def test_deterministic_with_date(self):
        """Test same inputs give the same checklist."""
        from vercel_to_netlify.converter.checklist import render_checklist

        day = date(2024, 1, 2)
        assert render_checklist("Vite", today=day) == render_checklist("Vite", today=day)
