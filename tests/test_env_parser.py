"""Tests for .env parsing and classification."""

import pytest


class TestParseEnv:
    """Test the .env parser."""

    def test_scenario(self):
        """Test comments and blank lines are skipped."""
        from vercel_to_netlify.converter.env_parser import parse_env

        variables = parse_env("NEXT_PUBLIC_X=1\nY=2\n# comment\n\nZ=3")
        assert variables == {"NEXT_PUBLIC_X": "1", "Y": "2", "Z": "3"}
        assert list(variables) == ["NEXT_PUBLIC_X", "Y", "Z"]

    def test_double_quotes_stripped(self):
        """Test one pair of double quotes is removed."""
        from vercel_to_netlify.converter.env_parser import parse_env

        assert parse_env('KEY="value"') == {"KEY": "value"}

    def test_single_quotes_and_inner_equals(self):
        """Test only the first '=' splits and single quotes are removed."""
        from vercel_to_netlify.converter.env_parser import parse_env

        assert parse_env("KEY='a=b'") == {"KEY": "a=b"}

    def test_nested_quotes_kept(self):
        """Test only the outer quote pair is removed."""
        from vercel_to_netlify.converter.env_parser import parse_env

        assert parse_env('KEY="\'inner\'"') == {"KEY": "'inner'"}

    @pytest.mark.parametrize("raw, expected", [
        ('"', '"'),
        ('"abc\'', '"abc\''),
        ("''", ""),
        ("plain", "plain"),
    ])
    def test_quote_edge_cases(self, raw, expected):
        """Test mismatched or single quote characters are left alone."""
        from vercel_to_netlify.converter.env_parser import parse_env

        assert parse_env(f"KEY={raw}")["KEY"] == expected

    def test_whitespace_trimmed(self):
        """Test keys and values are trimmed independently."""
        from vercel_to_netlify.converter.env_parser import parse_env

        assert parse_env("   API_URL  =  https://x.dev/?a=1  \r\n") == {"API_URL": "https://x.dev/?a=1"}

    def test_lines_without_equals_ignored(self):
        """Test malformed lines are skipped silently."""
        from vercel_to_netlify.converter.env_parser import parse_env

        assert parse_env("export\nJUSTTEXT\n=novalue\nOK=1") == {"OK": "1"}

    def test_empty_value(self):
        """Test a key with an empty value is kept."""
        from vercel_to_netlify.converter.env_parser import parse_env

        assert parse_env("EMPTY=") == {"EMPTY": ""}

    def test_keys_case_sensitive(self):
        """Test keys differing in case are distinct."""
        from vercel_to_netlify.converter.env_parser import parse_env

        assert parse_env("key=1\nKEY=2") == {"key": "1", "KEY": "2"}

    def test_duplicate_key_last_wins(self):
        """Test a repeated key keeps its last value."""
        from vercel_to_netlify.converter.env_parser import parse_env

        assert parse_env("A=1\nA=2") == {"A": "2"}

    def test_merge_last_write_wins(self):
        """Test later sources override earlier ones."""
        from vercel_to_netlify.converter.env_parser import merge_env_sources

        merged = merge_env_sources(["A=1\nB=1", "A=2"])
        assert merged == {"A": "2", "B": "1"}


class TestClassifyEnv:
    """Test public/private classification."""

    def test_scenario(self):
        """Test the NEXT_PUBLIC_ prefix is public."""
        from vercel_to_netlify.converter.env_classifier import classify_env

        classified = classify_env({"NEXT_PUBLIC_X": "1", "Y": "2", "Z": "3"})
        assert classified.public_keys == ["NEXT_PUBLIC_X"]
        assert classified.private_keys == ["Y", "Z"]

    def test_all_known_prefixes(self):
        """Test Next.js, Vite and Create React App prefixes."""
        from vercel_to_netlify.converter.env_classifier import classify_env

        classified = classify_env({
            "NEXT_PUBLIC_A": "1",
            "VITE_B": "2",
            "REACT_APP_C": "3",
            "DATABASE_URL": "4",
            "next_public_lower": "5",
        })
        assert classified.public_keys == ["NEXT_PUBLIC_A", "VITE_B", "REACT_APP_C"]
        assert classified.private_keys == ["DATABASE_URL", "next_public_lower"]

    def test_partition_is_total_and_disjoint(self):
        """Test every key lands in exactly one group."""
        from vercel_to_netlify.converter.env_classifier import classify_env

        variables = {f"VAR_{i}": str(i) for i in range(5)}
        variables.update({f"VITE_{i}": str(i) for i in range(3)})
        classified = classify_env(variables)

        assert len(classified) == len(variables)
        assert not set(classified.public_keys) & set(classified.private_keys)
        assert set(classified.public_keys) | set(classified.private_keys) == set(variables)

    def test_custom_prefixes(self):
        """Test the prefix set can be extended."""
        from vercel_to_netlify.converter.env_classifier import (
            PUBLIC_PREFIXES,
            PublicPrefix,
            classify_env,
        )

        prefixes = PUBLIC_PREFIXES + (PublicPrefix("PUBLIC_", "SvelteKit"),)
        classified = classify_env({"PUBLIC_API": "x", "SECRET": "y"}, prefixes)
        assert classified.public_keys == ["PUBLIC_API"]

    def test_empty_mapping(self):
        """Test an empty mapping gives empty groups."""
        from vercel_to_netlify.converter.env_classifier import classify_env

        classified = classify_env({})
        assert classified.public == []
        assert classified.private == []
