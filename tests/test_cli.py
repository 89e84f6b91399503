"""
Tests for CLI Commands
======================
Tests for the phonodrift CLI interface in phonodrift/cli.py.
"""

import json
import pytest
import sys
import subprocess
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def run_cli(*args):
    return subprocess.run(
        [sys.executable, "-m", "phonodrift", *args],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
    )


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        """Test --version flag."""
        result = run_cli("--version")
        assert result.returncode == 0
        assert "phonodrift" in result.stdout.lower()

    def test_help_flag(self):
        """Test --help flag."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "generate" in result.stdout.lower()
        assert "blend" in result.stdout.lower()

    def test_no_command(self):
        """Test running without a command prints help."""
        result = run_cli()
        assert result.returncode == 0
        assert "usage" in result.stdout.lower()


class TestCLIGenerate:
    """Tests for generate command."""

    def test_generate_json(self):
        """Test JSON output of plain words."""
        result = run_cli("generate", "-n", "4", "--seed", "1", "--json")
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert len(data['words']) == 4
        assert all(isinstance(w, str) for w in data['words'])

    def test_generate_seeded(self):
        """Test seeded runs are reproducible."""
        first = run_cli("generate", "-n", "6", "--seed", "8", "--json", "--drift", "0.4")
        second = run_cli("generate", "-n", "6", "--seed", "8", "--json", "--drift", "0.4")
        assert json.loads(first.stdout) == json.loads(second.stdout)

    def test_generate_trace_json(self):
        """Test traced JSON output carries edges."""
        result = run_cli("generate", "-n", "2", "--seed", "3", "--trace", "--json")
        assert result.returncode == 0
        data = json.loads(result.stdout)
        for word in data['words']:
            assert 'edges' in word
            for edge in word['edges']:
                assert edge['effective_probability'] >= edge['raw_probability'] - 1e-12

    def test_generate_profile(self):
        """Test drift profiles are accepted."""
        result = run_cli("generate", "-n", "2", "--drift", "archaic", "--json")
        assert result.returncode == 0
        assert json.loads(result.stdout)['drift'] == 0.75

    def test_generate_trace_table(self):
        """Test the rich trace table renders."""
        result = run_cli("generate", "-n", "1", "--seed", "4", "--trace", "--syllables", "1", "1")
        assert result.returncode == 0
        assert "surprise" in result.stdout

    def test_generate_parallel(self):
        """Test parallel generation."""
        result = run_cli("generate", "-n", "5", "--parallel", "--workers", "2", "--seed", "1", "--json")
        assert result.returncode == 0
        assert len(json.loads(result.stdout)['words']) == 5

    def test_generate_quiet(self):
        """Test quiet mode prints one word per line."""
        result = run_cli("-q", "generate", "-n", "3", "--seed", "1", "--syllables", "1", "2")
        assert result.returncode == 0
        assert len(result.stdout.splitlines()) == 3

    def test_unknown_profile(self):
        """Test an unknown drift profile fails cleanly."""
        result = run_cli("generate", "--drift", "medieval")
        assert result.returncode == 1
        assert "Error" in result.stderr

    def test_bad_syllables(self):
        """Test an inverted syllable range fails cleanly."""
        result = run_cli("generate", "--syllables", "3", "1")
        assert result.returncode == 1


class TestCLIBlend:
    """Tests for blend command."""

    def test_blend_json(self):
        """Test blended rows sum to one."""
        result = run_cli("blend", "--drift", "0.5", "--json")
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data['alpha'] == 0.5
        for row in data['transitions'].values():
            assert sum(row.values()) == pytest.approx(1.0)

    def test_blend_rows(self):
        """Test restricting the output to given rows."""
        result = run_cli("blend", "--row", "a", "#", "--json")
        assert result.returncode == 0
        assert set(json.loads(result.stdout)['transitions']) == {'a', '#'}

    def test_blend_unknown_row(self):
        """Test an unknown row fails."""
        result = run_cli("blend", "--row", "zz")
        assert result.returncode == 1

    def test_blend_table(self):
        """Test the rich table renders."""
        result = run_cli("blend", "-d", "past")
        assert result.returncode == 0
        assert "Blended model" in result.stdout


class TestCLIProfiles:
    """Tests for profiles command."""

    def test_profiles(self):
        """Test the profile listing."""
        result = run_cli("profiles")
        assert result.returncode == 0
        for name in ("present", "midway", "past"):
            assert name in result.stdout
        assert "Drift profiles" in result.stdout

    def test_profiles_quiet(self):
        """Test quiet mode prints bare profile names."""
        result = run_cli("-q", "profiles")
        assert result.returncode == 0
        assert result.stdout.split() == ["present", "recent", "midway", "archaic", "past"]
