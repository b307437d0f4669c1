"""Unit tests for __main__.py entry point."""

import sys
from unittest.mock import patch

import pytest


@pytest.mark.unit
class TestSidenotesMain:
    """Test sidenotes/__main__.py entry point."""

    def test_main_module_importable(self):
        """Test that __main__.py module is importable."""
        import sidenotes.__main__  # noqa: F401

    def test_main_is_cli_main(self):
        """Test that the module entry point is the CLI main."""
        from sidenotes.__main__ import main
        from sidenotes.cli import main as cli_main

        assert main is cli_main

    def test_main_with_help(self, capsys):
        """Test running with --help argument."""
        from sidenotes.cli import main

        with patch.object(sys, "argv", ["sidenotes", "--help"]):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 0
        assert "sidenotes" in capsys.readouterr().out
