"""Tests for the command line entry point."""

from unittest.mock import patch

from postdeck import __main__ as cli
from postdeck.snapshot import PostDraft
from postdeck.version import BuildInfo, get_version_string


def test_version_flag(capsys):
    with patch("postdeck.__main__.get_version_string", return_value="abc1234 2026-01-01"):
        assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "abc1234 2026-01-01"


def test_short_version_flag(capsys):
    with patch("postdeck.__main__.get_version_string", return_value="unknown unknown"):
        assert cli.main(["-V"]) == 0
    assert "unknown" in capsys.readouterr().out


def test_max_history_passed_to_app():
    with patch("postdeck.textual_app.main") as run_app:
        assert cli.main(["--max-history", "20"]) == 0
    run_app.assert_called_once_with(max_size=20, posts=None)


def test_no_arguments_uses_configured_size():
    with patch("postdeck.textual_app.main") as run_app:
        assert cli.main([]) == 0
    run_app.assert_called_once_with(max_size=None, posts=None)


def test_headlines_become_deck_posts():
    with patch("postdeck.textual_app.main") as run_app:
        assert cli.main(["Launch", "--max-history", "5", "Follow-up"]) == 0
    run_app.assert_called_once_with(
        max_size=5, posts=[PostDraft(headline="Launch"), PostDraft(headline="Follow-up")])


def test_max_history_without_value(capsys):
    assert cli.main(["--max-history"]) == 2
    assert "usage" in capsys.readouterr().err


def test_invalid_max_history(capsys):
    for value in ("0", "abc", "10001"):
        assert cli.main(["--max-history", value]) == 2
    assert "--max-history must be between" in capsys.readouterr().err


def test_unknown_argument(capsys):
    assert cli.main(["--bogus"]) == 2
    assert "usage" in capsys.readouterr().err


def test_version_string_formats_build_info():
    info = BuildInfo(commit="0123456789abcdef", date="2026-10-18T10:00:00+00:00", dirty=True)
    with patch("postdeck.version.get_build_info", return_value=info):
        assert get_version_string() == "0123456-dirty 2026-10-18T10:00:00+00:00"


def test_version_string_unknown():
    with patch("postdeck.version.get_build_info", return_value=BuildInfo(None, None)):
        assert get_version_string() == "unknown unknown"
