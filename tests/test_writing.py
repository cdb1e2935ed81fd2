"""Tests for manifests/writing.py module."""

import stat
from unittest.mock import patch

import pytest

from gem_secrets.exceptions import ManifestIOError
from gem_secrets.manifests.writing import write_manifest, write_manifests


class TestWriteManifest:
    """Tests for single manifest writes."""

    def test_writes_text(self, tmp_path):
        """Test the text ends up in the file."""
        path = write_manifest(tmp_path / "secret.yaml", "kind: Secret\n")

        assert path.read_text() == "kind: Secret\n"

    def test_overwrites_existing_file(self, tmp_path):
        """Test an existing file is replaced."""
        target = tmp_path / "secret.yaml"
        target.write_text("old content that is longer\n")

        write_manifest(target, "new\n")

        assert target.read_text() == "new\n"

    def test_fixed_mode(self, tmp_path):
        """Test the file gets the fixed permission mode."""
        target = tmp_path / "secret.yaml"
        target.write_text("")
        target.chmod(0o600)

        write_manifest(target, "kind: Secret\n")

        assert stat.S_IMODE(target.stat().st_mode) == 0o644

    def test_failed_write_keeps_existing_file(self, tmp_path):
        """Test a write that fails midway leaves the old file intact and no temp file."""
        target = tmp_path / "secret.yaml"
        target.write_text("kind: Secret\nold: true\n")

        with (
            patch("gem_secrets.manifests.writing.os.replace", side_effect=OSError(28, "No space left on device")),
            pytest.raises(ManifestIOError, match="No space left on device"),
        ):
            write_manifest(target, "kind: Secret\nnew: true\n")

        assert target.read_text() == "kind: Secret\nold: true\n"
        assert [path.name for path in tmp_path.iterdir()] == ["secret.yaml"]

    def test_unwritable_path_raises(self, tmp_path):
        """Test a write failure names the path."""
        target = tmp_path / "missing-dir" / "secret.yaml"

        with pytest.raises(ManifestIOError) as exc_info:
            write_manifest(target, "kind: Secret\n")

        assert exc_info.value.path == target
        assert str(target) in str(exc_info.value)


class TestWriteManifests:
    """Tests for writing several manifests."""

    def test_failure_does_not_block_others(self, tmp_path):
        """Test the first and third files are written when the second fails."""
        first = tmp_path / "first.yaml"
        second = tmp_path / "missing-dir" / "second.yaml"
        third = tmp_path / "third.yaml"

        with patch("gem_secrets.manifests.writing.console"):
            results = write_manifests([(first, "one\n"), (second, "two\n"), (third, "three\n")])

        assert [result.ok for result in results] == [True, False, True]
        assert results[1].path == second
        assert "second.yaml" in results[1].error
        assert first.read_text() == "one\n"
        assert third.read_text() == "three\n"
        assert not second.exists()

    def test_reports_each_file(self, tmp_path):
        """Test success and failure are both reported on the console."""
        with patch("gem_secrets.manifests.writing.console") as mock_console:
            write_manifests([(tmp_path / "a.yaml", "a\n"), (tmp_path / "nope" / "b.yaml", "b\n")])

        mock_console.success.assert_called_once()
        mock_console.error.assert_called_once()
