"""Tests for cloudup/retention.py: RetentionFilter."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from cloudup.errors import CloudupInvalidPatternError, ErrorCode
from cloudup.retention import RetentionFilter


class TestSetPattern:
    def test_empty_pattern_is_accepted(self):
        f = RetentionFilter()
        f.set_pattern("")
        assert f.pattern is None

    def test_malformed_pattern_raises(self):
        f = RetentionFilter()
        with pytest.raises(CloudupInvalidPatternError) as exc_info:
            f.set_pattern("[[;")
        assert exc_info.value.code == ErrorCode.INVALID_PATTERN
        assert exc_info.value.context["pattern"] == "[[;"

    def test_valid_pattern_is_stored(self):
        f = RetentionFilter()
        f.set_pattern(r"images/\.jpg$")
        assert f.pattern is not None
        assert f.pattern.pattern == r"images/\.jpg$"

    def test_invalid_pattern_keeps_previous(self):
        f = RetentionFilter(r"\.png$")
        with pytest.raises(CloudupInvalidPatternError):
            f.set_pattern("(unclosed")
        assert f.pattern.pattern == r"\.png$"

    def test_empty_pattern_clears_previous(self):
        f = RetentionFilter(r"\.png$")
        f.set_pattern("")
        assert f.pattern is None

    def test_constructor_validates(self):
        with pytest.raises(CloudupInvalidPatternError):
            RetentionFilter("[[;")


class TestShouldKeep:
    def test_no_pattern_keeps_nothing(self):
        assert RetentionFilter().should_keep("/any/file.jpg") is False

    def test_match_anywhere_in_path(self):
        f = RetentionFilter(r"images/\.jpg$")
        assert f.should_keep("/srv/static/images/.jpg") is True
        assert f.should_keep("/srv/static/images/photo.png") is False

    def test_windows_path_normalised(self):
        f = RetentionFilter(r"originals/")
        assert f.should_keep("C:\\data\\originals\\a.png") is True


class TestApply:
    def test_matching_file_kept(self, tmp_path):
        target = tmp_path / "images" / ".jpg"
        target.parent.mkdir()
        target.write_bytes(b"x")
        metrics = MagicMock()
        f = RetentionFilter(r"images/\.jpg$", metrics=metrics)

        assert f.apply(target) is True
        assert target.exists()
        metrics.increment.assert_called_once_with("cloudup.files_kept_total")

    def test_non_matching_file_deleted(self, tmp_path):
        target = tmp_path / "images" / "photo.png"
        target.parent.mkdir()
        target.write_bytes(b"x")
        metrics = MagicMock()
        f = RetentionFilter(r"images/\.jpg$", metrics=metrics)

        assert f.apply(target) is False
        assert not target.exists()
        metrics.increment.assert_called_once_with("cloudup.files_deleted_total")

    def test_no_pattern_deletes(self, tmp_path):
        target = tmp_path / "a.png"
        target.write_bytes(b"x")
        assert RetentionFilter().apply(str(target)) is False
        assert not target.exists()

    def test_missing_file_is_not_an_error(self, tmp_path):
        assert RetentionFilter().apply(tmp_path / "gone.png") is False
