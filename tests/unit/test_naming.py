"""Tests for cloudup/naming.py: clean_asset_name."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cloudup.naming import clean_asset_name

# order: path, base_path, prepend, expected result
ASSETS = [
    ("/tmp/css/default.css", "/tmp/", "new", "new/css/default"),
    ("/a/b/c.png", "/a", "", "b/c"),
    ("/a/b/c.png", "/a ", "  ", "b/c"),
    ("/a/b/c.png", "", "/x", "x/a/b/c"),
]


class TestCleanAssetName:
    @pytest.mark.parametrize(("path", "base", "prepend", "expected"), ASSETS)
    def test_known_names(self, path, base, prepend, expected):
        assert clean_asset_name(path, base, prepend) == expected

    def test_base_not_a_prefix_is_ignored(self):
        assert clean_asset_name("/a/b/c.png", "/zzz") == "a/b/c"

    def test_base_must_match_whole_segment(self):
        assert clean_asset_name("/ab/c.png", "/a") == "ab/c"

    def test_only_last_extension_removed(self):
        assert clean_asset_name("/a/archive.tar.gz", "/a") == "archive.tar"

    def test_multi_dot_name_shrinks_when_renormalised(self):
        once = clean_asset_name("/a/b/c.tar.gz", "/a")
        assert once == "b/c.tar"
        assert clean_asset_name(once, "/a") == "b/c"

    def test_dotted_directory_untouched(self):
        assert clean_asset_name("/a/v1.2/c.png", "/a") == "v1.2/c"

    def test_no_extension(self):
        assert clean_asset_name("/a/b/README", "/a") == "b/README"

    def test_bare_name_without_base(self):
        assert clean_asset_name("logo.png") == "logo"

    def test_windows_separators(self):
        assert clean_asset_name("C:\\assets\\img\\logo.png", "C:\\assets") == "img/logo"

    def test_prepend_slashes_trimmed(self):
        assert clean_asset_name("/a/b.png", "/a", " /static/ ") == "static/b"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------
#
# File names carry at most one dot; see
# test_multi_dot_name_shrinks_when_renormalised for the multi-dot case.

_segment = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789_-", min_size=1, max_size=8)
_ext = st.sampled_from(["", ".png", ".jpg", ".css"])


@st.composite
def _paths(draw):
    dirs = draw(st.lists(_segment, min_size=0, max_size=4))
    filename = draw(_segment) + draw(_ext)
    return "/" + "/".join([*dirs, filename])


@st.composite
def _path_and_base(draw):
    path = draw(_paths())
    segments = path.strip("/").split("/")
    depth = draw(st.integers(min_value=0, max_value=len(segments) - 1))
    base = "/" + "/".join(segments[:depth]) if depth else ""
    return path, base


class TestCleanAssetNameProperties:
    @given(_path_and_base(), st.sampled_from(["", "new", "  x  "]))
    def test_deterministic(self, pair, prepend):
        path, base = pair
        assert clean_asset_name(path, base, prepend) == clean_asset_name(path, base, prepend)

    @given(_path_and_base())
    def test_idempotent_under_restripping(self, pair):
        path, base = pair
        once = clean_asset_name(path, base)
        assert clean_asset_name(once, base) == once

    @given(_path_and_base(), st.sampled_from(["", "new", "/x/"]))
    def test_no_leading_slash(self, pair, prepend):
        path, base = pair
        assert not clean_asset_name(path, base, prepend).startswith("/")

    @given(_path_and_base())
    def test_extension_removed(self, pair):
        path, base = pair
        last = clean_asset_name(path, base).rsplit("/", 1)[-1]
        assert "." not in last

    @given(_path_and_base())
    def test_prepend_is_leading_segment(self, pair):
        path, base = pair
        assert clean_asset_name(path, base, "new") == "new/" + clean_asset_name(path, base)
