"""
Unit tests for workspace identifier derivation.
"""
import os

from workspace_tint.workspace import (
    expand_tilde,
    get_relative_path,
    get_workspace_identifier,
    normalize_path,
)


class TestPathHelpers:
    """Test path normalization helpers."""

    def test_normalize_path(self):
        assert normalize_path("C:\\Users\\me\\code") == "C:/Users/me/code"

    def test_expand_tilde(self):
        assert expand_tilde("~/code", home="/home/me") == os.path.join("/home/me", "code")
        assert expand_tilde("$HOME/code", home="/home/me") == os.path.join("/home/me", "code")
        assert expand_tilde("/opt/code", home="/home/me") == "/opt/code"

    def test_expand_bare_tilde(self):
        assert expand_tilde("~", home="/home/me") == os.path.join("/home/me", "")
        assert expand_tilde("~\\code", home="/home/me") == os.path.join("/home/me", "code")

    def test_other_users_home_is_not_expanded(self):
        assert expand_tilde("~other/x", home="/home/me") == "~other/x"
        assert expand_tilde("$HOMEDIR/x", home="/home/me") == "$HOMEDIR/x"

    def test_relative_path(self, tmp_path):
        base = tmp_path / "base"
        assert get_relative_path(str(base), str(base / "a" / "b")) == "a/b"
        assert get_relative_path(str(base), str(base)) == "."

    def test_sibling_with_common_prefix_is_outside(self, tmp_path):
        assert get_relative_path(str(tmp_path / "code"), str(tmp_path / "codebase")) is None


class TestGetWorkspaceIdentifier:
    """Test each identifier source."""

    def test_name(self, tmp_path):
        folder = tmp_path / "my-project"
        assert get_workspace_identifier(str(folder), "name") == "my-project"

    def test_name_ignores_trailing_slash(self, tmp_path):
        folder = str(tmp_path / "my-project") + os.sep
        assert get_workspace_identifier(folder, "name") == "my-project"

    def test_relative_to_home(self, tmp_path):
        folder = tmp_path / "code" / "proj"
        identifier = get_workspace_identifier(str(folder), "pathRelativeToHome", home=str(tmp_path))
        assert identifier == "code/proj"

    def test_outside_home_is_absolute(self, tmp_path):
        home = tmp_path / "home"
        folder = tmp_path / "elsewhere" / "proj"
        identifier = get_workspace_identifier(str(folder), "pathRelativeToHome", home=str(home))
        assert identifier == normalize_path(str(folder))

    def test_absolute(self, tmp_path):
        folder = tmp_path / "proj"
        assert get_workspace_identifier(str(folder), "pathAbsolute") == normalize_path(str(folder))

    def test_relative_to_custom(self, tmp_path):
        folder = tmp_path / "code" / "proj"
        identifier = get_workspace_identifier(
            str(folder), "pathRelativeToCustom", custom_base_path="~/code", home=str(tmp_path)
        )
        assert identifier == "proj"

    def test_relative_to_empty_custom_is_absolute(self, tmp_path):
        folder = tmp_path / "proj"
        identifier = get_workspace_identifier(str(folder), "pathRelativeToCustom", custom_base_path="")
        assert identifier == normalize_path(str(folder))

    def test_unknown_source_uses_name(self, tmp_path):
        assert get_workspace_identifier(str(tmp_path / "proj"), "hostname") == "proj"
