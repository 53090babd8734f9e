"""Tests for ignore rules."""

from tealoop.utils.ignore import IgnoreRules


def test_builtin_ignores(temp_dir):
    """Test that built-in patterns are ignored."""
    rules = IgnoreRules(temp_dir)

    assert rules.should_ignore(temp_dir / ".git", is_dir=True)
    assert rules.should_ignore(temp_dir / "node_modules", is_dir=True)
    assert rules.should_ignore(temp_dir / ".tealoop" / "runs", is_dir=True)
    assert not rules.should_ignore(temp_dir / "paper.pdf")


def test_gitignore_respected(temp_dir):
    """Test that .gitignore is respected."""
    (temp_dir / ".gitignore").write_text("# drafts\n*.tmp.pdf\nbuild/\n")

    rules = IgnoreRules(temp_dir)

    assert rules.should_ignore(temp_dir / "draft.tmp.pdf")
    assert rules.should_ignore(temp_dir / "build", is_dir=True)
    assert not rules.should_ignore(temp_dir / "build")
    assert not rules.should_ignore(temp_dir / "src" / "final.pdf")


def test_outside_root_ignored(temp_dir):
    """Paths outside the walk root are always ignored."""
    rules = IgnoreRules(temp_dir / "inner")

    assert rules.should_ignore(temp_dir / "other.pdf")
