"""Unit tests for notelinks.api.link.target_exists."""

from notelinks.api.link.target_exists import target_exists


def test_existing_file(notes_dir):
    (notes_dir / "b.html").touch()
    assert target_exists("b.html") is True


def test_missing_file(notes_dir):
    assert target_exists("b.html") is False


def test_relative_to_working_directory(notes_dir):
    (notes_dir / "sub").mkdir()
    (notes_dir / "sub" / "c.html").touch()
    assert target_exists("sub/c.html") is True
    assert target_exists("c.html") is False


def test_empty_target(notes_dir):
    assert target_exists("") is False


def test_query_and_fragment_checked_literally(notes_dir):
    (notes_dir / "c.html").touch()
    assert target_exists("c.html?page=2") is False
    assert target_exists("c.html#top") is False

    (notes_dir / "d.html?v=1").touch()
    assert target_exists("d.html?v=1") is True


def test_percent_escapes_not_decoded(notes_dir):
    (notes_dir / "my note.html").touch()
    assert target_exists("my%20note.html") is False
    assert target_exists("my note.html") is True


def test_absolute_url_is_not_special(notes_dir):
    assert target_exists("https://example.com/b.html") is False
