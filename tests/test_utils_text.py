from safename.utils.text import (
    sanitize,
    split_extension,
    transliterate,
    trim_non_alnum_ends,
    truncate,
)


def test_transliterate_folds_accents():
    assert transliterate("café") == "cafe"
    assert transliterate("Straße") == "Strasse"
    assert transliterate("Björk Ñandú") == "Bjork Nandu"


def test_transliterate_non_latin_scripts():
    assert transliterate("北京") == "Bei Jing "


def test_transliterate_drops_control_characters_and_flattens_whitespace():
    assert transliterate("\x00a\tb\x7f") == "a b"
    assert transliterate("line\r\nbreak") == "line  break"
    assert sanitize("line\r\nbreak") == "line-break"
    assert transliterate("tab\there\x1fend").isprintable()
    assert transliterate("") == ""


def test_sanitize_collapses_dash_runs():
    assert sanitize("foo   bar___baz--qux") == "foo-bar-baz-qux"
    assert sanitize("Hello World!") == "Hello-World"
    assert sanitize("a.b_c") == "a-b-c"
    assert sanitize(" leading and trailing ") == "-leading-and-trailing-"


def test_sanitize_without_alphanumerics_is_empty():
    assert sanitize("") == ""
    assert sanitize("!!!") == ""
    assert sanitize("---!!!---") == ""


def test_sanitize_transliterates_first():
    assert sanitize("café crème") == "cafe-creme"
    assert sanitize("北京") == "Bei-Jing-"


def test_split_extension():
    assert split_extension("archive.tar.gz") == ("archive", ".tar.gz")
    assert split_extension("README") == ("README", "")
    assert split_extension("My Report.PDF") == ("My Report", ".PDF")
    assert split_extension(".bashrc") == ("", ".bashrc")
    assert split_extension("") == ("", "")


def test_split_extension_stops_at_non_alphanumeric_segments():
    assert split_extension("notes.v1-final.txt") == ("notes.v1-final", ".txt")
    assert split_extension("trailing.") == ("trailing.", "")
    assert split_extension("résumé.pdf") == ("résumé", ".pdf")


def test_truncate_counts_codepoints_and_clamps_negative_budgets():
    assert truncate("abcdef", 3) == "abc"
    assert truncate("ééé", 2) == "éé"
    assert truncate("abc", 10) == "abc"
    assert truncate("abc", 0) == ""
    assert truncate("abc", -5) == ""


def test_trim_non_alnum_ends():
    assert trim_non_alnum_ends("-foo-bar-") == "foo-bar"
    assert trim_non_alnum_ends("--.x.--") == "x"
    assert trim_non_alnum_ends("----") == ""
    assert trim_non_alnum_ends("a-b") == "a-b"
