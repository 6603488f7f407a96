"""Tests for book name normalization."""

from biblia_tui.data.normalize import BookIndex, display_name, normalize_book_fragment


class TestNormalizeBookFragment:
    """Test the lookup key normalization."""

    def test_numbered_book_variants(self):
        """Spaces, underscores and case all normalize the same way."""
        assert normalize_book_fragment("1 samuel") == "1_samuel"
        assert normalize_book_fragment("1_samuel") == "1_samuel"
        assert normalize_book_fragment("1   Samuel") == "1_samuel"
        assert normalize_book_fragment("1 _ SAMUEL") == "1_samuel"

    def test_case_insensitive(self):
        assert normalize_book_fragment("GEneSis") == normalize_book_fragment("genesis")

    def test_idempotent(self):
        for raw in ["1 Samuel", "cantar  de los_cantares", "Genesis", "\t2 Juan\n"]:
            once = normalize_book_fragment(raw)
            assert normalize_book_fragment(once) == once

    def test_internal_spacing_matters(self):
        """Only separators collapse; a split word stays split."""
        assert normalize_book_fragment("gene sis") != normalize_book_fragment("genesis")


class TestBookIndex:
    """Test exact-after-normalization lookup."""

    def test_resolve(self):
        index = BookIndex(["genesis", "1_samuel", "1_corintios"])
        assert index.resolve("Genesis") == "genesis"
        assert index.resolve("1 SAMUEL") == "1_samuel"
        assert index.resolve("1_corintios") == "1_corintios"

    def test_no_partial_match(self):
        index = BookIndex(["genesis"])
        assert index.resolve("gen") is None
        assert index.resolve("genesiss") is None
        assert "gen" not in index
        assert "GENESIS" in index

    def test_collision_prefers_catalog_order(self):
        """When two stored names normalize alike, the earlier canon book wins."""
        index = BookIndex(["1 samuel", "1_samuel"])
        # "1_samuel" is the catalog name; "1 samuel" is not in the catalog
        assert index.resolve("1 samuel") == "1_samuel"
        assert len(index) == 1

    def test_collision_outside_catalog_keeps_first(self):
        index = BookIndex(["Foo Bar", "foo_bar"])
        assert index.resolve("foo bar") == "Foo Bar"


class TestDisplayName:
    def test_display_name(self):
        assert display_name("1_corintios") == "1 corintios"
        assert display_name("genesis") == "genesis"
