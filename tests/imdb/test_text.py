"""Unit tests for text normalization."""

from src.imdb.text import clean_text, decode_entities, strip_inline_markup


class TestDecodeEntities:
    @staticmethod
    def test_plain_text_unchanged() -> None:
        assert decode_entities("The Shawshank Redemption") == "The Shawshank Redemption"

    @staticmethod
    def test_idempotent_on_decoded_text() -> None:
        once = decode_entities("Caf&eacute; &ldquo;Noir&rdquo;")
        assert decode_entities(once) == once

    @staticmethod
    def test_left_double_quote() -> None:
        assert decode_entities("&ldquo;") == "“"

    @staticmethod
    def test_accented_letters() -> None:
        assert decode_entities("L&eacute;on") == "Léon"
        assert decode_entities("Am&#233;lie") == "Amélie"
        assert decode_entities("Am&#xE9;lie") == "Amélie"

    @staticmethod
    def test_punctuation() -> None:
        assert decode_entities("Tom &amp; Jerry&#39;s") == "Tom & Jerry's"

    @staticmethod
    def test_unknown_entity_passes_through() -> None:
        assert decode_entities("&bogus; here") == "&bogus; here"

    @staticmethod
    def test_lone_ampersand() -> None:
        assert decode_entities("Fast & Furious") == "Fast & Furious"


class TestCleanText:
    @staticmethod
    def test_trims_and_decodes() -> None:
        assert clean_text("  Frank Darabont&nbsp;\n") == "Frank Darabont"

    @staticmethod
    def test_empty() -> None:
        assert clean_text("   ") == ""


class TestStripInlineMarkup:
    @staticmethod
    def test_removes_trailing_link() -> None:
        line = 'Two men bond. <a class="tn15more inline" href="/plotsummary">full summary</a>'
        assert strip_inline_markup(line) == "Two men bond. "

    @staticmethod
    def test_text_without_tags_unchanged() -> None:
        assert strip_inline_markup("142 min") == "142 min"

    @staticmethod
    def test_greedy_across_several_tags() -> None:
        line = 'Date <a href="/a">one</a> (USA) <a href="/b">more</a>'
        assert strip_inline_markup(line) == "Date "
