"""Tests for Mention Counter."""

from brandlens.analysis.aliases import generate_aliases
from brandlens.analysis.mention_counter import claim_mentions, count_mentions


class TestCountMentions:
    """Test whole-word mention counting."""

    def test_brand_and_competitor(self):
        text = "Acme is better than Globex. Visit acme.com for details."
        counts = count_mentions(
            text.lower(),
            "Acme Corp",
            generate_aliases("Acme Corp"),
            [("Globex", generate_aliases("Globex"))],
        )
        assert counts == {"Acme Corp": 1, "Globex": 1}

    def test_case_insensitive(self):
        counts = count_mentions("GLOBEX and globex and Globex", "Globex", ["globex"])
        assert counts == {"Globex": 3}

    def test_word_boundary_prevents_partial(self):
        counts = count_mentions("acmecorporation and acmes", "Acme", ["acme"])
        assert counts == {"Acme": 0}

    def test_punctuation_boundaries(self):
        counts = count_mentions("(acme), acme! 'acme'", "Acme", ["acme"])
        assert counts == {"Acme": 3}

    def test_hostname_label_is_not_a_mention(self):
        counts = count_mentions("see acme.com or www.acme.io", "Acme", ["acme"])
        assert counts == {"Acme": 0}

    def test_sentence_end_period_still_counts(self):
        counts = count_mentions("we recommend acme. it is fine", "Acme", ["acme"])
        assert counts == {"Acme": 1}

    def test_regex_special_characters_escaped(self):
        counts = count_mentions("c++ is fast, c is older", "C++", ["c++"])
        assert counts == {"C++": 1}

    def test_full_name_alias_consumes_span(self):
        # "acme corp" is credited once; "acme" does not re-match inside it
        counts = count_mentions("acme corp and acme", "Acme Corp", generate_aliases("Acme Corp"))
        assert counts == {"Acme Corp": 2}

    def test_aliases_tried_in_given_order(self):
        # "acme" comes first here, so it claims the start of "acme corp"
        spans = claim_mentions("acme corp", "Acme Corp", ("acme", "acme corp"))
        assert spans == {"Acme Corp": [(0, 4)]}

    def test_brand_consumes_before_competitor(self):
        counts = count_mentions(
            "acme globex rocks",
            "Acme",
            ["acme globex"],
            [("Globex", ["globex"])],
        )
        assert counts == {"Acme": 1, "Globex": 0}

    def test_competitors_processed_in_order(self):
        text = "red bull is everywhere"
        first = count_mentions(text, "Brand", ["brand"], [("Red Bull", ["red bull"]), ("Bull", ["bull"])])
        assert first == {"Brand": 0, "Red Bull": 1, "Bull": 0}

        second = count_mentions(text, "Brand", ["brand"], [("Bull", ["bull"]), ("Red Bull", ["red bull"])])
        assert second == {"Brand": 0, "Bull": 1, "Red Bull": 0}

    def test_keys_keep_input_order(self):
        counts = count_mentions("", "Brand", ["brand"], [("Zeta", ["zeta"]), ("Alpha", ["alpha"])])
        assert list(counts) == ["Brand", "Zeta", "Alpha"]

    def test_empty_text(self):
        counts = count_mentions("", "Acme", ["acme"], [("Globex", ["globex"])])
        assert counts == {"Acme": 0, "Globex": 0}

    def test_empty_alias_ignored(self):
        counts = count_mentions("some words here", "", generate_aliases(""))
        assert counts == {"": 0}


class TestClaimMentions:
    """Test the no-double-counting invariant on claimed spans."""

    def test_spans_never_shared(self):
        text = "acme corp, acme, ac and corp. acme corp again; corp wins"
        spans = claim_mentions(
            text,
            "Acme Corp",
            generate_aliases("Acme Corp"),
            [("Corp", generate_aliases("Corp")), ("Acme", generate_aliases("Acme"))],
        )
        flat = [span for found in spans.values() for span in found]
        assert len(flat) == len(set(flat))
        for i, (start_a, end_a) in enumerate(flat):
            for start_b, end_b in flat[i + 1 :]:
                assert end_a <= start_b or end_b <= start_a

    def test_spans_point_at_alias_text(self):
        text = "Acme is better than Globex."
        spans = claim_mentions(text, "Acme", ["acme"], [("Globex", ["globex"])])
        [(start, end)] = spans["Acme"]
        assert text[start:end].lower() == "acme"
        [(start, end)] = spans["Globex"]
        assert text[start:end].lower() == "globex"

    def test_later_entity_gets_nothing_from_claimed_text(self):
        spans = claim_mentions("acme corp", "Acme Corp", ["acme corp"], [("Acme", ["acme"])])
        assert spans["Acme Corp"] == [(0, 9)]
        assert spans["Acme"] == []
