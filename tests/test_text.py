from data_designer_content_integrity.text import (
    dice_coefficient,
    normalize,
    split_paragraphs,
    split_sentences,
    string_similarity,
    variance,
    word_spans,
    word_tokens,
)


class TestNormalize:
    def test_folds_case_strips_punctuation_and_collapses_whitespace(self):
        assert normalize("  Hello,   World!\n\tAgain. ") == "hello world again"

    def test_empty(self):
        assert normalize("") == ""


class TestDiceCoefficient:
    def test_identical_strings(self):
        assert dice_coefficient("research", "research") == 1.0

    def test_whitespace_is_ignored(self):
        assert dice_coefficient("data set", "dataset") == 1.0

    def test_too_short(self):
        assert dice_coefficient("a", "ab") == 0.0

    def test_partial_overlap(self):
        # ni ig gh ht / na ac ch ht -> one shared bigram out of eight
        assert dice_coefficient("night", "nacht") == 0.25

    def test_bigram_multiplicity(self):
        # "aaaa" has three "aa" bigrams, "aa" has one
        assert dice_coefficient("aaaa", "aa") == 2 * 1 / (4 + 2 - 2)

    def test_string_similarity_normalizes_first(self):
        assert string_similarity("Machine, Learning!", "machine learning") == 1.0

    def test_punctuation_only_strings_count_as_identical(self):
        assert dice_coefficient("", "") == 1.0
        assert string_similarity("-------. ", "=====!") == 1.0


class TestSplitting:
    TEXT = "First sentence here.  Second one follows!   Third? ok"

    def test_sentences_keep_offsets(self):
        sentences = split_sentences(self.TEXT)
        assert [s.text for s in sentences] == ["First sentence here", "Second one follows", "Third", "ok"]
        for s in sentences:
            assert self.TEXT[s.start : s.end] == s.text

    def test_sentence_min_chars_drops_short_fragments(self):
        assert [s.text for s in split_sentences(self.TEXT, min_chars=5)] == ["First sentence here", "Second one follows"]

    def test_paragraphs(self):
        text = "One paragraph here that is long.\n\n\nTiny\n\nAnother paragraph that is long too."
        assert split_paragraphs(text, min_chars=20) == [
            "One paragraph here that is long.",
            "Another paragraph that is long too.",
        ]

    def test_word_spans_are_offset(self):
        spans = word_spans("to  be", offset=10)
        assert [(s.text, s.start, s.end) for s in spans] == [("to", 10, 12), ("be", 14, 16)]

    def test_word_tokens_split_apostrophes(self):
        assert word_tokens("In today's World") == ["in", "today", "s", "world"]


class TestVariance:
    def test_population_variance(self):
        assert variance([1, 2, 3, 4]) == 1.25

    def test_empty(self):
        assert variance([]) == 0.0
