import pytest

from data_designer_content_integrity.ai_detection import (
    AI_CLICHES,
    BURSTINESS,
    DEFAULT_DETECTION_PARAMETERS,
    EMOTIONAL_LANGUAGE,
    INDICATOR_NAMES,
    PARAGRAPH_UNIFORMITY,
    PERPLEXITY,
    PERSONAL_PRONOUNS,
    REPETITIVE_PATTERNS,
    SENTENCE_STRUCTURE,
    VOCABULARY_DIVERSITY,
    DetectionParameters,
    Indicator,
    analyze_ai,
    classify,
    combine_indicators,
)
from data_designer_content_integrity.errors import InvalidInputError

AI_TEXT = """
In today's digital world, it is important to note that artificial intelligence plays a crucial role in modern society.
Furthermore, it is worth mentioning that machine learning algorithms are becoming increasingly sophisticated.
Moreover, the landscape of technology continues to evolve at an unprecedented rate.
Additionally, it should be noted that these advancements have significant implications.
"""

HUMAN_TEXT = (
    "I love this city. Honestly, I was thrilled when we finally moved here after years of waiting, "
    "and my kids were so happy they ran straight into the yard screaming about the huge old oak tree by the fence. "
    "Rain? We hate it. But you get used to it, and I'm frankly delighted that I'm not stuck in traffic "
    "for two hours every single day like I was back home!"
)


def _by_name(result):
    return {i.name: i for i in result.indicators}


class TestAnalyzeAI:
    def test_ai_text_classifies_as_ai(self):
        result = analyze_ai(AI_TEXT)
        assert result.ai_probability >= 0.6
        assert result.classification in ("likely-ai", "ai")

    def test_human_text_classifies_as_human(self):
        result = analyze_ai(HUMAN_TEXT)
        assert result.ai_probability < 0.4
        assert result.classification in ("human", "likely-human")

    def test_ten_indicators_in_fixed_order(self):
        result = analyze_ai(AI_TEXT)
        assert tuple(i.name for i in result.indicators) == INDICATOR_NAMES
        for indicator in result.indicators:
            assert 0 <= indicator.score_percent <= 100
            assert indicator.severity in ("low", "medium", "high")
            assert indicator.description

    def test_probabilities_sum_to_one(self):
        result = analyze_ai(HUMAN_TEXT)
        assert result.human_probability == pytest.approx(1 - result.ai_probability)

    def test_stock_phrases_and_connectives_saturate(self):
        indicators = _by_name(analyze_ai(AI_TEXT))
        assert indicators[AI_CLICHES].score_percent == 100
        assert indicators[AI_CLICHES].severity == "high"
        assert indicators[REPETITIVE_PATTERNS].score_percent == 100
        assert indicators[BURSTINESS].score_percent > 90

    def test_targeted_tips_for_high_indicators(self):
        suggestions = analyze_ai(AI_TEXT).suggestions
        assert "Replace common AI phrases with original expressions." in suggestions
        assert "Avoid repetitive phrasing and sentence structures." in suggestions
        assert "Vary your sentence lengths - mix short and long sentences." in suggestions

    def test_human_text_headline(self):
        assert analyze_ai(HUMAN_TEXT).suggestions[0] == "Appears human-written. Content looks authentic."

    def test_small_samples_are_neutral(self):
        indicators = _by_name(analyze_ai("One short sentence here. Another short sentence here."))
        for name in (BURSTINESS, SENTENCE_STRUCTURE):
            assert indicators[name].score_percent == 50
            assert indicators[name].severity == "medium"

    def test_empty_text_does_not_raise(self):
        result = analyze_ai("")
        assert len(result.indicators) == 10
        assert _by_name(result)[PERPLEXITY].score_percent == 50
        assert 0 <= result.ai_probability <= 1

    def test_deterministic(self):
        assert analyze_ai(AI_TEXT) == analyze_ai(AI_TEXT)

    def test_rejects_non_text(self):
        with pytest.raises(InvalidInputError):
            analyze_ai(None)

    def test_payload_shape(self):
        payload = analyze_ai(AI_TEXT).to_payload()
        assert set(payload) == {"ai_probability", "human_probability", "indicators", "classification", "suggestions"}
        assert len(payload["indicators"]) == 10


class TestClassify:
    @pytest.mark.parametrize(
        "probability,expected",
        [
            (1.0, "ai"),
            (0.8, "ai"),
            (0.79999, "likely-ai"),
            (0.6, "likely-ai"),
            (0.59999, "uncertain"),
            (0.4, "uncertain"),
            (0.39999, "likely-human"),
            (0.2, "likely-human"),
            (0.19999, "human"),
            (0.0, "human"),
        ],
    )
    def test_band_boundaries(self, probability, expected):
        assert classify(probability) == expected

    def test_monotonic(self):
        order = ["human", "likely-human", "uncertain", "likely-ai", "ai"]
        ranks = [order.index(classify(p / 100)) for p in range(101)]
        assert ranks == sorted(ranks)
        assert set(ranks) == set(range(5))


class TestCombineIndicators:
    def test_weights_sum_to_one(self):
        assert sum(DetectionParameters().weights.values()) == pytest.approx(1.0)

    def test_unknown_indicator_uses_default_weight(self):
        indicators = [
            Indicator("Perplexity", 100.0, "high", ""),
            Indicator("Hedging", 0.0, "low", ""),
        ]
        assert combine_indicators(indicators) == pytest.approx(0.15 / (0.15 + 0.05))

    def test_empty(self):
        assert combine_indicators([]) == 0.0


def _indicator(text, name):
    return _by_name(analyze_ai(text))[name]


def _paragraphs(*word_counts):
    return "\n\n".join(" ".join(["cake"] * n) for n in word_counts)


class TestIndicatorFormulas:
    @pytest.mark.parametrize(
        "text,score,severity",
        [
            ("cat dog bat", 100.0, "high"),
            # word lengths 1 and 9: variance 16
            ("a bbbbbbbbb", 68.0, "medium"),
            # word lengths 1 and 15: variance 49
            ("a bbbbbbbbbbbbbbb", 2.0, "low"),
        ],
    )
    def test_perplexity(self, text, score, severity):
        indicator = _indicator(text, PERPLEXITY)
        assert indicator.score_percent == pytest.approx(score)
        assert indicator.severity == severity

    @pytest.mark.parametrize(
        "text,score,severity",
        [
            ("alpha beta gamma delta", 100.0, "high"),
            ("one two three four one", 60.0, "high"),
            # diversity exactly 0.7
            ("one two three four five six seven one one one", 40.0, "medium"),
            ("cat cat dog", 100 / 3, "medium"),
            # diversity exactly 0.6 scores nothing
            ("cat cat cat dog bird", 0.0, "low"),
            ("cat cat cat dog", 0.0, "low"),
        ],
    )
    def test_vocabulary_diversity(self, text, score, severity):
        indicator = _indicator(text, VOCABULARY_DIVERSITY)
        assert indicator.score_percent == pytest.approx(score)
        assert indicator.severity == severity

    @pytest.mark.parametrize(
        "filler,score,severity",
        [
            (50, 80.0, "high"),
            # one pronoun in 50 words: ratio 0.02
            (49, 50.0, "medium"),
            (20, 50.0, "medium"),
            # one pronoun in 20 words: ratio 0.05
            (19, 20.0, "low"),
        ],
    )
    def test_personal_pronouns(self, filler, score, severity):
        indicator = _indicator("I " + " ".join(["cake"] * filler), PERSONAL_PRONOUNS)
        assert indicator.score_percent == score
        assert indicator.severity == severity

    def test_no_pronouns(self):
        indicator = _indicator("cake cake cake", PERSONAL_PRONOUNS)
        assert (indicator.score_percent, indicator.severity) == (80.0, "high")

    @pytest.mark.parametrize(
        "filler,score,severity",
        [
            (200, 70.0, "high"),
            # one emotional word in 200 tokens: ratio 0.005
            (199, 40.0, "medium"),
            (100, 40.0, "medium"),
            # one emotional word in 100 tokens: ratio 0.01
            (99, 15.0, "low"),
        ],
    )
    def test_emotional_language(self, filler, score, severity):
        indicator = _indicator("love " + " ".join(["cake"] * filler), EMOTIONAL_LANGUAGE)
        assert indicator.score_percent == score
        assert indicator.severity == severity

    @pytest.mark.parametrize(
        "word_counts,score,severity",
        [
            ((10, 10, 10), 100.0, "high"),
            ((12, 12, 12, 12), 100.0, "high"),
            # variance 200
            ((10, 10, 40), 60.0, "medium"),
            # variance 800
            ((5, 5, 65), 0.0, "low"),
            ((10, 10), 50.0, "medium"),
        ],
    )
    def test_paragraph_uniformity(self, word_counts, score, severity):
        indicator = _indicator(_paragraphs(*word_counts), PARAGRAPH_UNIFORMITY)
        assert indicator.score_percent == pytest.approx(score)
        assert indicator.severity == severity

    def test_short_paragraphs_are_not_counted(self):
        text = _paragraphs(10, 10, 10) + "\n\nToo short."
        indicator = _indicator(text, PARAGRAPH_UNIFORMITY)
        assert (indicator.score_percent, indicator.severity) == (100.0, "high")


class TestDetectionParameters:
    def test_default_weights_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_DETECTION_PARAMETERS.weights[PERPLEXITY] = 1.0

    def test_hashable(self):
        assert hash(DEFAULT_DETECTION_PARAMETERS) == hash(DetectionParameters())

    def test_caller_dict_is_copied(self):
        weights = {PERPLEXITY: 1.0}
        parameters = DetectionParameters(weights=weights)
        weights[PERPLEXITY] = 0.0
        assert parameters.weights[PERPLEXITY] == 1.0
        assert DEFAULT_DETECTION_PARAMETERS.weights[PERPLEXITY] == 0.15
