import pytest

from data_designer_context_analyzer.core import (
    AUDIENCE_RULES,
    COMPLEXITY_RULES,
    TONE_RULES,
    ContextAnalyzer,
    analyze_text,
    auto_configure_context,
    default_analysis,
    recommend_styles,
)
from data_designer_context_analyzer.lexicon import Lexicon, Thresholds

DEFAULT_RESULT = {
    "audience": "general",
    "purpose": "other",
    "tone": "neutral",
    "complexity": "moderate",
    "length": "same",
    "confidence": 0,
    "suggestions": [],
}

ACADEMIC_TECHNICAL_TEXT = (
    "Our research study presents an analysis of the implementation, "
    "the architecture and the deployment of the system."
)

MODERATE_TEXT = (
    "The excellent team made rapid progress on the project and everyone agreed "
    "the plan was working well today."
)


def _words(n: int) -> str:
    return " ".join(["word"] * n)


class TestDefaults:
    @pytest.mark.parametrize("text", [None, "", "   \n\t", 42, ["some", "words"]])
    def test_invalid_or_blank_input_returns_default(self, text):
        assert analyze_text(text) == DEFAULT_RESULT

    def test_default_is_a_fresh_record(self):
        first = default_analysis()
        first["suggestions"].append({"type": "length"})
        assert default_analysis()["suggestions"] == []

    def test_result_shape(self):
        result = analyze_text(ACADEMIC_TECHNICAL_TEXT)
        assert set(result.keys()) == set(DEFAULT_RESULT.keys())

    def test_deterministic(self):
        assert analyze_text(MODERATE_TEXT) == analyze_text(MODERATE_TEXT)


class TestConfidenceAndLength:
    @pytest.mark.parametrize("count, expected", [(5, 0.3), (30, 0.6), (75, 0.8), (150, 0.9)])
    def test_confidence_tiers(self, count, expected):
        assert analyze_text(_words(count))["confidence"] == expected

    @pytest.mark.parametrize("count, expected", [(49, "longer"), (50, "same"), (300, "same"), (301, "shorter")])
    def test_length_thresholds(self, count, expected):
        assert analyze_text(_words(count))["length"] == expected


class TestAudience:
    def test_repeated_academic_word(self):
        assert analyze_text("research research research")["audience"] == "academic"

    def test_academic_checked_before_technical(self):
        assert analyze_text(ACADEMIC_TECHNICAL_TEXT)["audience"] == "academic"

    def test_technical_maps_to_professional(self):
        assert analyze_text("implementation architecture deployment")["audience"] == "professional"

    def test_formal_over_casual_is_professional(self):
        assert analyze_text("However, we proceed as planned")["audience"] == "professional"

    def test_casual(self):
        assert analyze_text("yeah okay cool")["audience"] == "casual"

    def test_general(self):
        assert analyze_text("the cat sat on the mat")["audience"] == "general"

    def test_rule_order(self):
        assert [label for _, label in AUDIENCE_RULES] == ["academic", "professional", "professional", "casual"]


class TestPurpose:
    def test_email(self):
        assert analyze_text("Dear team, thank you for the meeting. Regards")["purpose"] == "email"

    def test_tie_keeps_first_declared(self):
        assert analyze_text("story summary")["purpose"] == "report"

    def test_substring_inside_word_counts(self):
        assert analyze_text("It seems likely")["purpose"] == "social"

    def test_no_keywords(self):
        assert analyze_text("hello world")["purpose"] == "other"


class TestTone:
    def test_formal_beats_exclamations(self):
        text = "However, this holds! Therefore it works! Thus we act! Moreover we win! Furthermore we grow!"
        assert analyze_text(text)["tone"] == "formal"

    def test_friendly(self):
        assert analyze_text("Great day! Great food! Great fun!")["tone"] == "friendly"

    def test_casual_counts_contractions(self):
        assert analyze_text("yeah it's fine")["tone"] == "casual"

    def test_neutral(self):
        assert analyze_text("the report is ready")["tone"] == "neutral"

    def test_rule_order(self):
        assert [label for _, label in TONE_RULES] == ["formal", "friendly", "casual"]


class TestComplexity:
    def test_long_single_sentence_is_complex(self):
        assert analyze_text(_words(26))["complexity"] == "complex"

    def test_complex_vocabulary(self):
        assert analyze_text("an intricate and methodical and comprehensive plan.")["complexity"] == "complex"

    def test_moderate(self):
        assert analyze_text(MODERATE_TEXT)["complexity"] == "moderate"

    def test_simple(self):
        assert analyze_text("The cat sat. The dog ran.")["complexity"] == "simple"

    def test_trailing_punctuation_blocks_vocabulary_match(self):
        # "intricate." keeps its period, so only two complex words match.
        assert analyze_text("intricate methodical intricate.")["complexity"] == "simple"

    def test_one_long_sentence_among_short_ones_is_complex(self):
        text = _words(21) + ". a. b. c. d. e. f."
        assert analyze_text(text)["complexity"] == "complex"

    def test_leading_space_counts_toward_long_sentence(self):
        # " word ... word" (20 words) tokenizes to 21 pieces, one of them empty.
        text = "a. " + _words(20) + ". b. c."
        assert analyze_text(text)["complexity"] == "complex"

    def test_twenty_word_sentence_is_not_long(self):
        text = _words(20) + ". a. b. c. d. e. f."
        assert analyze_text(text)["complexity"] == "simple"

    def test_rule_order(self):
        assert [label for _, label in COMPLEXITY_RULES] == ["complex", "moderate"]


class TestSuggestions:
    def test_nineteen_words_gets_length_suggestion(self):
        types = [s["type"] for s in analyze_text(_words(19))["suggestions"]]
        assert types == ["length"]

    def test_twenty_words_has_no_suggestions(self):
        assert analyze_text(_words(20))["suggestions"] == []

    def test_length_then_tone(self):
        types = [s["type"] for s in analyze_text("yeah okay cool it's fine")["suggestions"]]
        assert types == ["length", "tone"]

    def test_three_casual_phrases_get_no_tone_suggestion(self):
        types = [s["type"] for s in analyze_text("yeah okay cool fine")["suggestions"]]
        assert "tone" not in types

    def test_four_casual_phrases_get_tone_suggestion(self):
        types = [s["type"] for s in analyze_text("yeah okay cool it's fine")["suggestions"]]
        assert "tone" in types

    def test_tone_then_complexity(self):
        text = "yeah okay cool it's " + _words(31)
        types = [s["type"] for s in analyze_text(text)["suggestions"]]
        assert types == ["tone", "complexity"]

    def test_suggestion_structure(self):
        suggestion = analyze_text("short text")["suggestions"][0]
        assert suggestion == {
            "type": "length",
            "message": "Consider adding more detail for better rewriting results",
            "action": "Add more context or examples",
        }

    def test_unpunctuated_run(self):
        result = analyze_text(_words(500))
        assert result["complexity"] == "complex"
        assert result["length"] == "shorter"
        assert result["confidence"] == 0.9
        assert [s["type"] for s in result["suggestions"]] == ["complexity"]


class TestAutoConfigureContext:
    def test_drops_confidence_and_suggestions(self):
        context = auto_configure_context(ACADEMIC_TECHNICAL_TEXT)
        assert set(context.keys()) == {"audience", "purpose", "tone", "complexity", "length"}
        assert context["audience"] == "academic"

    def test_default_for_empty(self):
        assert auto_configure_context("") == {
            "audience": "general",
            "purpose": "other",
            "tone": "neutral",
            "complexity": "moderate",
            "length": "same",
        }


class TestRecommendStyles:
    def test_academic_and_technical_keep_insertion_order(self):
        analysis = analyze_text(ACADEMIC_TECHNICAL_TEXT)
        modes = [r["mode"] for r in recommend_styles(analysis, ACADEMIC_TECHNICAL_TEXT)]
        assert modes == ["academic", "technical"]

    def test_sorted_by_confidence(self):
        recs = recommend_styles({"audience": "professional"}, "implementation architecture deployment")
        assert [r["mode"] for r in recs] == ["technical", "formal"]
        assert [r["confidence"] for r in recs] == [0.8, 0.7]

    def test_technical_needs_original_text(self):
        analysis = analyze_text(ACADEMIC_TECHNICAL_TEXT)
        assert [r["mode"] for r in recommend_styles(analysis)] == ["academic"]

    def test_casual_tone(self):
        recs = recommend_styles({"audience": "general", "tone": "casual"})
        assert recs == [{"mode": "casual", "reason": "Casual tone detected", "confidence": 0.6}]

    @pytest.mark.parametrize("analysis", [{}, None, "academic", DEFAULT_RESULT])
    def test_nothing_to_recommend(self, analysis):
        assert recommend_styles(analysis) == []


class TestCustomConfiguration:
    def test_custom_thresholds(self):
        analyzer = ContextAnalyzer(thresholds=Thresholds(longer_below_words=3))
        assert analyzer.analyze("one two three four")["length"] == "same"

    def test_custom_lexicon(self):
        analyzer = ContextAnalyzer(lexicon=Lexicon(formal_indicators=("kindly",)))
        assert analyzer.analyze("kindly note the change")["tone"] == "formal"
        assert analyze_text("kindly note the change")["tone"] == "neutral"

    def test_analyzer_is_hashable(self):
        assert hash(Lexicon()) == hash(Lexicon())
        assert hash(ContextAnalyzer()) == hash(ContextAnalyzer())
        assert len({ContextAnalyzer(), ContextAnalyzer()}) == 1

    def test_shared_instance_holds_no_state(self):
        analyzer = ContextAnalyzer()
        first = analyzer.analyze(MODERATE_TEXT)
        analyzer.analyze("yeah okay cool it's fine")
        assert analyzer.analyze(MODERATE_TEXT) == first
