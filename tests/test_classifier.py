import math

import pytest

from services.classifier import (
    CATEGORY_KEYWORDS,
    Category,
    InvalidInput,
    VOCABULARY,
    build_vocabulary,
    classify,
    context_scores,
    preprocess,
    score_terms,
    semantic_similarity,
)

BUSINESS_TEXT = "The Federal Reserve raised interest rates amid inflation concerns affecting the stock market"
SCIENCE_TEXT = "Scientists at NASA announced a breakthrough discovery using a new laboratory experiment"
SPORTS_TEXT = "The quarterback led his team to victory in the championship game"


# ---- vocabulary ----

def test_vocabulary_weights_are_tiered():
    assert set(VOCABULARY.values()) <= {3.0, 2.0, 1.5}
    assert VOCABULARY["technology"] == 3.0
    assert VOCABULARY["innovation"] == 2.0
    assert VOCABULARY["nvidia"] == 1.5


def test_vocabulary_first_assignment_wins():
    # Health lists "research" as secondary before Science lists it as primary
    assert VOCABULARY["research"] == 2.0
    # Technology secondary beats Business secondary, same tier anyway
    assert VOCABULARY["startup"] == 2.0
    # "laboratory" is a Science primary term before its institutions entry
    assert VOCABULARY["laboratory"] == 3.0


def test_vocabulary_splits_phrases_into_words():
    assert VOCABULARY["machine"] == 1.5
    assert VOCABULARY["learning"] == 1.5
    assert "machine learning" not in VOCABULARY


def test_build_vocabulary_is_order_sensitive():
    groups = {
        Category.TECHNOLOGY: {"primary": ("alpha",), "secondary": ("beta",), "extra": ("gamma",)},
        Category.BUSINESS: {"primary": ("gamma",), "secondary": ("alpha",)},
    }
    vocab = build_vocabulary(groups)
    assert vocab == {"alpha": 3.0, "beta": 2.0, "gamma": 1.5}

    reordered = build_vocabulary(dict(reversed(list(groups.items()))))
    assert reordered["gamma"] == 3.0
    assert reordered["alpha"] == 2.0


def test_vocabulary_is_read_only():
    with pytest.raises(TypeError):
        VOCABULARY["new"] = 1.0  # type: ignore[index]


def test_every_category_has_primary_and_secondary():
    # every category needs a keyword group, in declaration order
    assert list(CATEGORY_KEYWORDS) == list(Category)
    assert len(CATEGORY_KEYWORDS) == 7
    for group in CATEGORY_KEYWORDS.values():
        assert "primary" in group and "secondary" in group


# ---- preprocess / scorers ----

def test_preprocess_strips_punctuation_and_short_tokens():
    assert preprocess("AI-driven   chips, a U.S. win!") == ["ai", "driven", "chips", "win"]
    assert preprocess("") == []


def test_score_terms_uses_constant_idf():
    scores = score_terms("market market tree")
    idf = math.log(1 + len(VOCABULARY) / 2)
    assert scores["market"] == pytest.approx((2 / 3) * idf * 3.0)
    assert scores["tree"] == pytest.approx((1 / 3) * idf * 1.0)
    assert "stock" not in scores


def test_semantic_similarity_rewards_overlap():
    scores = score_terms("football team wins the championship match")
    assert semantic_similarity(scores, Category.SPORTS) > semantic_similarity(scores, Category.HEALTH)
    assert semantic_similarity({}, Category.SPORTS) == 0.0


def test_context_scores_literal_substring_match():
    scores = context_scores("Wall Street rallies")
    # "wall street" (financial, weight 2), 3 tokens -> density 1/3
    expected = (2 * (1 + 1 / 3)) / (1 + math.log(1 + 3))
    assert scores[Category.BUSINESS] == pytest.approx(expected)
    assert scores[Category.SPORTS] == 0.0


def test_context_scores_without_tokens_has_zero_density():
    scores = context_scores("a ! b")
    assert all(v == 0.0 for v in scores.values())


# ---- classify ----

@pytest.mark.parametrize("text,expected", [
    (BUSINESS_TEXT, Category.BUSINESS),
    (SCIENCE_TEXT, Category.SCIENCE),
    (SPORTS_TEXT, Category.SPORTS),
])
def test_classify_scenarios(text, expected):
    result = classify(text)
    assert result.category == expected
    assert result.confidence == 100.0
    assert not result.no_signal


@pytest.mark.parametrize("text", [BUSINESS_TEXT, SCIENCE_TEXT, SPORTS_TEXT, "hello world"])
def test_predictions_cover_every_category(text):
    result = classify(text)
    assert sorted(p.category for p in result.predictions) == sorted(Category)
    assert all(0.0 <= p.confidence <= 100.0 for p in result.predictions)
    assert result.category == result.predictions[0].category
    assert result.confidence == result.predictions[0].confidence
    confidences = [p.confidence for p in result.predictions]
    assert confidences == sorted(confidences, reverse=True)


def test_confidences_are_not_softmax_normalised():
    result = classify(BUSINESS_TEXT)
    assert sum(p.confidence for p in result.predictions) != pytest.approx(100.0)


def test_classify_is_deterministic():
    assert classify(SCIENCE_TEXT) == classify(SCIENCE_TEXT)


def test_primary_keywords_raise_confidence():
    primaries = " ".join(CATEGORY_KEYWORDS[Category.TECHNOLOGY]["primary"])
    with_tech = classify(f"Officials met on Tuesday to discuss {primaries} and the weather")
    without_tech = classify("Officials met on Tuesday to discuss the weather")

    def tech_conf(r):
        return next(p.confidence for p in r.predictions if p.category == Category.TECHNOLOGY)

    assert tech_conf(with_tech) > tech_conf(without_tech)
    assert with_tech.category == Category.TECHNOLOGY


def test_nonsense_text_has_no_signal():
    result = classify("blorp blorp blorp blorp")
    assert result.no_signal
    assert [p.category for p in result.predictions] == list(Category)
    assert all(p.confidence == 0.0 for p in result.predictions)
    assert result.category == Category.TECHNOLOGY
    assert not any(math.isnan(p.confidence) for p in result.predictions)


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None, 42])
def test_classify_rejects_invalid_input(text):
    with pytest.raises(InvalidInput):
        classify(text)


def test_result_to_dict():
    d = classify(SPORTS_TEXT).to_dict()
    assert d["category"] == "Sports"
    assert len(d["predictions"]) == 7
    assert d["predictions"][0] == {"category": "Sports", "confidence": 100.0}
    assert d["no_signal"] is False
