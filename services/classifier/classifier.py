from dataclasses import dataclass, field
from typing import List, Mapping

from services.classifier.taxonomy import Category
from services.classifier.vocabulary import VOCABULARY
from services.classifier.scoring import score_terms, semantic_similarity, context_scores

SEMANTIC_WEIGHT = 0.6
CONTEXT_WEIGHT = 0.4


class ClassifierError(Exception):
    pass


class InvalidInput(ClassifierError):
    pass


@dataclass(frozen=True)
class Prediction:
    category: Category
    confidence: float

    def to_dict(self) -> dict:
        return {"category": self.category.value, "confidence": self.confidence}


@dataclass(frozen=True)
class ClassificationResult:
    category: Category
    confidence: float
    predictions: List[Prediction] = field(default_factory=list)
    # 모든 카테고리 점수가 0 (어휘 겹침 없음)
    no_signal: bool = False

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "confidence": self.confidence,
            "predictions": [p.to_dict() for p in self.predictions],
            "no_signal": self.no_signal,
        }


def _combined_scores(text: str, vocabulary: Mapping[str, float]) -> dict[Category, float]:
    text_scores = score_terms(text, vocabulary)
    ctx = context_scores(text)
    combined = {}
    for category in Category:
        semantic = semantic_similarity(text_scores, category, vocabulary)
        combined[category] = semantic * SEMANTIC_WEIGHT + ctx.get(category, 0.0) * CONTEXT_WEIGHT
    return combined


def classify(text: str, vocabulary: Mapping[str, float] = VOCABULARY) -> ClassificationResult:
    """
    Assign ``text`` to one of the fixed news categories.

    Confidences are each category's combined score relative to the best one,
    as a percentage, so they do not sum to 100. When no category scores at all
    every confidence is 0.0, predictions keep declaration order and
    ``no_signal`` is set.
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput("text must be a non-empty string")

    combined = _combined_scores(text, vocabulary)
    max_score = max(combined.values())

    if max_score <= 0:
        predictions = [Prediction(c, 0.0) for c in Category]
        return ClassificationResult(predictions[0].category, 0.0, predictions, no_signal=True)

    predictions = [
        Prediction(c, min((score / max_score) * 100, 100.0))
        for c, score in combined.items()
    ]
    # 동점이면 선언 순서 유지 (stable sort)
    predictions.sort(key=lambda p: p.confidence, reverse=True)
    top = predictions[0]
    return ClassificationResult(top.category, top.confidence, predictions)
