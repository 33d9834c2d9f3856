from services.classifier.taxonomy import Category, CATEGORY_KEYWORDS
from services.classifier.vocabulary import VOCABULARY, build_vocabulary
from services.classifier.scoring import preprocess, score_terms, semantic_similarity, context_scores
from services.classifier.classifier import (
    ClassificationResult,
    ClassifierError,
    InvalidInput,
    Prediction,
    classify,
)

__all__ = [
    "Category", "CATEGORY_KEYWORDS",
    "VOCABULARY", "build_vocabulary",
    "preprocess", "score_terms", "semantic_similarity", "context_scores",
    "ClassificationResult", "ClassifierError", "InvalidInput", "Prediction", "classify",
]
