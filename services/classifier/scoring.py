import re
import math
from collections import Counter
from typing import List, Mapping

from services.classifier.taxonomy import CATEGORY_KEYWORDS, Category, PRIMARY, SECONDARY
from services.classifier.vocabulary import VOCABULARY, word_weight

# 구두점/특수문자 → 공백 (ASCII 기준 단어 문자만 유지)
_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)

# 문맥 패턴 매칭 가중치
CONTEXT_WEIGHTS = {PRIMARY: 4, SECONDARY: 3}
CONTEXT_OTHER_WEIGHT = 2


def preprocess(text: str) -> List[str]:
    if not text:
        return []
    t = _NON_WORD.sub(" ", text.lower())
    return [w for w in t.split() if len(w) > 1]


def score_terms(text: str, vocabulary: Mapping[str, float] = VOCABULARY) -> dict[str, float]:
    """
    가중 TF-IDF.
    idf 식의 (freq > 0) 분기는 항상 참이라 ln(1 + V/2) 상수가 됨. 기존 점수와 맞추기 위해 그대로 둠.
    """
    words = preprocess(text)
    if not words:
        return {}
    freq = Counter(words)
    total = len(words)
    size = len(vocabulary)

    scores: dict[str, float] = {}
    for word, n in freq.items():
        tf = n / total
        idf = math.log(1 + size / (1 + (1 if n > 0 else 0)))
        scores[word] = tf * idf * word_weight(vocabulary, word)
    return scores


def semantic_similarity(text_scores: Mapping[str, float], category: Category,
                        vocabulary: Mapping[str, float] = VOCABULARY) -> float:
    similarity = 0.0
    total_weight = 0.0
    for terms in CATEGORY_KEYWORDS[category].values():
        for term in terms:
            for word in preprocess(term):
                weight = word_weight(vocabulary, word)
                similarity += text_scores.get(word, 0.0) * weight
                total_weight += weight
    return similarity / total_weight if total_weight > 0 else 0.0


def context_scores(text: str) -> dict[Category, float]:
    """Literal phrase matches per category, scaled by match density and log-dampened length."""
    lowered = (text or "").lower()
    text_length = len(preprocess(text))
    length_norm = 1 + math.log(1 + text_length)

    scores: dict[Category, float] = {}
    for category, group in CATEGORY_KEYWORDS.items():
        score = 0
        matches = 0
        for tag, terms in group.items():
            weight = CONTEXT_WEIGHTS.get(tag, CONTEXT_OTHER_WEIGHT)
            for term in terms:
                if term.lower() in lowered:
                    score += weight
                    matches += 1
        # 토큰이 하나도 없으면 밀도 0
        density = matches / text_length if text_length else 0.0
        scores[category] = (score * (1 + density)) / length_norm
    return scores
