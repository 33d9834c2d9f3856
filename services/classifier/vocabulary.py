from types import MappingProxyType
from typing import Mapping

from services.classifier.taxonomy import CATEGORY_KEYWORDS, KeywordGroup, Category, PRIMARY, SECONDARY, term_class

TERM_CLASS_WEIGHTS: dict[str, float] = {
    "primary": 3.0,
    "secondary": 2.0,
    "other": 1.5,
}
DEFAULT_WEIGHT = 1.0


def _ordered_tags(group: KeywordGroup) -> list[str]:
    # primary -> secondary -> 나머지(선언 순서)
    rest = [t for t in group if t not in (PRIMARY, SECONDARY)]
    return [t for t in (PRIMARY, SECONDARY) if t in group] + rest


def build_vocabulary(groups: Mapping[Category, KeywordGroup] = CATEGORY_KEYWORDS) -> Mapping[str, float]:
    """
    단어 -> 중요도 가중치 매핑 생성.
    먼저 배정된 가중치가 유지되므로 카테고리/태그 선언 순서에 따라 결과가 달라짐.
    """
    vocab: dict[str, float] = {}
    for group in groups.values():
        for tag in _ordered_tags(group):
            weight = TERM_CLASS_WEIGHTS[term_class(tag)]
            for term in group[tag]:
                for word in term.split():
                    vocab.setdefault(word.lower(), weight)
    return MappingProxyType(vocab)


def word_weight(vocabulary: Mapping[str, float], word: str) -> float:
    return vocabulary.get(word, DEFAULT_WEIGHT)


# 프로세스 시작 시 1회 생성, 이후 읽기 전용
VOCABULARY: Mapping[str, float] = build_vocabulary()
