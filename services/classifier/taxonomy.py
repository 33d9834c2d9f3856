from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Category(str, Enum):
    TECHNOLOGY = "Technology"
    BUSINESS = "Business"
    POLITICS = "Politics"
    SPORTS = "Sports"
    ENTERTAINMENT = "Entertainment"
    HEALTH = "Health"
    SCIENCE = "Science"

    def __str__(self) -> str:
        return self.value


PRIMARY = "primary"
SECONDARY = "secondary"

# 카테고리별 키워드 그룹 (선언 순서 = 어휘 가중치 우선순위)
_RAW_KEYWORDS: dict[Category, dict[str, list[str]]] = {
    Category.TECHNOLOGY: {
        "primary": ["ai", "technology", "software", "digital", "cyber", "tech", "computer", "internet", "blockchain", "robot", "code"],
        "secondary": ["innovation", "startup", "device", "app", "mobile", "data", "cloud", "programming", "algorithm", "developer"],
        "companies": ["google", "apple", "microsoft", "amazon", "meta", "tesla", "nvidia", "intel", "ibm", "oracle"],
        "concepts": ["artificial intelligence", "machine learning", "virtual reality", "augmented reality", "cryptocurrency", "5g", "quantum computing", "cybersecurity"],
        "products": ["iphone", "android", "windows", "linux", "ios", "web3", "neural network"],
    },
    Category.BUSINESS: {
        "primary": ["business", "market", "economy", "finance", "trade", "investment", "stock", "revenue", "profit"],
        "secondary": ["startup", "company", "industry", "corporate", "enterprise", "merger", "acquisition", "venture"],
        "financial": ["nasdaq", "dow jones", "sp500", "wall street", "ipo", "earnings", "shares", "dividend", "portfolio"],
        "concepts": ["quarterly report", "market analysis", "economic growth", "fiscal policy", "monetary policy", "inflation", "recession"],
        "sectors": ["banking", "retail", "manufacturing", "real estate", "energy", "automotive"],
    },
    Category.POLITICS: {
        "primary": ["politics", "government", "election", "policy", "congress", "senate", "democrat", "republican", "parliament"],
        "secondary": ["legislation", "vote", "campaign", "political", "president", "administration", "diplomatic", "governor"],
        "international": ["foreign policy", "international relations", "diplomacy", "treaty", "sanctions", "united nations", "eu"],
        "concepts": ["democracy", "constitution", "bipartisan", "legislative", "judiciary", "executive order"],
        "events": ["summit", "referendum", "inauguration", "impeachment", "coalition"],
    },
    Category.SPORTS: {
        "primary": ["sports", "game", "team", "player", "championship", "tournament", "match", "score", "athlete"],
        "secondary": ["win", "lose", "victory", "defeat", "season", "league", "coach", "stadium", "record"],
        "leagues": ["nfl", "nba", "mlb", "nhl", "fifa", "uefa", "olympics", "premier league", "formula 1"],
        "concepts": ["world cup", "super bowl", "playoffs", "final four", "grand slam", "medal", "draft"],
        "roles": ["quarterback", "striker", "pitcher", "defender", "manager", "referee"],
    },
    Category.ENTERTAINMENT: {
        "primary": ["entertainment", "movie", "film", "music", "celebrity", "actor", "actress", "star", "director"],
        "secondary": ["hollywood", "tv", "show", "series", "album", "concert", "award", "performance", "cast"],
        "events": ["oscar", "grammy", "emmy", "golden globe", "festival", "premiere", "red carpet"],
        "concepts": ["box office", "streaming", "rating", "review", "debut", "sequel", "franchise"],
        "platforms": ["netflix", "disney", "hbo", "spotify", "amazon prime", "hulu"],
    },
    Category.HEALTH: {
        "primary": ["health", "medical", "disease", "treatment", "patient", "doctor", "hospital", "medicine", "clinic"],
        "secondary": ["research", "study", "clinical", "therapy", "vaccine", "drug", "pharmaceutical", "diagnosis"],
        "conditions": ["cancer", "diabetes", "heart disease", "obesity", "mental health", "alzheimer", "covid"],
        "concepts": ["public health", "healthcare", "medical research", "clinical trial", "prevention", "wellness"],
        "specialists": ["surgeon", "physician", "nurse", "pediatrician", "psychiatrist"],
    },
    Category.SCIENCE: {
        "primary": ["science", "research", "study", "discovery", "scientist", "experiment", "theory", "evidence", "laboratory"],
        "secondary": ["scientific", "physics", "chemistry", "biology", "astronomy", "climate", "evolution", "genome"],
        "fields": ["quantum", "molecular", "genetic", "environmental", "neuroscience", "biochemistry", "astrophysics"],
        "concepts": ["peer review", "scientific method", "breakthrough", "hypothesis", "observation", "data analysis"],
        "institutions": ["nasa", "cern", "university", "laboratory", "institute"],
    },
}

KeywordGroup = Mapping[str, tuple[str, ...]]

CATEGORY_KEYWORDS: Mapping[Category, KeywordGroup] = MappingProxyType({
    cat: MappingProxyType({tag: tuple(terms) for tag, terms in groups.items()})
    for cat, groups in _RAW_KEYWORDS.items()
})


def term_class(tag: str) -> str:
    """Collapse a category-specific tag into primary / secondary / other."""
    if tag in (PRIMARY, SECONDARY):
        return tag
    return "other"
