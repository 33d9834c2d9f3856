from services.collector.newsapi import NewsApiError
from services.recommend.ranker import build_recommendations, recommendation_categories


def _a(title, category="General"):
    return {"title": title, "description": "d", "category": category}


class FakeFeed:
    def __init__(self, feeds, fail_first=0):
        self.feeds = feeds
        self.calls = []
        self.fail_first = fail_first

    def __call__(self, category=None):
        self.calls.append(category)
        if self.fail_first:
            self.fail_first -= 1
            raise NewsApiError("boom")
        return list(self.feeds.get(category, []))


def test_categories_from_stats_sorted_by_count():
    stats = [{"name": "Sports", "value": 1}, {"name": "Health", "value": 3},
             {"name": "Science", "value": 1}, {"name": "Business", "value": 2}]
    assert recommendation_categories(stats) == ["Health", "Business", "Sports"]


def test_default_categories_without_history():
    assert recommendation_categories([]) == ["Technology", "Business", "Science"]


def test_skips_read_and_duplicate_titles():
    feed = FakeFeed({
        "Sports": [_a("read before", "Sports"), _a("s1", "Sports")],
        "Health": [_a("s1", "Health"), _a("h1", "Health"), _a("h2", "Health")],
    })
    recs = build_recommendations(["Sports", "Health"], ["read before"], limit=3, fetch=feed)
    assert [r["title"] for r in recs] == ["s1", "h1", "h2"]
    assert feed.calls == ["Sports", "Health"]


def test_tops_up_from_general_feed():
    feed = FakeFeed({"Science": [_a("x")], None: [_a("x"), _a("g1"), _a("g2")]})
    recs = build_recommendations(["Science"], [], limit=3, fetch=feed)
    assert [r["title"] for r in recs] == ["x", "g1", "g2"]


def test_retries_after_fetch_error():
    feed = FakeFeed({"Science": [_a("a"), _a("b"), _a("c")]}, fail_first=1)
    recs = build_recommendations(["Science"], [], limit=3, fetch=feed)
    assert len(recs) == 3
    assert feed.calls == ["Science", "Science"]


def test_gives_up_after_max_attempts():
    feed = FakeFeed({}, fail_first=10)
    assert build_recommendations(["Science"], [], limit=3, max_attempts=3, fetch=feed) == []
    assert len(feed.calls) == 3


def test_zero_limit_fetches_nothing():
    feed = FakeFeed({"Science": [_a("a")]})
    assert build_recommendations(["Science"], [], limit=0, fetch=feed) == []
    assert feed.calls == []
