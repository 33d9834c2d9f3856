import re
from bs4 import BeautifulSoup

# 티저/더보기 문구 (본문 텍스트에서 직접 삭제)
HARD_STRIP_PATTERNS = [
    r"\b(read more|click here|continue reading)\b",
    r"\[\+\d+ chars\]",  # NewsAPI 잘림 표시
]
_hard_strip_re = re.compile("|".join(HARD_STRIP_PATTERNS), re.I)


def _strip_inline_boiler(text: str) -> str:
    t = _hard_strip_re.sub("", text or "")
    t = re.sub(r"\s+", " ", t)
    t = re.sub(r"\.{3,}", "...", t)
    return t.strip()


def clean_html_to_text(html_or_summary: str | None) -> str | None:
    if not html_or_summary:
        return None
    if "<" not in html_or_summary:
        text = _strip_inline_boiler(html_or_summary)
        return text if text else None

    soup = BeautifulSoup(html_or_summary, "html.parser")

    # 스크립트/스타일 제거
    for tag in soup(["script", "style", "noscript", "template"]):
        tag.decompose()

    text = soup.get_text(separator=" ", strip=True)
    text = _strip_inline_boiler(text)
    return text if text else None
