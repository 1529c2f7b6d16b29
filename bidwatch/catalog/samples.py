"""Bundled sample notices used when no catalog file is configured."""

from typing import List

from bidwatch.domain.models import Notice

SAMPLE_RECORDS = [
    {
        "id": "EX-001",
        "title": "データ入力業務 一式",
        "agency": "総務省",
        "region": "東京都",
        "classification": "役務",
        "grades": ["A", "B", "C", "D"],
        "published_date": "2025-10-18",
        "deadline": "2025-10-25 17:00",
        "status": "open",
        "budget_range": "200万〜800万円",
        "url": "https://example.gov/ex-001",
    },
    {
        "id": "EX-002",
        "title": "スキャン・電子化（公文書）",
        "agency": "広島市",
        "region": "広島県",
        "classification": "役務",
        "grades": ["B", "C", "D"],
        "published_date": "2025-10-16",
        "deadline": "2025-10-30 17:00",
        "status": "open",
        "budget_range": "150万〜300万円",
        "url": "https://example.gov/ex-002",
    },
    {
        "id": "EX-003",
        "title": "Web更新業務・運用保守",
        "agency": "某独法",
        "region": "全国",
        "classification": "役務",
        "grades": ["A", "B"],
        "published_date": "2025-08-02",
        "deadline": "2025-08-20 12:00",
        "status": "closed",
        "budget_range": "400万〜600万円",
        "url": "https://example.gov/ex-003",
    },
]

SAMPLE_NOTICES: List[Notice] = [Notice.model_validate(record) for record in SAMPLE_RECORDS]
