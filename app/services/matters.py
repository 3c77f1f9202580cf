"""Demo matter records shown on the dashboard"""

from typing import Dict, List, Optional


MATTERS: List[Dict[str, str]] = [
    {
        "id": "1",
        "title": "ABC Pvt. Ltd. v. Union of India",
        "court": "Supreme Court of India",
        "stage": "SLP (Civil)",
        "parties": "ABC Pvt. Ltd. vs Union of India",
        "next_hearing": "12 Oct 2025",
        "last_order": "22 Sep 2025",
    },
    {
        "id": "2",
        "title": "XYZ Industries v. State of Maharashtra",
        "court": "Supreme Court of India",
        "stage": "Civil Appeal",
        "parties": "XYZ Industries vs State of Maharashtra",
        "next_hearing": "18 Oct 2025",
        "last_order": "30 Sep 2025",
    },
]


def list_matters() -> List[Dict[str, str]]:
    return list(MATTERS)


def get_matter(matter_id: str) -> Optional[Dict[str, str]]:
    return next((m for m in MATTERS if m["id"] == matter_id), None)
