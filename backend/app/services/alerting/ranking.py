from datetime import datetime
from typing import List, Optional, Sequence

from app.schemas.dashboard import Alert

SEVERITY_RANK = {"high": 0, "medium": 1}


def rank_alerts(
    alerts: Sequence[Alert],
    order: str = "severity",
    limit: Optional[int] = None,
) -> List[Alert]:
    """High before medium.

    ``order="severity"`` keeps discovery order inside a band (sorted() is
    stable). ``order="severity_date"`` additionally puts the earliest date
    first inside a band, undated alerts last. ``limit=None`` returns all.
    """
    if order == "severity_date":
        ranked = sorted(
            alerts,
            key=lambda a: (
                SEVERITY_RANK.get(a.severity, len(SEVERITY_RANK)),
                a.date is None,
                a.date or datetime.min,
            ),
        )
    elif order == "severity":
        ranked = sorted(alerts, key=lambda a: SEVERITY_RANK.get(a.severity, len(SEVERITY_RANK)))
    else:
        raise ValueError(f"Unknown alert order '{order}'")

    if limit is not None:
        ranked = ranked[:limit]
    return ranked
