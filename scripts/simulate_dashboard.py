"""Print the practice dashboard for a month of sample sessions.

Usage:
    python scripts/simulate_dashboard.py [window] [location]
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.analytics.dashboard import compute_dashboard
from app.analytics.window import WindowConfig
from app.schemas.practice_session import SessionRecord

# ─── (date, location, big miss, face, contact, confidence, tags) ─────
RAW_DATA = [
    ("2025-10-02", "range", "right", 2, 3, 2, ["Driver", "Long Irons"]),
    ("2025-10-05", "sim", "right", 3, 3, 3, ["Driver", "Simulator"]),
    ("2025-10-09", "course", "fat", 3, 2, 3, ["On-Course", "Chipping"]),
    ("2025-10-12", "range", "left", 4, 3, 3, ["Mid Irons", "Wedges"]),
    ("2025-10-16", "range", "right", 3, 4, None, ["Driver"]),
    ("2025-10-19", "sim", "thin", 4, 4, 4, ["Driver", "Hybrids", "Simulator"]),
    ("2025-10-23", "course", "none", 4, None, 4, ["On-Course", "Putting"]),
    ("2025-10-26", "range", "right", 5, 4, 4, ["Driver", "Wedges"]),
    ("not a date", "range", "heel", 9, 3, 3, ["Bunker"]),
]


def main() -> None:
    window = sys.argv[1] if len(sys.argv) > 1 else "all"
    location = sys.argv[2] if len(sys.argv) > 2 else None

    records = [
        SessionRecord(id=i, session_date=d, location_type=loc, big_miss=miss, face_control_rating=face,
                      contact_rating=contact, confidence_rating=conf, tags=tags)
        for i, (d, loc, miss, face, contact, conf, tags) in enumerate(RAW_DATA, start=1)
    ]
    cfg = WindowConfig(filter_value=location, window=window)
    as_of = datetime.date.fromisoformat("2025-10-31")

    dash = compute_dashboard(records, as_of, cfg)

    print("=" * 60)
    print(f"DASHBOARD (as of {dash.as_of}, window={dash.window}, location={location or 'all'})")
    print("=" * 60)
    print(f"Total sessions:  {dash.total_count}")
    print(f"Last 30 days:    {dash.recent_count}")
    print()
    for field, avg in dash.averages:
        shown = f"{avg.value:.2f}" if avg.value is not None else "no data"
        print(f"  {field:<22} {shown:>8}  (n={avg.sample_size})")
    print()
    top_miss = f"{dash.top_miss.label} ({dash.top_miss.count})" if dash.top_miss else "none"
    print(f"Big miss:        {top_miss}")
    print("Most practiced:  " + ", ".join(f"{row.label} ({row.count})" for row in dash.top_tags))
    print("Suggested focus:")
    for s in dash.focus_suggestions:
        print(f"  {s.tag:<22} {s.note}")
    print()
    print(f"{'Date':<12} {'Face':>5} {'Cont':>5} {'Conf':>5}")
    for p in dash.rating_series:
        cells = [f"{v:>5}" if v is not None else f"{'--':>5}"
                 for v in (p.face_control_rating, p.contact_rating, p.confidence_rating)]
        print(f"{p.date or 'undated':<12} {' '.join(cells)}")


if __name__ == "__main__":
    main()
