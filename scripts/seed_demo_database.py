#!/usr/bin/env python3
"""Create a demo journey database for trying out the journey-stats command.

Usage:
    python scripts/seed_demo_database.py sqlite:///demo.db alice
    journey-stats --user alice --database-url sqlite:///demo.db all
"""

import sys
import uuid
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from journey_stats.adapters.persistence import create_journey_engine
from journey_stats.adapters.persistence.orm_models import (
    Base,
    JourneyRecord,
    PassRecord,
    SectionRecord,
)

# (days ago, duration in minutes, sections of (station, lat, lon))
DEMO_JOURNEYS = [
    (
        1,
        24,
        [
            [("Marienplatz", 48.13743, 11.57549), ("Hauptbahnhof", 48.14016, 11.55848)],
            [("Hauptbahnhof", 48.14016, 11.55848), ("Pasing", 48.14994, 11.46166)],
        ],
    ),
    (
        12,
        41,
        [
            [
                ("Odeonsplatz", 48.14263, 11.57750),
                ("Universität", 48.15007, 11.58100),
                ("Münchner Freiheit", 48.16216, 11.58656),
            ],
        ],
    ),
    (
        200,
        95,
        [
            [("München Hbf", 48.14016, 11.55848), ("Augsburg Hbf", 48.36547, 10.88578)],
        ],
    ),
]


def seed(database_url: str, user_id: str) -> int:
    """Create the tables if needed and add the demo journeys for a user."""
    engine = create_journey_engine(database_url)
    Base.metadata.create_all(engine)
    now = datetime.now(UTC)

    with Session(engine) as session:
        for days_ago, duration, sections in DEMO_JOURNEYS:
            journey = JourneyRecord(
                uuid=str(uuid.uuid4()),
                user_id=user_id,
                duration=duration,
                created_at=now - timedelta(days=days_ago),
            )
            for section_order, passes in enumerate(sections):
                section = SectionRecord(order=section_order)
                for pass_order, (name, lat, lon) in enumerate(passes):
                    section.passes.append(
                        PassRecord(
                            order=pass_order,
                            station_name=name,
                            station_coordinate_x=lat,
                            station_coordinate_y=lon,
                        )
                    )
                journey.sections.append(section)
            session.add(journey)
            print(f"Added journey {journey.uuid} ({days_ago} days ago)")
        session.commit()

    engine.dispose()
    return len(DEMO_JOURNEYS)


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__, file=sys.stderr)
        sys.exit(1)
    seed(sys.argv[1], sys.argv[2])
