"""
Template-driven itinerary generation used when the generation backend cannot
be used.

Everything here is deterministic and never calls an external service. Only
the first MAX_FALLBACK_DAYS days of a longer trip are elaborated.
"""

import re
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

MAX_FALLBACK_DAYS = 7
DEFAULT_DURATION = 3

# (short name, activity phrase) for morning, afternoon and evening
ACTIVITY_TEMPLATES: Dict[str, List[Tuple[str, str]]] = {
    "culture": [
        ("Museums and galleries", "Visit museums and art galleries"),
        ("Historic sites", "Explore historical sites and monuments"),
        ("Cultural performance", "Attend cultural performances"),
    ],
    "food": [
        ("Food tour", "Take a food tour"),
        ("Local markets", "Visit local markets"),
        ("Traditional dinner", "Try traditional restaurants"),
    ],
    "adventure": [
        ("Outdoor activities", "Outdoor activities and hiking"),
        ("Adventure sports", "Adventure sports"),
        ("Nature exploration", "Nature exploration"),
    ],
    "relaxation": [
        ("Spa and wellness", "Spa and wellness activities"),
        ("Beach time", "Beach time"),
        ("Leisure walk", "Leisure walks"),
    ],
    "default": [
        ("Main attractions", "Explore main attractions"),
        ("Popular landmarks", "Visit popular landmarks"),
        ("Local experiences", "Local experiences"),
    ],
}

# Checked in order; the first keyword found in the interests text wins
INTEREST_KEYWORDS: List[Tuple[str, str]] = [
    ("culture", "culture"),
    ("food", "food"),
    ("adventure", "adventure"),
    ("relax", "relaxation"),
]

TIMES_OF_DAY = ("Morning", "Afternoon", "Evening")

PACKING_TIPS = [
    "Comfortable walking shoes",
    "Portable charger and universal adapter",
    "Copies of passport and travel documents",
    "Layers for changing weather",
]

# A fallback activity: (time of day, short name, full description)
FallbackActivity = Tuple[str, str, str]


def parse_duration(value: Any) -> int:
    """
    Read a trip duration from an int or a string such as "5" or "5 days".

    Unparsable, empty or zero values fall back to DEFAULT_DURATION; the
    result is never below 1.
    """
    days = 0
    if isinstance(value, bool):
        days = 0
    elif isinstance(value, int):
        days = value
    elif isinstance(value, float):
        days = int(value)
    elif isinstance(value, str):
        match = re.match(r"\s*([+-]?\d+)", value)
        if match:
            days = int(match.group(1))
    if days == 0:
        days = DEFAULT_DURATION
    return max(days, 1)


def duration_from_dates(start_date: str, end_date: str) -> int:
    """Inclusive day count between two ISO dates, DEFAULT_DURATION if unreadable."""
    try:
        start = date.fromisoformat(start_date[:10])
        end = date.fromisoformat(end_date[:10])
    except (TypeError, ValueError):
        return DEFAULT_DURATION
    return max((end - start).days + 1, 1)


def days_truncated(duration: int, max_days: int = MAX_FALLBACK_DAYS) -> bool:
    return duration > max_days


def select_interest_key(interests: Optional[str]) -> str:
    """Pick the activity template matching the interests text (case-insensitive)."""
    text = (interests or "").lower()
    for keyword, key in INTEREST_KEYWORDS:
        if keyword in text:
            return key
    return "default"


def generate_fallback_days(
    origin: Optional[str],
    destination: str,
    duration: int,
    interests: Optional[str] = None,
    max_days: int = MAX_FALLBACK_DAYS,
) -> List[Tuple[int, str, List[FallbackActivity]]]:
    """
    Build the day skeleton shared by both fallback plan shapes.

    With an origin, day 1 is the travel day and, for trips longer than two
    days, the last elaborated day is the return journey. Every other day
    explores the destination using the interest template.

    Returns:
        List of (day number, title, activities)
    """
    origin = (origin or "").strip()
    elaborated = max(1, min(duration, max_days))
    templates = ACTIVITY_TEMPLATES[select_interest_key(interests)]

    days = []
    for i in range(1, elaborated + 1):
        if i == 1 and origin:
            title = f"Day {i}: {origin} → {destination}"
            activities = [
                ("Morning", f"Travel to {destination}",
                 f"Depart from {origin} and travel to {destination}"),
                ("Afternoon", "Arrival and check-in",
                 f"Arrive in {destination}, check-in to accommodation, and freshen up"),
                ("Evening", "Welcome dinner",
                 "Take an evening stroll around the neighborhood and enjoy a welcome dinner"),
            ]
        elif i == elaborated and origin and duration > 2:
            title = f"Day {i}: Return Journey"
            activities = [
                ("Morning", "Farewell breakfast",
                 f"Final breakfast and last-minute souvenir shopping in {destination}"),
                ("Afternoon", "Departure",
                 f"Check-out and depart for {origin}"),
                ("Evening", "Arrive home",
                 f"Arrive back in {origin}"),
            ]
        else:
            title = f"Day {i}: Exploring {destination}"
            activities = [
                ("Morning", templates[0][0], f"{templates[0][1]} in {destination}"),
                ("Afternoon", templates[1][0], f"{templates[1][1]} and enjoy lunch at a local spot"),
                ("Evening", templates[2][0], f"{templates[2][1]} and dinner at a recommended restaurant"),
            ]
        days.append((i, title, activities))

    return days


def generate_fallback_itinerary(
    origin: Optional[str],
    destination: str,
    duration: int,
    interests: Optional[str] = None,
    max_days: int = MAX_FALLBACK_DAYS,
) -> List[Dict[str, Any]]:
    """Free-form itinerary: [{day, title, activities: [{time, activity}]}]"""
    return [
        {
            "day": day,
            "title": title,
            "activities": [
                {"time": time, "activity": description}
                for time, _name, description in activities
            ],
        }
        for day, title, activities in generate_fallback_days(
            origin, destination, duration, interests, max_days
        )
    ]


def generate_fallback_recommendations(destination: str, origin: Optional[str] = None) -> Dict[str, List[str]]:
    return {
        "accommodation": [
            f"Budget-friendly hotels in {destination}",
            "Boutique stays with local charm",
            "Airbnb options for authentic experience",
        ],
        "dining": [
            f"Must-try local restaurants in {destination}",
            "Street food recommendations",
            "Fine dining experiences",
        ],
        "activities": [
            f"Popular activities in {destination}",
            "Hidden gems and local favorites",
            "Day trips and excursions",
        ],
        "transportation": [
            f"Best routes from {origin} to {destination}" if origin else "Local transportation options",
            "Airport transfers and car rentals",
            "Public transport passes and tips",
        ],
    }


def generate_fallback_tips(destination: str, origin: Optional[str] = None) -> List[str]:
    tips = [
        f"Best time to visit {destination} is during spring or fall",
        "Book accommodations at least 2-3 weeks in advance",
        "Learn a few basic phrases in the local language",
        "Always carry a portable charger and universal adapter",
        "Download offline maps before you go",
    ]

    if origin:
        tips.insert(0, f"Check visa requirements for traveling from {origin} to {destination}")
        tips.append(f"Compare flight prices and book early for the {origin}-{destination} route")

    return tips


def build_fallback_trip_plan(
    origin: Optional[str],
    destination: str,
    duration: Any,
    interests: Optional[str] = None,
    budget: Optional[str] = None,
    max_days: int = MAX_FALLBACK_DAYS,
) -> Dict[str, Any]:
    """
    Complete free-form plan (FallbackTripPlan shape).

    ``duration`` is echoed back as given; the itinerary uses its parsed value.
    """
    origin = (origin or "").strip()
    return {
        "fromDestination": origin,
        "toDestination": destination,
        "duration": duration,
        "budget": budget or "Moderate",
        "itinerary": generate_fallback_itinerary(
            origin, destination, parse_duration(duration), interests, max_days
        ),
        "recommendations": generate_fallback_recommendations(destination, origin or None),
        "tips": generate_fallback_tips(destination, origin or None),
    }


def build_fallback_plan(
    origin: Optional[str],
    destination: str,
    duration: int,
    interests: Optional[str] = None,
    max_days: int = MAX_FALLBACK_DAYS,
) -> Dict[str, Any]:
    """Complete day-by-day plan in the TripPlan shape."""
    origin = (origin or "").strip()
    days = generate_fallback_days(origin, destination, duration, interests, max_days)
    summary = f"A {duration}-day trip to {destination}"
    if origin:
        summary += f" from {origin}"
    summary += " covering the main sights, local food and time to explore at your own pace."
    if days_truncated(duration, max_days):
        summary += f" The first {max_days} days are planned in detail."

    return {
        "summary": summary,
        "dailyPlan": [
            {
                "day": day,
                "title": title,
                "activities": [
                    {
                        "timeOfDay": time.lower(),
                        "name": name,
                        "description": description,
                        "location": destination,
                    }
                    for time, name, description in activities
                ],
            }
            for day, title, activities in days
        ],
        "packingTips": list(PACKING_TIPS),
        "localTips": generate_fallback_tips(destination, origin or None),
    }
