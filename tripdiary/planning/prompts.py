"""
Prompt templates for trip planning.

Rendering is pure: the same request always produces byte-identical text.
"""

from typing import List

from ..schemas.requests import GenerateTripRequest, TripPlanRequest

PLANNER_SYSTEM_PROMPT = (
    "You are an expert travel planner. You reply with a single JSON object and nothing else."
)

PLAN_RULES = """Rules:
- Prefer popular, safe, and publicly accessible attractions.
- Balance activities across the day based on style.
- Include travel time considerations and adjacency where relevant.
- Respect budget level in activity, food, and transport choices.
- Provide succinct titles and informative descriptions.
- Use local context (cuisine, customs) without hallucinating specifics.
- Prices should be ballpark and clearly marked "approx." if included."""

PLAN_OUTPUT_FORMAT = """IMPORTANT: Respond ONLY with valid JSON in this exact format:
{
  "summary": "Brief overview of the trip",
  "dailyPlan": [
    {
      "day": 1,
      "title": "Day title",
      "activities": [
        {
          "timeOfDay": "morning",
          "name": "Activity name",
          "description": "Activity description",
          "location": "Location name",
          "tips": "Helpful tips",
          "estimatedCost": "Cost estimate"
        }
      ]
    }
  ],
  "packingTips": ["tip1", "tip2"],
  "localTips": ["tip1", "tip2"],
  "estimatedBudgetBreakdown": [
    {"category": "Accommodation", "amount": "$500"}
  ]
}

Provide 2-5 activities per day. Do not include any text outside the JSON."""

TRIP_OUTPUT_FORMAT = """Please provide a comprehensive trip plan in the following JSON format:
{
  "itinerary": [
    {
      "day": 1,
      "title": "Day 1 title",
      "activities": [
        { "time": "Morning", "activity": "Activity description" },
        { "time": "Afternoon", "activity": "Activity description" },
        { "time": "Evening", "activity": "Activity description" }
      ]
    }
  ],
  "recommendations": {
    "accommodation": ["recommendation 1", "recommendation 2", "recommendation 3"],
    "dining": ["recommendation 1", "recommendation 2", "recommendation 3"],
    "activities": ["recommendation 1", "recommendation 2", "recommendation 3"],
    "transportation": ["recommendation 1", "recommendation 2", "recommendation 3"]
  },
  "tips": ["tip 1", "tip 2", "tip 3", "tip 4", "tip 5"]
}"""


def build_plan_prompt(request: TripPlanRequest) -> str:
    """
    Render the strict planning prompt.

    Args:
        request: Validated, fully defaulted planning request

    Returns:
        Instruction text including the rule list and the exact JSON shape
    """
    header = "\n".join(
        [
            "You are an expert travel planner. Create a practical, safe, and engaging day-by-day itinerary.",
            "",
            f"Destination: {request.destination}",
            f"Dates: {request.start_date} to {request.end_date}",
            f"Starting city (if provided): {request.starting_city or ''}",
            f"Travelers: {request.travelers}",
            f"Budget level: {request.budget_level}",
            f"Interests: {', '.join(request.interests)}",
            f"Style/Pace: {request.travel_style}",
            f"Notes: {request.notes or ''}",
        ]
    )
    return f"{header}\n\n{PLAN_RULES}\n\n{PLAN_OUTPUT_FORMAT}\n"


def build_trip_prompt(request: GenerateTripRequest) -> str:
    """
    Render the free-form planning prompt.

    Only the details the user actually supplied are listed; route guidance
    (departure on day 1, return on the last day) is added when an origin is
    given.
    """
    origin = (request.from_destination or "").strip()
    destination = request.to_destination
    route_info = f"from {origin} to {destination}" if origin else f"to {destination}"

    details: List[str] = [f"- Destination: {destination}"]
    if origin:
        details.append(f"- Starting from: {origin}")
    details.append(f"- Duration: {request.duration} days")
    if request.budget:
        details.append(f"- Budget: {request.budget}")
    if request.travelers:
        details.append(f"- Number of travelers: {request.travelers}")
    if request.interests_text:
        details.append(f"- Interests: {request.interests_text}")
    if request.travel_style:
        details.append(f"- Travel style: {request.travel_style}")

    guidelines: List[str] = []
    if origin:
        guidelines.append(f"- Day 1 should include travel from {origin} to {destination}")
        guidelines.append(f"- Last day should include return travel from {destination} to {origin}")
    guidelines.extend(
        [
            f"- Make recommendations specific to {destination}",
            "- Consider the budget level if provided",
            "- Tailor activities to the stated interests",
            "- Provide practical, actionable advice",
            "- Include specific place names and attractions",
            "- Make the itinerary realistic and achievable",
        ]
    )

    return "\n".join(
        [
            f"You are an expert travel planner. Create a detailed {request.duration}-day trip plan {route_info}.",
            "",
            "Trip Details:",
            *details,
            "",
            TRIP_OUTPUT_FORMAT,
            "",
            "Important guidelines:",
            *guidelines,
            "",
            "Return ONLY valid JSON, no markdown formatting or code blocks.",
        ]
    )


# ============================================================================
# DIARY WRITING PROMPTS
# ============================================================================

def build_summary_prompt(content: str) -> str:
    return (
        "Summarize the following trip entry content, focusing on the key moments and details.\n"
        'Respond ONLY with a JSON object of the form {"summary": "..."}.\n\n'
        f"{content}"
    )


def build_diary_prompt(bullet_points: List[str]) -> str:
    bullets = "\n".join(f"- {point}" for point in bullet_points)
    return (
        "You are a creative and descriptive travel writer. A user will provide you with a list of "
        "bullet points from their day. Your task is to expand these points into a beautiful, engaging, "
        "and personal diary entry. Capture the essence of the experiences and emotions.\n"
        'Respond ONLY with a JSON object of the form {"diaryEntry": "..."}.\n\n'
        "Here are the user's bullet points:\n"
        f"{bullets}\n"
    )


def build_suggestion_prompt(past_trips: List[str]) -> str:
    trips = "\n".join(f"- {trip}" for trip in past_trips)
    return (
        "You are a travel expert. Given the following descriptions of the user's past trips, "
        "suggest new travel destinations that the user might enjoy.\n"
        'Respond ONLY with a JSON object of the form {"suggestions": ["destination", "..."]}.\n\n'
        "Past Trips:\n"
        f"{trips}\n"
    )
