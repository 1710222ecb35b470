import pytest
from pydantic import ValidationError as PydanticValidationError

from tripdiary.schemas import TripPlanRequest, validate_plan_request


def _reasons(diagnostics):
    return {d["field"]: d["reason"] for d in diagnostics}


def test_valid_request_is_fully_defaulted():
    request, diagnostics = validate_plan_request({"destination": "Rome", "startDate": "2026-06-01", "endDate": "2026-06-04"})

    assert diagnostics == []
    assert request.destination == "Rome"
    assert request.budget_level == "medium"
    assert request.travelers == 1
    assert request.interests == ()
    assert request.travel_style == "balanced"
    assert request.starting_city is None
    assert request.notes is None


def test_supplied_values_are_kept(plan_request):
    plan_request.update(budgetLevel="high", travelers=3, travelStyle="packed", startingCity="London")
    request, diagnostics = validate_plan_request(plan_request)

    assert diagnostics == []
    assert request.budget_level == "high"
    assert request.travelers == 3
    assert request.travel_style == "packed"
    assert request.starting_city == "London"
    assert request.interests == ("art", "food")


def test_travelers_below_one_is_rejected_not_clamped(plan_request):
    plan_request["travelers"] = 0
    request, diagnostics = validate_plan_request(plan_request)

    assert request is None
    assert _reasons(diagnostics) == {"travelers": "below_minimum"}


def test_short_destination_is_rejected(plan_request):
    plan_request["destination"] = "P"
    request, diagnostics = validate_plan_request(plan_request)

    assert request is None
    assert _reasons(diagnostics)["destination"] == "below_minimum"


def test_every_violation_is_reported():
    request, diagnostics = validate_plan_request(
        {"destination": "Paris", "budgetLevel": "luxury", "travelers": "2", "travelStyle": "frantic"}
    )

    assert request is None
    assert _reasons(diagnostics) == {
        "startDate": "required",
        "endDate": "required",
        "budgetLevel": "out_of_enum",
        "travelers": "wrong_type",
        "travelStyle": "out_of_enum",
    }
    assert all(d["message"] for d in diagnostics)


def test_unknown_fields_are_ignored(plan_request):
    plan_request["favouriteColour"] = "blue"
    request, diagnostics = validate_plan_request(plan_request)

    assert diagnostics == []
    assert not hasattr(request, "favouriteColour")


def test_non_object_body_is_reported_not_raised():
    request, diagnostics = validate_plan_request(["Paris"])

    assert request is None
    assert diagnostics[0]["field"] == "body"


def test_no_date_ordering_check(plan_request):
    plan_request.update(startDate="2026-05-10", endDate="2026-05-01")
    request, diagnostics = validate_plan_request(plan_request)

    assert diagnostics == []
    assert request.end_date == "2026-05-01"


def test_validated_request_is_immutable(plan_request):
    request, _ = validate_plan_request(plan_request)

    with pytest.raises(PydanticValidationError):
        request.destination = "Berlin"
    with pytest.raises(AttributeError):
        request.interests.append("mutated")
    assert request.interests == ("art", "food")


def test_request_can_be_built_with_field_names():
    request = TripPlanRequest(destination="Lisbon", start_date="2026-01-01", end_date="2026-01-02")
    assert request.destination == "Lisbon"


def test_whole_number_float_travelers_are_accepted(plan_request):
    plan_request["travelers"] = 2.0
    request, diagnostics = validate_plan_request(plan_request)

    assert diagnostics == []
    assert request.travelers == 2


def test_fractional_travelers_are_rejected(plan_request):
    plan_request["travelers"] = 2.5
    request, diagnostics = validate_plan_request(plan_request)

    assert request is None
    assert _reasons(diagnostics) == {"travelers": "wrong_type"}


def test_non_string_interest_is_reported_by_position(plan_request):
    plan_request["interests"] = ["art", 3]
    request, diagnostics = validate_plan_request(plan_request)

    assert request is None
    assert _reasons(diagnostics) == {"interests.1": "wrong_type"}
