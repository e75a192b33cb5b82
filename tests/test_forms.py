"""Tests for form validation feeding the feedback and alert forms."""

from aq_dashboard.forms import RATING_TEXT, validate_feedback, validate_subscription


def test_valid_feedback():
    feedback, errors = validate_feedback("Jane", "jane@example.com", "Great work", 3)
    assert errors == {}
    assert feedback.rating == 3


def test_feedback_without_rating():
    feedback, errors = validate_feedback("Jane", "jane@example.com", "Great work", None)
    assert feedback is None
    assert errors == {"rating" : "Please select a rating."}


def test_feedback_reports_every_field():
    _, errors = validate_feedback("  ", "not-an-email", "", 2)
    assert errors == {
        "name" : "Name is required.",
        "email" : "Enter a valid email address.",
        "message" : "Feedback is required.",
    }


def test_valid_subscription():
    subscription, errors = validate_subscription("Jane", "jane@example.com", ("s1",))
    assert errors == {}
    assert subscription.sensors == ["s1"]


def test_subscription_without_sensors():
    subscription, errors = validate_subscription("Jane", "jane@example.com", [])
    assert subscription is None
    assert errors == {"sensors" : "Select at least one sensor."}


def test_rating_text():
    assert [RATING_TEXT[r] for r in range(1, 6)] == ["Poor", "Fair", "Good", "Very Good", "Excellent"]
