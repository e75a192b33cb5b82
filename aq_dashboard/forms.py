#file: aq_dashboard/forms.py

import logging

import streamlit as st
from pydantic import ValidationError

from aq_dashboard.models import AlertSubscription, Feedback
from aq_dashboard.submissions import ApiRequestError, submit_feedback, subscribe_to_alerts

RATING_TEXT = {1 : "Poor", 2 : "Fair", 3 : "Good", 4 : "Very Good", 5 : "Excellent"}


def field_errors(error: ValidationError) -> dict:
    """Map each invalid field to its first human-readable message."""
    errors = {}
    for item in error.errors() :
        field = str(item["loc"][0]) if item["loc"] else "form"
        message = str(item.get("ctx", {}).get("error", item["msg"]))
        errors.setdefault(field, message)
    return errors


def validate_feedback(name, email, message, rating):
    """Return ``(Feedback, {})`` when valid, ``(None, errors)`` otherwise."""
    try :
        return Feedback(name = name, email = email, message = message, rating = rating or 0), {}
    except ValidationError as e :
        return None, field_errors(e)


def validate_subscription(name, email, sensors):
    try :
        return AlertSubscription(name = name, email = email, sensors = list(sensors)), {}
    except ValidationError as e :
        return None, field_errors(e)


def _show_errors(errors) :
    for field, message in errors.items() :
        st.error(f"{field.capitalize()}: {message}")


def feedback_form() :
    """Feedback form posting name, email, message and a 1-5 star rating."""
    st.header("We value your feedback")
    with st.form("feedback", clear_on_submit = False) :
        name = st.text_input("Name")
        email = st.text_input("Email", placeholder = "your.email@example.com")
        rating = st.radio("Rating", list(RATING_TEXT), index = None, horizontal = True,
                          format_func = lambda r : "★" * r + f" {RATING_TEXT[r]}")
        message = st.text_area("Feedback")
        submitted = st.form_submit_button("Submit feedback")

    if not submitted :
        return

    feedback, errors = validate_feedback(name, email, message, rating)
    if errors :
        _show_errors(errors)
        return
    try :
        submit_feedback(feedback)
        st.success("Thank you for your feedback!")
    except ApiRequestError as e :
        logging.error(f"Error submitting feedback: {e}")
        st.error("Something went wrong. Please try again later.")


def alert_form(stations) :
    """Alert subscription form; sensors are picked from the live station list."""
    sensor_names = {station.sensor_id : station.name for station in stations}
    with st.form("alerts", clear_on_submit = False) :
        name = st.text_input("Name", placeholder = "John Doe")
        email = st.text_input("Email Address", placeholder = "you@example.com")
        sensors = st.multiselect("Sensors", list(sensor_names), format_func = lambda s : sensor_names.get(s, s),
                                 placeholder = "Search and select sensors...")
        submitted = st.form_submit_button("Get Air Quality Alerts")

    if not submitted :
        return

    subscription, errors = validate_subscription(name, email, sensors)
    if errors :
        _show_errors(errors)
        return
    try :
        subscribe_to_alerts(subscription)
        st.success(f"Alerts for {len(subscription.sensors)} sensor(s) will be sent to {subscription.email}.")
    except ApiRequestError as e :
        logging.error(f"Error subscribing to alerts: {e}")
        st.error("Something went wrong. Please try again later.")
