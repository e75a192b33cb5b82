#file: aq_dashboard/submissions.py

import logging
from typing import Any, Dict

import requests

from aq_dashboard import config
from aq_dashboard.models import AlertSubscription, Feedback

HEADERS = {"Content-Type" : "application/json"}


class ApiRequestError(Exception):
    """A form submission the remote API did not accept."""

    def __init__(self, status: int | None, detail: str):
        self.status = status
        self.detail = detail
        super().__init__(f"Request failed: {status} - {detail}" if status else f"Request failed: {detail}")


def _post(path: str, payload: Dict[str, Any] | None = None) -> Any:
    url = f"{config.API_BASE_URL}{path}"
    try :
        response = requests.post(url, json = payload, headers = HEADERS, timeout = config.REQUEST_TIMEOUT)
    except requests.RequestException as e :
        logging.error(f"Error posting to {url}: {e}")
        raise ApiRequestError(None, str(e)) from e

    if not response.ok :
        logging.error(f"[ERROR] HTTP {response.status_code} from {url}: {response.text}")
        raise ApiRequestError(response.status_code, response.text)

    try :
        body = response.json()
    except ValueError :
        return None
    return body.get("data") if isinstance(body, dict) else body


def subscribe_to_alerts(subscription: AlertSubscription) -> Any:
    """Register an email address for alerts on the selected sensors."""
    logging.info(f"Subscribing {subscription.email} to {len(subscription.sensors)} sensor(s)")
    return _post("/alerts/users", subscription.model_dump())


def unsubscribe_from_alerts(subscriber_id: str) -> Any:
    """Stop alerts for a subscriber id taken from an unsubscribe link."""
    logging.info(f"Unsubscribing alert subscriber {subscriber_id}")
    return _post(f"/alerts/users/{subscriber_id}/unsubscribe")


def submit_feedback(feedback: Feedback) -> Any:
    return _post("/feedback", feedback.model_dump())
