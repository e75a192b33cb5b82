#file: aq_dashboard/data_fetch.py

import asyncio
import logging
import ssl
from typing import Any, Dict, List

import aiohttp
import certifi
from pydantic import ValidationError

from aq_dashboard import config
from aq_dashboard.models import HistoricalDataPoint, Station

HEADERS = {"Content-Type" : "application/json"}


def _client_session() -> aiohttp.ClientSession:
    ssl_context = ssl.create_default_context(cafile = certifi.where())
    return aiohttp.ClientSession(
        connector = aiohttp.TCPConnector(ssl = ssl_context),
        timeout = aiohttp.ClientTimeout(total = config.REQUEST_TIMEOUT),
        headers = HEADERS
    )


async def _get_data(url: str, params: Dict[str, Any] | None = None) -> Any:
    """GET ``url`` and unwrap the ``data`` member of the response, ``None`` on failure."""
    try :
        async with _client_session() as session :
            async with session.get(url, params = params) as response :
                if response.status != 200 :
                    logging.warning(f"Request to {url} failed: HTTP {response.status}")
                    return None
                body = await response.json()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e :
        logging.error(f"Network request to {url} failed: {e!r}")
        return None
    except ValueError as e :
        logging.error(f"Malformed response from {url}: {e}")
        return None

    if not isinstance(body, dict) or not isinstance(body.get("data"), list) :
        logging.error(f"Unexpected response shape from {url}")
        return None
    return body["data"]


async def fetch_stations() -> List[Station]:
    """Fetch all stations with their latest readings; empty list when the API is unavailable."""
    url = f"{config.API_BASE_URL}/stations"
    records = await _get_data(url)
    if records is None :
        return []

    stations = []
    for record in records :
        try :
            stations.append(Station.model_validate(record))
        except ValidationError as e :
            logging.warning(f"Skipping malformed station record {record!r}: {e.error_count()} error(s)")
    logging.info(f"Fetched {len(stations)} stations")
    return stations


async def fetch_history(sensor_id: str, window: int = 24) -> List[HistoricalDataPoint]:
    """
    Fetch readings for one sensor over the last ``window`` units (days or hours,
    as the API interprets ``range``), oldest first.
    """
    url = f"{config.API_BASE_URL}/stations/{sensor_id}/readings"
    params = {"range" : window, "direction" : "asc", "sort" : "timeStamp"}
    records = await _get_data(url, params)
    if records is None :
        return []

    points = []
    for record in records :
        try :
            points.append(HistoricalDataPoint.model_validate(record))
        except ValidationError as e :
            logging.warning(f"Skipping malformed reading for sensor {sensor_id}: {e.error_count()} error(s)")
    return points
