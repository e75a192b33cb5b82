#file: aq_dashboard/app.py

import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import asyncio
import logging
import streamlit as st

from aq_dashboard import config

st.set_page_config(page_title = f"{config.CITY_NAME} Air Quality", page_icon = "🌍", layout = "wide")
logging.basicConfig(level = getattr(logging, config.LOG_LEVEL, logging.INFO),
                    format = '%(asctime)s - %(levelname)s - %(message)s')

from aq_dashboard.data_fetch import fetch_history, fetch_stations
from aq_dashboard.forms import alert_form, feedback_form
from aq_dashboard.info import info_sections
from aq_dashboard.models import POLLUTANTS
from aq_dashboard.ranking import cleanest, most_polluted
from aq_dashboard.submissions import ApiRequestError, unsubscribe_from_alerts
from aq_dashboard.ui_elements import (display_legend, display_map, display_ranking, display_station_details,
                                      display_trends)
from aq_dashboard.utils import (history_to_frame, latest_update, load_uncached_if_empty, search_stations,
                                stations_to_frame, trim_history)
from aq_dashboard.view_state import TREND_DURATIONS, get_state


@st.cache_data(ttl = config.REFRESH_SECONDS, show_spinner = "Loading stations...")
def load_stations() :
    return asyncio.run(fetch_stations())


@st.cache_data(ttl = config.REFRESH_SECONDS, show_spinner = False)
def load_history(sensor_id, days) :
    return asyncio.run(fetch_history(sensor_id, days))


# Unsubscribe links land on ?unsubscribe=<id>
subscriber_id = st.query_params.get("unsubscribe")
if subscriber_id :
    st.title("Unsubscribe from Alerts")
    try :
        unsubscribe_from_alerts(subscriber_id)
        st.success("You have successfully unsubscribed from air quality alerts.")
    except ApiRequestError as e :
        logging.error(f"Unsubscribe failed for {subscriber_id}: {e}")
        st.error("We couldn't process your request. Please try again later.")
    st.stop()

state = get_state(st.session_state)

stations, stale = state.remember_stations(load_uncached_if_empty(load_stations))

st.title(f"{config.CITY_NAME} Air Quality")
last_update = latest_update(stations, config.TIMEZONE)
if last_update :
    st.markdown(f":green[**Live Data:** {last_update}]")
if stale :
    st.warning("Could not refresh station data. Showing the last known readings.")
if not stations :
    st.warning("No station data available right now.")
    st.stop()

# Pollutant selection
pollutant_keys = list(POLLUTANTS)
state.pollutant = st.selectbox("Pollutant", pollutant_keys, index = pollutant_keys.index(state.pollutant),
                               format_func = lambda kind : POLLUTANTS[kind].label)
option = POLLUTANTS[state.pollutant]

# Display map
display_map(stations_to_frame(stations, state.pollutant), state.selected_station_id)
display_legend()

# Station search and selection
state.search_term = st.text_input("Search station by name...", value = state.search_term)
matches = search_stations(stations, state.search_term)
if state.search_term :
    if matches :
        for station in matches :
            st.button(station.name, key = f"search_{station.id}", on_click = state.select_station,
                      args = (station.id,))
    else :
        st.caption("No matching stations")

selected = state.find(state.selected_station_id)
if selected :
    display_station_details(selected, state.pollutant, state.clear_selection)

# Leaderboards
col1, col2 = st.columns(2)
with col1 :
    display_ranking("Cleanest station", f"Real-time {config.CITY_NAME} cleanest station ranking",
                    cleanest(stations, state.pollutant, config.TOP_N), state.pollutant)
with col2 :
    display_ranking("Most polluted station", f"Real-time {config.CITY_NAME} most polluted station ranking",
                    most_polluted(stations, state.pollutant, config.TOP_N), state.pollutant)

# Trends
st.header(f"{option.label} trends")
station_ids = [station.id for station in stations]
trends_id = state.trends_station_id if state.trends_station_id in station_ids else station_ids[0]
col1, col2 = st.columns([3, 1])
with col1 :
    state.trends_station_id = st.selectbox("Station", station_ids, index = station_ids.index(trends_id),
                                           format_func = lambda station_id : state.find(station_id).name)
with col2 :
    state.trend_duration = st.selectbox("Duration", TREND_DURATIONS, index = TREND_DURATIONS.index(state.trend_duration),
                                        format_func = lambda days : f"Last {days} days")

trends_station = state.find(state.trends_station_id)
history = trim_history(load_uncached_if_empty(load_history, trends_station.sensor_id, max(TREND_DURATIONS)),
                       state.trend_duration)
display_trends(history_to_frame(history, state.pollutant), trends_station.name, state.pollutant)

# Alerts
st.header("Get air quality alerts in your inbox")
alert_form(stations)

# Portal information
for title, paragraphs in info_sections(config.CITY_NAME, config.CONTACT_EMAIL).items() :
    with st.expander(title) :
        for paragraph in paragraphs :
            st.markdown(paragraph)

feedback_form()
