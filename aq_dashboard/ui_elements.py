#file: aq_dashboard/ui_elements.py

import pandas as pd
import plotly.express as px
import streamlit as st

from aq_dashboard.breakpoints import CATEGORIES, PALETTE
from aq_dashboard.classifier import NO_DATA_COLOR, NO_DATA_LABEL, classify_reading, health_advice
from aq_dashboard.models import POLLUTANTS
from aq_dashboard.utils import format_reading

CHART_COLORS = {"aqi" : "#3b82f6", "pm25" : "#ef4444", "pm10" : "#f59e0b"}


def display_map(station_df, selected_id = None) :
    """Display a map with station locations colored by health category."""
    station_df = station_df.copy()
    station_df["size"] = [18 if station_id == selected_id else 10 for station_id in station_df["id"]]

    color_map = dict(PALETTE)
    color_map[NO_DATA_LABEL] = NO_DATA_COLOR

    fig_map = px.scatter_mapbox(
        station_df,
        lat = "lat",
        lon = "lon",
        hover_name = "name",
        hover_data = {"reading" : True, "label" : True, "lat" : False, "lon" : False, "size" : False},
        size = "size",
        color = "label",
        color_discrete_map = color_map,
        category_orders = {"label" : CATEGORIES + [NO_DATA_LABEL]},
        zoom = 10.5,
        height = 550,
    )
    fig_map.update_layout(
        mapbox_style = "open-street-map",
        showlegend = False,
        margin = {
            "r" : 0,
            "t" : 0,
            "l" : 0,
            "b" : 0
        }
    )

    st.plotly_chart(fig_map, use_container_width = True)


def display_legend() :
    swatches = [(label, PALETTE[label]) for label in CATEGORIES] + [(NO_DATA_LABEL, NO_DATA_COLOR)]
    html = " ".join(
        f'<span style="display:inline-flex;align-items:center;margin-right:14px">'
        f'<span style="width:12px;height:12px;border-radius:50%;background:{color};margin-right:6px"></span>'
        f'{label}</span>'
        for label, color in swatches
    )
    st.markdown(html, unsafe_allow_html = True)


def display_station_details(station, kind, on_clear) :
    """Show the selected station's current reading, category and advice."""
    value = station.reading(kind)
    category = classify_reading(value, kind)
    option = POLLUTANTS[kind]

    col1, col2 = st.columns([6, 1])
    with col1 :
        st.markdown(f"#### {station.name}")
        st.markdown(f"Current {option.label}: **{format_reading(value, kind)}** - {category.label}")
        st.caption(health_advice(category.label))
    with col2 :
        st.markdown(
            f'<div style="width:28px;height:28px;border-radius:50%;background:{category.color}"></div>',
            unsafe_allow_html = True
        )
        st.button("✕", key = "clear_selection", help = "Clear selected station", on_click = on_clear)


def ranking_frame(ranked, kind) :
    """Leaderboard rows: position, station name and a formatted reading."""
    return pd.DataFrame(
        [{"#" : position, "Station" : station.name, POLLUTANTS[kind].label : format_reading(station.reading(kind), kind)}
         for position, station in enumerate(ranked, start = 1)],
        columns = ["#", "Station", POLLUTANTS[kind].label]
    )


def display_ranking(title, caption, ranked, kind) :
    st.subheader(title)
    st.caption(caption)
    if not ranked :
        st.info("No stations report this pollutant right now.")
        return

    label_column = POLLUTANTS[kind].label

    def badge(column) :
        styles = []
        for station in ranked :
            category = classify_reading(station.reading(kind), kind)
            styles.append(f"background-color: {category.color}; color: {category.text_color}")
        return styles

    styled = ranking_frame(ranked, kind).style.apply(badge, subset = [label_column])
    st.dataframe(styled, use_container_width = True, hide_index = True)


def display_trends(data_frame, station_name, kind) :
    """Display a line chart of a station's history for one pollutant."""
    option = POLLUTANTS[kind]
    if data_frame.empty :
        st.info(f"No {option.label} history for {station_name}.")
        return

    axis_label = f"{option.label} ({option.unit})" if option.unit else option.label
    fig = px.line(
        data_frame,
        x = "timestamp",
        y = "value",
        markers = True,
        title = f"{option.label} trends - {station_name}",
        color_discrete_sequence = [CHART_COLORS.get(kind, "#3b82f6")],
        labels = {
            "timestamp" : "Date",
            "value" : axis_label
        }
    )
    fig.update_layout(margin = {"r" : 0, "t" : 40, "l" : 0, "b" : 0})
    st.plotly_chart(fig, use_container_width = True)
