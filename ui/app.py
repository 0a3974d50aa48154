"""Streamlit UI for the trip budget planner.

Run with: streamlit run ui/app.py
"""

# Add project root to sys.path for imports to work when run via streamlit
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import streamlit as st  # noqa: E402

from backend.app.config import get_settings  # noqa: E402
from ui.helpers import (  # noqa: E402
    budget_status,
    build_cost_rows,
    build_day_rows,
    call_plan,
    format_money,
)

BACKEND_URL = get_settings().ui_backend_url

# Page config
st.set_page_config(
    page_title="Trip Budget Planner",
    page_icon="🧳",
    layout="wide",
)

# Initialize session state
if "itinerary" not in st.session_state:
    st.session_state.itinerary = None
if "error" not in st.session_state:
    st.session_state.error = None

st.title("🧳 Trip Budget Planner")
st.markdown("*Hotels, daily plans, and a cost breakdown that adds up*")
st.divider()

col_left, col_right = st.columns([1, 2.5])

# =============================================================================
# LEFT COLUMN - TRIP FORM
# =============================================================================
with col_left:
    st.subheader("📋 Trip Setup")

    with st.form("trip_form"):
        destinations = st.text_input("Destination(s) *", value="Lisbon", help="Required")
        budget = st.number_input(
            "Total budget (USD) *", min_value=100, max_value=100000, value=3000, step=100
        )
        people = st.number_input("Travelers *", min_value=1, max_value=20, value=2)
        trip_length = st.number_input("Trip length (days) *", min_value=1, max_value=30, value=4)
        extra_details = st.text_area(
            "Special requests",
            placeholder="e.g., vegetarian food, no early mornings",
        )

        submitted = st.form_submit_button("🚀 Plan Trip", type="primary", use_container_width=True)

        if submitted:
            if not destinations.strip():
                st.session_state.error = "Destination is required"
                st.session_state.itinerary = None
            else:
                with st.spinner("Planning your trip..."):
                    try:
                        st.session_state.itinerary = call_plan(
                            backend_url=BACKEND_URL,
                            destinations=destinations.strip(),
                            budget=float(budget),
                            people=int(people),
                            trip_length=int(trip_length),
                            extra_details=extra_details.strip() or None,
                        )
                        st.session_state.error = None
                    except Exception as e:
                        st.session_state.error = str(e)
                        st.session_state.itinerary = None

    if st.session_state.error:
        st.error(f"❌ {st.session_state.error}")

# =============================================================================
# RIGHT COLUMN - ITINERARY
# =============================================================================
with col_right:
    itinerary = st.session_state.itinerary

    if not itinerary:
        st.info("👈 Fill out the trip form and hit **Plan Trip** to see your itinerary here.")
    else:
        summary = itinerary.get("tripSummary") or {}
        metric_cols = st.columns(3)
        metric_cols[0].metric("Estimated cost", format_money(summary.get("totalEstimatedCost")))
        metric_cols[1].metric("Budget limit", format_money(summary.get("budgetLimit")))
        metric_cols[2].metric("Remaining", format_money(summary.get("budgetRemaining")))

        level, message = budget_status(itinerary)
        getattr(st, level)(message)

        st.markdown("### 🏨 Hotels")
        for hotel in itinerary.get("hotels") or []:
            st.markdown(
                f"**{hotel.get('name', 'Hotel')}** ({hotel.get('location', '')}) - "
                f"{format_money(hotel.get('pricePerNight'))}/night, "
                f"{hotel.get('totalNights', '?')} nights, rating {hotel.get('rating', 'n/a')}"
            )

        st.markdown("### 🗓️ Daily Itinerary")
        for day in itinerary.get("dailyItinerary") or []:
            with st.expander(
                f"Day {day.get('day', '?')}: {day.get('title', '')} "
                f"({format_money(day.get('dayTotal'))})"
            ):
                for line in build_day_rows(day):
                    st.markdown(f"- {line}")

        st.markdown("### 💰 Cost Breakdown")
        st.table(build_cost_rows(itinerary))

        tips = itinerary.get("tips") or []
        if tips:
            st.markdown("### 💡 Tips")
            for tip in tips:
                st.markdown(f"- {tip}")

        with st.expander("🔧 Raw JSON Response (dev)"):
            st.json(itinerary)
