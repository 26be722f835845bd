import html
from typing import Optional
import streamlit as st
import pandas as pd
from process import check
from structs import CheckResult, CheckStatus
from utils import format_contest_time
from export_pdf import pdf_bytes

def setup_page():
    st.set_page_config(
        page_title="Codeforces Cheat Detector",
        page_icon="🕵️",
        layout="centered"
    )

    # Custom CSS for the heading and result messages
    st.markdown("""
    <style>
    h1 {
        font-size: 2.2rem !important;
        font-weight: 700 !important;
        text-align: center;
        margin-bottom: 1rem !important;
    }
    .result-ok {
        color: #22c55e;
        text-align: center;
        margin-top: 0.5rem;
    }
    .result-bad {
        color: #ef4444;
        text-align: center;
        margin-top: 0.5rem;
    }
    </style>
    """, unsafe_allow_html=True)

def contests_dataframe(result: CheckResult) -> pd.DataFrame:
    rows = []
    for contest in result.contests:
        rows.append({
            "contest_id": contest.id,
            "name": contest.name,
            "start_time": format_contest_time(contest.startTimeSeconds),
        })
    for contest_id in result.unresolved_ids:
        rows.append({"contest_id": contest_id, "name": "Not listed", "start_time": "Unknown"})
    return pd.DataFrame(rows, columns=["contest_id", "name", "start_time"])

def render_result(result: CheckResult, report: Optional[bytes] = None):
    if result.status == CheckStatus.ERROR:
        st.markdown("<div class='result-bad'>An error occurred. Please try again.</div>", unsafe_allow_html=True)
        return

    if result.status == CheckStatus.NO_CHEATING:
        st.markdown(f"<div class='result-ok'>No cheating detected for {html.escape(result.handle)}</div>", unsafe_allow_html=True)
        return

    st.markdown("<div class='result-bad'>Cheating Detected In Contests :</div>", unsafe_allow_html=True)
    for name in result.names:
        st.markdown(f"<div class='result-bad'>{html.escape(name)}</div>", unsafe_allow_html=True)

    st.dataframe(
        contests_dataframe(result),
        use_container_width=True,
        hide_index=True,
        column_config={
            "contest_id": st.column_config.NumberColumn("Contest ID", format="%d"),
            "name": "Contest",
            "start_time": "Start Time",
        }
    )

    if report:
        st.download_button(
            label="Download PDF Report",
            data=report,
            file_name=f"cheat_report_{result.handle}.pdf",
            mime="application/pdf"
        )

def main():
    setup_page()
    st.title("Codeforces Cheat Detector")
    st.session_state.setdefault("result", None)
    st.session_state.setdefault("report", None)

    with st.form("check_form"):
        handle = st.text_input("CodeForces Handle")
        submitted = st.form_submit_button("Check")

    if submitted and handle.strip():
        # last check wins
        st.session_state["result"] = None
        st.session_state["report"] = None
        with st.spinner("Checking..."):
            result = check(handle)
            if result.status == CheckStatus.CHEATING_DETECTED:
                st.session_state["report"] = pdf_bytes(result)
            st.session_state["result"] = result

    result = st.session_state["result"]
    if result is not None:
        render_result(result, st.session_state["report"])

if __name__ == "__main__":
    main()
