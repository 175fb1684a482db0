"""Dashboard page: chargeback status summary, trends, and delinquency total."""
from __future__ import annotations

import streamlit as st

from cdms_console.reporting.stats import ReportTable, fetch_dashboard_report
from cdms_console.ui.context import AppContext


def _render_report_table(table: ReportTable) -> None:
    st.subheader(table.title)
    st.dataframe(table.as_records(), hide_index=True, use_container_width=True, column_order=table.headers)


def render_dashboard_page(ctx: AppContext) -> None:
    st.title("Dashboard")
    st.caption("An overview of chargeback and delinquency metrics.")

    with st.spinner("Loading dashboard..."):
        report = fetch_dashboard_report(ctx.client)

    if report.error:
        st.error(f"Error: {report.error}")
        if st.button("Retry", key="dashboard_retry"):
            st.rerun()
        return

    if report.status_summary:
        _render_report_table(report.status_summary)
    if report.trends:
        _render_report_table(report.trends)

    st.subheader("Delinquency Overview")
    cols = st.columns(4)
    cols[0].metric(
        "Total Active Delinquencies",
        f"{report.delinquency_total:,}" if report.delinquency_total is not None else "—",
        help="Total number of active delinquencies",
    )
