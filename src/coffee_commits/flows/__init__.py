"""
Prefect flows for the data pipeline.

Flows:
- fetch: Download coffee prices and GitHub commit activity (concurrently)
- build: Align, analyze, and render the dashboard page

Usage (local):
    python -m coffee_commits.flows.fetch
    python -m coffee_commits.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'fetch-data/default'
"""
