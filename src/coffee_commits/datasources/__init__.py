"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs and constants
    └── {feature}.py      # Fetch, parse, and mock-fallback functions

Every fetch function returns a non-empty list of plain row dicts in the
shape stored under ``live/``. Rows are not schema-checked here: the fetch
flow validates each batch against ``coffee_commits.schemas`` and rejects the
refresh if one fails. When the request fails, or the response is not a list
at all, the fetch logs a warning and returns a synthetic series instead.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with the files above. ``github/`` is the
   reference example.

2. Write a fetch function that uses the shared session::

       from coffee_commits.services.http import session

       def fetch_something() -> list[dict[str, Any]]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return parse_something(resp.json())

3. Add the record model and a ``validate_*`` function to ``schemas.py``,
   and call it from ``validate_batches`` in ``flows/fetch.py``.

4. Wire into ``flows/fetch.py``: a ``@task`` for the fetch, a store path,
   and a ``store.write(...)`` call in ``fetch_all()``.

5. Add tests in ``tests/test_{name}.py``.
"""
