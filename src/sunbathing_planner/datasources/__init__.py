"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, client holding credentials
    ├── models.py         # Dataclasses for normalized responses
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions raise library exceptions (``requests.RequestException``,
``pydantic.ValidationError``); converting them into application errors is
the planner's job (see ``planner.py``).
"""
