"""offplan - Off-Plan Property Catalog Viewer core.

This package contains the UI-agnostic logic behind the off-plan listings viewer.

Modules:
    - core: Exceptions, logging and settings
    - domain: Pydantic data models and the ROI projection calculator
    - application: Catalog loading, query engine and aggregations
    - services: Result export
    - ui: Framework-agnostic formatting helpers
"""

__version__ = "1.2.0"
