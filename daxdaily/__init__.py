"""DAX Daily - 30 days of Power BI concepts and DAX practice."""

__version__ = "0.1.0"
