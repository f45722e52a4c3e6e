"""
madaris — client for the school-registry admin API.

Logs an operator in, fetches every registered school, filters the list
client-side and exports the current results to schools.xlsx.

Usage:
    from madaris import open_dashboard, SearchCriteria

    dashboard = open_dashboard()
    dashboard.login("admin", "secret")
    dashboard.load()
    dashboard.search(SearchCriteria(city="الرياض"))
    dashboard.export("exports/")
"""

from madaris.runner import Dashboard, Feedback, open_dashboard
from madaris.schema import School, SearchCriteria

__all__ = ["Dashboard", "Feedback", "School", "SearchCriteria", "open_dashboard"]
