"""Dashboard cache policy — aggregates fast-changing data, so a short TTL."""

DASHBOARD_STATS_TTL = 60
DASHBOARD_STATS_KEY = "dashboard_stats"
