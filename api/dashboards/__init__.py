"""
Dashboards and their panes (dashboard <-> API placements).
"""
