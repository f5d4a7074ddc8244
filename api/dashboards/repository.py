"""
Dashboard persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database, affected_rows

_DASHBOARD_COLUMNS = "dashboard_id, user_id, name"


async def create_dashboard(db: Database, *, user_id: int, name: str) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO dashboards (user_id, name)
        VALUES ($1, $2)
        RETURNING {_DASHBOARD_COLUMNS}
        """,
        user_id,
        name,
    )
    if row is None:
        raise RuntimeError("Failed to create dashboard.")
    return row


async def list_dashboards_for_user(db: Database, user_id: int) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_DASHBOARD_COLUMNS}
        FROM dashboards
        WHERE user_id = $1
        ORDER BY dashboard_id
        """,
        user_id,
    )


async def get_dashboard(db: Database, dashboard_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_DASHBOARD_COLUMNS}
        FROM dashboards
        WHERE dashboard_id = $1
        """,
        dashboard_id,
    )


async def rename_dashboard(db: Database, dashboard_id: int, *, name: str) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE dashboards
        SET name = $2
        WHERE dashboard_id = $1
        RETURNING {_DASHBOARD_COLUMNS}
        """,
        dashboard_id,
        name,
    )


async def delete_dashboard(db: Database, dashboard_id: int) -> bool:
    """
    Panes go with the dashboard (ON DELETE CASCADE); the APIs stay.
    """
    status = await db.execute("DELETE FROM dashboards WHERE dashboard_id = $1", dashboard_id)
    return affected_rows(status) > 0


async def add_pane(db: Database, *, dashboard_id: int, api_id: int) -> bool:
    """
    Attach an API to a dashboard. Returns False if the pair already existed.

    No same-owner check: any existing API can be placed on any dashboard.
    """
    row = await db.fetch_one(
        """
        INSERT INTO dashboard_panes (dashboard_id, api_id)
        VALUES ($1, $2)
        ON CONFLICT (dashboard_id, api_id) DO NOTHING
        RETURNING dashboard_pane_id
        """,
        dashboard_id,
        api_id,
    )
    return row is not None


async def remove_pane(db: Database, *, dashboard_id: int, api_id: int) -> bool:
    status = await db.execute(
        """
        DELETE FROM dashboard_panes
        WHERE dashboard_id = $1
          AND api_id = $2
        """,
        dashboard_id,
        api_id,
    )
    return affected_rows(status) > 0
