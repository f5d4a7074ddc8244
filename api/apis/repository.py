"""
API-descriptor persistence.
This module is where apis/parameters SQL lives.
"""

from __future__ import annotations

from typing import Any

from core.db import Database

API_COLUMNS = "a.api_id, a.user_id, a.api_name, a.api_string, a.api_key, a.graph_type, a.pane_x, a.pane_y"


async def insert_api_with_parameters(
    db: Database,
    *,
    user_id: int,
    api_name: str,
    api_string: str,
    api_key: str,
    graph_type: str,
    pane_x: int,
    pane_y: int,
    parameters: list[str],
) -> int:
    """
    Insert an API row + its parameters in a single transaction.

    Returns the new api_id. Any failure (unknown user, bad parameter row)
    rolls back the API row too.
    """
    async with db.transaction() as conn:
        row = await conn.fetchrow(
            """
            INSERT INTO apis (user_id, api_name, api_string, api_key, graph_type, pane_x, pane_y)
            VALUES ($1, $2, $3, $4, $5, $6, $7)
            RETURNING api_id
            """,
            user_id,
            api_name,
            api_string,
            api_key,
            graph_type,
            pane_x,
            pane_y,
        )
        if row is None or "api_id" not in row:
            raise RuntimeError("Failed to insert API.")

        api_id = int(row["api_id"])

        if parameters:
            await conn.executemany(
                "INSERT INTO parameters (api_id, parameter) VALUES ($1, $2)",
                [(api_id, parameter) for parameter in parameters],
            )

        return api_id


async def list_apis_for_user(db: Database, user_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {API_COLUMNS}
        FROM apis a
        WHERE a.user_id = $1
        ORDER BY a.api_id
        """,
        user_id,
    )


async def list_apis_for_dashboard(db: Database, dashboard_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {API_COLUMNS}
        FROM apis a
        JOIN dashboard_panes dp ON dp.api_id = a.api_id
        WHERE dp.dashboard_id = $1
        ORDER BY dp.dashboard_pane_id
        """,
        dashboard_id,
    )


async def fetch_parameters(db: Database, api_ids: list[int]) -> dict[int, list[str]]:
    """
    Batch-load parameters for many APIs in one query.

    Returns {api_id: [parameter, ...]}; APIs without parameters map to [].
    """
    grouped: dict[int, list[str]] = {api_id: [] for api_id in api_ids}
    if not api_ids:
        return grouped

    rows = await db.fetch_all(
        """
        SELECT api_id, parameter
        FROM parameters
        WHERE api_id = ANY($1::int[])
        ORDER BY api_id, param_id
        """,
        api_ids,
    )
    for row in rows:
        grouped.setdefault(int(row["api_id"]), []).append(str(row["parameter"]))
    return grouped


async def delete_api(db: Database, api_id: int) -> bool:
    """
    Delete an API with its parameters and dashboard panes in one transaction.

    Returns False (and removes nothing) when the API does not exist.
    """
    async with db.transaction() as conn:
        # FOR UPDATE holds the row until commit.
        exists = await conn.fetchrow(
            "SELECT api_id FROM apis WHERE api_id = $1 FOR UPDATE",
            api_id,
        )
        if exists is None:
            return False

        await conn.execute("DELETE FROM parameters WHERE api_id = $1", api_id)
        await conn.execute("DELETE FROM dashboard_panes WHERE api_id = $1", api_id)
        await conn.execute("DELETE FROM apis WHERE api_id = $1", api_id)
        return True
