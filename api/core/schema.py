"""
Idempotent schema bootstrap.

Every statement is `IF NOT EXISTS`, so running this on each startup is safe.
"""

from __future__ import annotations

import logging

from .db import Database

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id            SERIAL PRIMARY KEY,
    name          TEXT NOT NULL,
    email         TEXT NOT NULL,
    password_hash TEXT NOT NULL,
    created_at    TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE UNIQUE INDEX IF NOT EXISTS users_email_lower_key ON users (lower(email));

CREATE TABLE IF NOT EXISTS apis (
    api_id     SERIAL PRIMARY KEY,
    user_id    INT NOT NULL REFERENCES users (id) ON DELETE CASCADE,
    api_name   TEXT NOT NULL,
    api_string TEXT NOT NULL,
    api_key    TEXT NOT NULL DEFAULT '',
    graph_type TEXT NOT NULL DEFAULT '',
    pane_x     INT NOT NULL DEFAULT 0,
    pane_y     INT NOT NULL DEFAULT 0,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS apis_user_id_idx ON apis (user_id);

CREATE TABLE IF NOT EXISTS parameters (
    param_id  SERIAL PRIMARY KEY,
    api_id    INT NOT NULL REFERENCES apis (api_id) ON DELETE CASCADE,
    parameter TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS parameters_api_id_idx ON parameters (api_id);

CREATE TABLE IF NOT EXISTS dashboards (
    dashboard_id SERIAL PRIMARY KEY,
    user_id      INT NOT NULL REFERENCES users (id) ON DELETE CASCADE,
    name         TEXT NOT NULL,
    created_at   TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS dashboards_user_id_idx ON dashboards (user_id);

CREATE TABLE IF NOT EXISTS dashboard_panes (
    dashboard_pane_id SERIAL PRIMARY KEY,
    dashboard_id      INT NOT NULL REFERENCES dashboards (dashboard_id) ON DELETE CASCADE,
    api_id            INT NOT NULL REFERENCES apis (api_id) ON DELETE CASCADE,
    UNIQUE (dashboard_id, api_id)
);

CREATE INDEX IF NOT EXISTS dashboard_panes_api_id_idx ON dashboard_panes (api_id);
"""

TABLES = ("dashboard_panes", "dashboards", "parameters", "apis", "users")


async def ensure_schema(db: Database) -> None:
    async with db.transaction() as conn:
        await conn.execute(SCHEMA_SQL)
    logger.info("schema_ready tables=%s", ",".join(TABLES))
