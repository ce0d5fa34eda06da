# lightbnb/db.py
import logging
import os
from contextlib import contextmanager

import psycopg
from dotenv import load_dotenv
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from .errors import from_psycopg_error

load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "postgresql://localhost/lightbnb")
POOL_MIN = int(os.getenv("APP_POOL_MIN", "1"))
POOL_MAX = int(os.getenv("APP_POOL_MAX", "10"))

_pool = None

def get_pool():
    """Return the process-wide pool, opening it on first use."""
    global _pool
    if _pool is None:
        _pool = ConnectionPool(
            conninfo=DATABASE_URL,
            min_size=POOL_MIN,
            max_size=POOL_MAX,
            # RawCursor sends native $1, $2 placeholders to the server as-is
            kwargs={"autocommit": False, "cursor_factory": psycopg.RawCursor},
            open=True,
        )
        logger.info("Opened connection pool (min=%s, max=%s)", POOL_MIN, POOL_MAX)
    return _pool

def close_pool():
    global _pool
    if _pool is not None:
        _pool.close()
        _pool = None
        logger.info("Closed connection pool")

@contextmanager
def get_conn():
    try:
        with get_pool().connection() as conn:
            yield conn
    except psycopg.Error as e:
        raise from_psycopg_error(e) from e

def _run(cur, sql, params):
    try:
        cur.execute(sql, params or ())
        logger.debug("Executed query: %s", sql.strip()[:80])
    except psycopg.Error as e:
        logger.exception("Query execution failed: %s", e)
        raise from_psycopg_error(e) from e

def fetch_all(conn, sql, params=None):
    with conn.cursor(row_factory=dict_row) as cur:
        _run(cur, sql, params)
        return cur.fetchall()

def fetch_one(conn, sql, params=None):
    with conn.cursor(row_factory=dict_row) as cur:
        _run(cur, sql, params)
        return cur.fetchone()

def execute(conn, sql, params=None):
    with conn.cursor() as cur:
        _run(cur, sql, params)
        return cur.rowcount

def check_connection():
    with get_conn() as conn:
        row = fetch_one(conn, "SELECT 1 AS ok")
        return row is not None and row["ok"] == 1
