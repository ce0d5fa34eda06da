# lightbnb/database.py
import logging
from typing import Any, Mapping, Optional, Union

from .db import get_conn, fetch_all, fetch_one
from .models import PropertyIn, ReservationQuery, SearchFilters, UserIn
from .search import DEFAULT_LIMIT, build_property_search

logger = logging.getLogger(__name__)

# Users

def get_user_with_email(email: str) -> Optional[dict]:
    with get_conn() as conn:
        return fetch_one(conn, "SELECT * FROM users WHERE email = $1", (email,))

def get_user_with_id(user_id: int) -> Optional[dict]:
    with get_conn() as conn:
        return fetch_one(conn, "SELECT * FROM users WHERE id = $1", (user_id,))

def add_user(user: Union[UserIn, Mapping[str, Any]]) -> dict:
    body = user if isinstance(user, UserIn) else UserIn.model_validate(dict(user))
    with get_conn() as conn:
        try:
            row = fetch_one(conn, """
                INSERT INTO users (name, email, password)
                VALUES ($1, $2, $3)
                RETURNING *
            """, (body.name, body.email, body.password))
            conn.commit()
        except Exception:
            conn.rollback()
            raise
    logger.info("Added user %s", row["id"])
    return row

# Reservations

def get_all_reservations(guest_id: int, limit: int = DEFAULT_LIMIT) -> list[dict]:
    q = ReservationQuery(guest_id=guest_id, limit=limit)
    with get_conn() as conn:
        return fetch_all(conn, """
            SELECT reservations.id AS id, properties.title AS title,
                   reservations.start_date AS start_date,
                   properties.cost_per_night AS cost_per_night,
                   avg(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON properties.id = reservations.property_id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = $1
            GROUP BY reservations.id, properties.id
            ORDER BY reservations.start_date
            LIMIT $2
        """, (q.guest_id, q.limit))

# Properties

def get_all_properties(
    filters: Union[SearchFilters, Mapping[str, Any], None] = None,
    limit: Optional[int] = DEFAULT_LIMIT,
) -> list[dict]:
    plan = build_property_search(filters, limit)
    with get_conn() as conn:
        return fetch_all(conn, plan.text, plan.params)

def add_property(prop: Union[PropertyIn, Mapping[str, Any]]) -> dict:
    body = prop if isinstance(prop, PropertyIn) else PropertyIn.model_validate(dict(prop))
    with get_conn() as conn:
        try:
            row = fetch_one(conn, """
                INSERT INTO properties (owner_id, title, description, thumbnail_photo_url,
                    cover_photo_url, cost_per_night, street, city, province, post_code,
                    country, parking_spaces, number_of_bathrooms, number_of_bedrooms)
                VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14)
                RETURNING *
            """, (body.owner_id, body.title, body.description, body.thumbnail_photo_url,
                  body.cover_photo_url, body.cost_per_night, body.street, body.city,
                  body.province, body.post_code, body.country, body.parking_spaces,
                  body.number_of_bathrooms, body.number_of_bedrooms))
            conn.commit()
        except Exception:
            conn.rollback()
            raise
    logger.info("Added property %s", row["id"])
    return row
