from sqlalchemy.exc import SQLAlchemyError

from catalog_api.errors import PersistenceError
from catalog_api.extensions import db

# Largest OFFSET every supported backend accepts as a plain integer
MAX_OFFSET = 2**31 - 1


def clamp_page_args(page, limit, max_limit):
    """Return ``(page, limit)`` with both >= 1, limit <= max_limit and the offset bounded."""
    limit = max(1, min(limit, max_limit))
    page = max(1, min(page, MAX_OFFSET // limit + 1))
    return page, limit


def paginate(select, page, limit, max_limit):
    page, limit = clamp_page_args(page, limit, max_limit)
    return db.paginate(select, page=page, per_page=limit, error_out=False, count=True)


def commit(action):
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError(f"An error occurred while {action}") from e
