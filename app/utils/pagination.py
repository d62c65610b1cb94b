from sqlmodel import func, select

from app.config import ITEMS_PER_PAGE


def paginate(session, query, page: int, order_by):
    """Run ``query`` for one page. Returns ``(records, total_items)``."""
    total = session.exec(select(func.count()).select_from(query.subquery())).one()

    records = session.exec(
        query.order_by(order_by)
        .offset((page - 1) * ITEMS_PER_PAGE)
        .limit(ITEMS_PER_PAGE)
    ).all()

    return records, total


def collection_response(items: list, total: int, page: int) -> dict:
    return {
        "items": items,
        "total_items": total,
        "page": page,
        "items_per_page": ITEMS_PER_PAGE,
    }
