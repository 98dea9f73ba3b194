from flask import current_app, jsonify, request


def success(message, data=None, status=200):
    body = {"status": "success", "message": message}
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def page_args():
    """Read ``page``/``limit`` from the query string; bad values fall back to defaults."""
    max_limit = current_app.config["PAGINATION_MAX_LIMIT"]
    page = request.args.get("page", 1, type=int)
    limit = request.args.get("limit", max_limit, type=int)
    return page, limit, max_limit


def paginated(pagination, base_path, data):
    page, limit, total_pages = pagination.page, pagination.per_page, pagination.pages
    prev_page = f"{base_path}?page={page - 1}&limit={limit}" if page > 1 else None
    next_page = f"{base_path}?page={page + 1}&limit={limit}" if page < total_pages else None

    return jsonify({
        "status": "success",
        "message": "Found successfully",
        "page": str(page),
        "limit": str(limit),
        "totalPages": str(total_pages),
        "prevPage": prev_page,
        "nextPage": next_page,
        "data": data,
    }), 200
