"""Response helpers shared by the route modules."""

from fastapi import Response


def no_content() -> Response:
    """Empty 204 that still declares the API's JSON content type."""
    return Response(status_code=204, media_type="application/json")
