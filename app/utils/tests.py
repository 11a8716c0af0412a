from typing import Optional

import httpx
from fastapi import FastAPI


def create_test_app(routers, prefix: str = "", middlewares=None) -> FastAPI:
    """
    Create a FastAPI test application with the given routers and middlewares.

    Args:
        routers: A router or list of routers to include.
        prefix: Optional path prefix for the routers (e.g. "/api/v1").
        middlewares: Optional list of (middleware_class, config_dict) tuples.

    Returns:
        FastAPI: A configured FastAPI application.
    """
    app = FastAPI()

    from api.dependencies.rate_limits import setup_rate_limiter

    setup_rate_limiter(app)

    if middlewares:
        for middleware_class, middleware_config in middlewares:
            app.add_middleware(middleware_class, **middleware_config)

    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router, prefix=prefix)

    return app


async def rate_limiting_helper(
    app,
    endpoint: str,
    request_limit: int,
    method: str = "get",
    expected_status: int = 200,
    headers: Optional[dict] = None,
    json: Optional[dict] = None,
):
    """
    Send request_limit requests, then assert the next one is rate limited.

    Args:
        app: The FastAPI app instance.
        endpoint: The endpoint to test.
        request_limit: Number of requests allowed before rate limiting.
        method: HTTP method to use (e.g., "get", "post").
        expected_status: Expected status code for requests within the limit.
        headers: Optional headers to include in the requests.
        json: Optional JSON body for each request.
    """
    transport = httpx.ASGITransport(app=app)
    headers = headers or {}
    kwargs = {"headers": headers}
    if json is not None:
        kwargs["json"] = json

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        http_method = getattr(client, method.lower())

        for i in range(request_limit):
            response = await http_method(endpoint, **kwargs)
            assert (
                response.status_code == expected_status
            ), f"Request {i+1} failed with status {response.status_code}"

        response = await http_method(endpoint, **kwargs)
        assert response.status_code == 429, "Expected rate limiting to trigger"
        assert response.json() == {"detail": "Rate limit exceeded"}
