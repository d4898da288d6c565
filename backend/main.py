"""
FastAPI application exposing the GraphQL-shaped gateway.

Endpoints:
- POST /graphql - Dispatch a query or mutation
- GET /graphql - HTML playground
- GET / - Status payload
- OPTIONS * - CORS preflight (204)
"""
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.config import ProviderCredentials, get_credentials, get_settings
from backend.gateway import GraphQLRequest, ResponseEnvelope, dispatch
from backend.gateway.resolvers import utc_timestamp
from backend.logging import log_error, log_header, log_request
from backend.playground import PLAYGROUND_HTML
from backend.providers import select_provider


# Sent on every response, preflight or not
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Apollo-Require-Preflight",
    "Access-Control-Max-Age": "86400",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    settings = get_settings()
    log_header("Web3 Journey GraphQL gateway")
    provider = select_provider(settings.credentials())
    print(f"Chat provider: {provider.label}")
    if provider.label == "Mock":
        print(f"WARNING: Missing environment variables: {settings.validate()}")
        print("chatWithAI will answer with mock responses until one is set.")
    else:
        print("Configuration validated successfully")

    yield


# Create FastAPI app
app = FastAPI(
    title="Web3 Journey GraphQL Gateway",
    description="GraphQL-shaped endpoint with greeting, MCP data and AI chat operations",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def cors_middleware(request: Request, call_next):
    """
    Answer preflight requests before routing and stamp CORS headers on
    everything else.
    """
    if request.method == "OPTIONS":
        log_request(request.method, request.url.path, 204)
        return Response(status_code=204, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    log_request(request.method, request.url.path, response.status_code)
    return response


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Unknown paths and unsupported methods are plain-text 404s."""
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return await http_exception_handler(request, exc)


@app.post("/graphql")
async def graphql(
    request: Request,
    credentials: ProviderCredentials = Depends(get_credentials),
):
    """
    Dispatch a GraphQL-shaped request.

    A body that cannot be parsed is a 500 with an errors envelope.
    Everything after parsing is a 200, including unsupported operations
    and provider failures (those are reported inside the envelope).
    """
    try:
        body = GraphQLRequest.model_validate(await request.json())
    except Exception as e:
        log_error("Could not parse GraphQL request body", e)
        return JSONResponse(ResponseEnvelope.failure(str(e)).to_payload(), status_code=500)

    envelope = await dispatch(body.query, body.resolved_variables(), credentials)
    return JSONResponse(envelope.to_payload())


@app.get("/graphql", response_class=HTMLResponse)
async def playground():
    """GraphQL playground page."""
    return HTMLResponse(PLAYGROUND_HTML)


@app.get("/")
async def root():
    """Status payload."""
    return {
        "message": "🚀 Web3 Journey gateway is running!",
        "endpoints": {
            "graphql": "/graphql",
            "playground": "/graphql (GET)",
        },
        "timestamp": utc_timestamp(),
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=True,
    )
