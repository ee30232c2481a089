"""Root page endpoint."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

ROOT_HTML = "<h1>Hello from sample-app</h1>\n<p>This is the sample app pushed to ACR.</p>"

router = APIRouter(tags=["root"])


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def root():
    return ROOT_HTML
