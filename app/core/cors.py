from typing import Iterable

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class RouteCORSMiddleware:
    """
    CORS with one policy for most routes and an open one for a few paths.

    Requests for `open_paths` accept any origin (no credentials), everything
    else goes through the policy built from the remaining options.
    """

    def __init__(self, app: ASGIApp, open_paths: Iterable[str] = (), **options):
        self.open_paths = set(open_paths)
        self.restricted = CORSMiddleware(app, **options)
        self.open = CORSMiddleware(app, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].rstrip("/") in self.open_paths:
            await self.open(scope, receive, send)
        else:
            await self.restricted(scope, receive, send)
