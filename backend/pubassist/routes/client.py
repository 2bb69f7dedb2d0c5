"""
Publication Assistant Backend - Client Router
==============================================

What:  Declares the single-page client's route groups and serves the
       navigation shell that loads them.
How:   CLIENT_ROUTE_GROUPS is the one list of client modules. It drives
       the JSON manifest, the links in the HTML shell, and matches the
       module names declared in static/app/app.module.js.
Who:   Browsers load `/` or a deep link under a group path; the client
       reads `/api/client/routes`.

The deep-link route matches every GET path, so this router is included
last, after the API routers and the /static mount.

The client modules hold no business logic and no shared state beyond
navigation; their views call the /api resource endpoints.
"""

from html import escape
from typing import List

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from pubassist.exceptions import NotFoundError
from pubassist.schemas.common import ClientManifest, ClientRouteGroup

router = APIRouter(tags=["Client"])

CLIENT_MODULE = "app"

CLIENT_ROUTE_GROUPS: List[ClientRouteGroup] = [
    ClientRouteGroup(name="publications", title="Publications", path="/publications"),
    ClientRouteGroup(name="faculties", title="Faculties", path="/faculties", resource="/api/Faculties"),
    ClientRouteGroup(name="institutes", title="Institutes", path="/institutes", resource="/api/Institutes"),
    ClientRouteGroup(name="divisions", title="Divisions", path="/divisions", resource="/api/Divisions"),
    ClientRouteGroup(name="journals", title="Journals", path="/journals", resource="/api/Journals"),
]


def find_route_group(path: str) -> ClientRouteGroup | None:
    """Return the group whose base path prefixes `path`, if any."""
    for group in CLIENT_ROUTE_GROUPS:
        if path == group.path or path.startswith(group.path + "/"):
            return group
    return None


@router.get(
    "/api/client/routes",
    response_model=ClientManifest,
    summary="Client route groups",
)
async def client_routes() -> ClientManifest:
    return ClientManifest(module=CLIENT_MODULE, groups=CLIENT_ROUTE_GROUPS)


def render_shell() -> str:
    links = "\n".join(
        f'        <li><a href="#!{escape(group.path)}">{escape(group.title)}</a></li>'
        for group in CLIENT_ROUTE_GROUPS
    )
    return f"""<!DOCTYPE html>
<html lang="en" ng-app="{CLIENT_MODULE}">
<head>
    <meta charset="utf-8">
    <title>Publication Assistant</title>
</head>
<body>
    <nav>
      <ul>
{links}
      </ul>
    </nav>
    <main ng-view></main>
    <script src="https://ajax.googleapis.com/ajax/libs/angularjs/1.8.2/angular.min.js"></script>
    <script src="https://ajax.googleapis.com/ajax/libs/angularjs/1.8.2/angular-route.min.js"></script>
    <script src="/static/app/app.module.js"></script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def client_shell() -> HTMLResponse:
    return HTMLResponse(render_shell())


@router.get("/{client_path:path}", response_class=HTMLResponse, include_in_schema=False)
async def client_deep_link(client_path: str) -> HTMLResponse:
    """Serve the shell for a bookmarked client path such as /journals/12."""
    path = "/" + client_path
    if find_route_group(path) is None:
        raise NotFoundError(resource="page", resource_id=path, key="path")
    return HTMLResponse(render_shell())
