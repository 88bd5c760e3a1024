"""
Standalone GraphiQL explorer page served at /graphiql.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

GRAPHIQL_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>Customers API - GraphiQL</title>
    <style>
      body {{ height: 100%; margin: 0; width: 100%; overflow: hidden; }}
      #graphiql {{ height: 100vh; }}
    </style>
    <link rel="stylesheet" href="https://unpkg.com/graphiql@3/graphiql.min.css" />
    <script crossorigin src="https://unpkg.com/react@18/umd/react.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/react-dom@18/umd/react-dom.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/graphiql@3/graphiql.min.js"></script>
  </head>
  <body>
    <div id="graphiql">Loading...</div>
    <script>
      const fetcher = GraphiQL.createFetcher({{ url: "{endpoint}" }});
      ReactDOM.createRoot(document.getElementById("graphiql")).render(
        React.createElement(GraphiQL, {{ fetcher: fetcher, defaultEditorToolsVisibility: true }})
      );
    </script>
  </body>
</html>
"""


def graphiql_source(endpoint: str) -> str:
    """Render the explorer page pointed at the given GraphQL endpoint."""
    return GRAPHIQL_TEMPLATE.format(endpoint=endpoint)


def create_explorer_router(endpoint: str = "/graphql") -> APIRouter:
    router = APIRouter()

    @router.get("/graphiql", response_class=HTMLResponse, include_in_schema=False)
    async def graphiql() -> HTMLResponse:  # pyright: ignore [reportUnusedFunction]
        return HTMLResponse(graphiql_source(endpoint))

    return router
