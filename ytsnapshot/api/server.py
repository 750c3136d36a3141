from fastapi import FastAPI, Request
from ytsnapshot.api.routes import snapshot as snapshot_routes

app = FastAPI(title="ytsnapshot", version="0.1.0", docs_url=None, redoc_url=None, openapi_url=None)

# Answers before routing, so every path and method (TRACE, PROPFIND, ...) gets the snapshot.
@app.middleware("http")
async def serve_snapshot(request: Request, call_next):
    return snapshot_routes.snapshot_response()

# Store injection proxy

def set_store(store):
    snapshot_routes.set_store(store)
