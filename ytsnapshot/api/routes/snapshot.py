from fastapi.responses import JSONResponse

from ytsnapshot.storage.snapshot import Snapshot, SnapshotStore

_store: SnapshotStore | None = None

def snapshot_response() -> JSONResponse:
    current = _store.current() if _store is not None else Snapshot()
    return JSONResponse(current.to_dict())

def set_store(store: SnapshotStore):
    global _store
    _store = store
