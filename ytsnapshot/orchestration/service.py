import json
import logging
import asyncio
import sys
from prometheus_client import start_http_server
from ytsnapshot.youtube.api_client import YouTubeClient
from ytsnapshot.youtube.live_resolver import LiveVideoResolver
from ytsnapshot.youtube.poller import Poller
from ytsnapshot.storage.snapshot import SnapshotStore
from ytsnapshot.config.settings import Settings
from ytsnapshot.api.server import app, set_store
import uvicorn

log = logging.getLogger(__name__)

class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            'time': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'msg': record.getMessage(),
        }
        if record.exc_info:
            base['exc'] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)

def configure_logging(log_format: str = 'plain'):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if log_format == 'json':
        root = logging.getLogger()
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        root.addHandler(handler)
        root.setLevel(logging.INFO)

def build_poller(settings: Settings, store: SnapshotStore) -> Poller:
    yt = YouTubeClient(settings.api_key, timeout=settings.http_timeout_sec)
    resolver = LiveVideoResolver(timeout=settings.http_timeout_sec)
    return Poller(yt, resolver, store, settings.channel_id, interval=settings.refresh_interval_sec)

async def run_api(port: int):
    config = uvicorn.Config(app, host="0.0.0.0", port=port, log_level="info", lifespan="on")
    server = uvicorn.Server(config)
    try:
        await server.serve()
    except (OSError, SystemExit) as e:
        # uvicorn exits on bind failure; polling carries on without the endpoint.
        log.error("HTTP server on port %s stopped: %r", port, e)

async def main(settings: Settings):
    configure_logging(settings.log_format)
    if settings.metrics_port:
        start_http_server(settings.metrics_port)
    store = SnapshotStore()
    set_store(store)
    poller = build_poller(settings, store)
    # The server runs in the background; the refresh loop owns the process.
    api_task = asyncio.create_task(run_api(settings.port))
    try:
        await poller.run()
    finally:
        api_task.cancel()
