import asyncio
import argparse
import json
import logging
from pydantic import ValidationError
from ytsnapshot.config.settings import Settings, load_settings
from ytsnapshot.orchestration.service import main as service_main, build_poller, configure_logging
from ytsnapshot.storage.snapshot import SnapshotStore

log = logging.getLogger(__name__)

async def _oneshot(settings: Settings) -> int:
    store = SnapshotStore()
    poller = build_poller(settings, store)
    try:
        snapshot = await poller.refresh()
    except Exception:
        log.exception("Unable to refresh state for channel=%s", settings.channel_id)
        return 1
    finally:
        await poller.client.aclose()
        await poller.resolver.aclose()
    print(json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2))
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve a YouTube channel's latest videos and live status as JSON")
    parser.add_argument("command", nargs="?", default="run", choices=["run", "check"], help="run the service or do a single refresh")
    parser.add_argument("-k", "--key", help="the YouTube API key (env API_KEY)")
    parser.add_argument("-c", "--channel", help="the YouTube channel ID (env CHANNEL_ID)")
    parser.add_argument("-p", "--port", type=int, help="the server port to use (env PORT, default 3000)")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings(API_KEY=args.key, CHANNEL_ID=args.channel, PORT=args.port)
    except ValidationError as e:
        missing = ", ".join(str(err["loc"][0]) for err in e.errors())
        parser.error(f"invalid or missing configuration: {missing}")

    if args.command == "check":
        configure_logging(settings.log_format)
        raise SystemExit(asyncio.run(_oneshot(settings)))
    else:
        # Start the long-running service (refresh loop + HTTP server)
        asyncio.run(service_main(settings))

if __name__ == "__main__":
    main()
