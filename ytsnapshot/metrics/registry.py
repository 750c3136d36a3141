from prometheus_client import Counter, Gauge, Histogram

refresh_duration_seconds = Histogram('refresh_duration_seconds', 'Duration of a refresh cycle')
refresh_errors_total = Counter('refresh_errors_total', 'Number of failed refresh cycles')
last_refresh_timestamp = Gauge('last_refresh_timestamp', 'Unix timestamp of last successful refresh')

channel_live = Gauge('channel_live', 'Whether the channel is live (0=no,1=yes)')
snapshot_videos = Gauge('snapshot_videos', 'Number of uploads in the served snapshot')
poller_state = Gauge('poller_state', 'State of the poller (0=idle,1=refreshing)')

POLLER_STATE_CODES = {
    'idle': 0,
    'refreshing': 1,
}
