# masjid_manager/metrics.py

from prometheus_client import Counter, Histogram

# Define Prometheus metrics

# Dashboard Summary Metrics
SUMMARY_REQUESTS_TOTAL = Counter('masjid_summary_requests_total', 'Total mosque summary requests', ['status'])
SUMMARY_DURATION_SECONDS = Histogram('masjid_summary_duration_seconds', 'Mosque summary aggregation duration in seconds')

# Data Quality Metrics
PRAYER_TIME_PARSE_FALLBACKS_TOTAL = Counter('masjid_prayer_time_parse_fallbacks_total', 'Prayer times that could not be fully parsed and defaulted to zero')

# Record Metrics
RECORD_MUTATIONS_TOTAL = Counter('masjid_record_mutations_total', 'Total record mutations', ['collection', 'action'])
