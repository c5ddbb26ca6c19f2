from prometheus_client import Counter, Histogram

# Generation routine
generation_total = Counter(
    'clarity_generation_total',
    'Clarity entries generated',
    ['outcome']  # live, fallback
)

fallback_total = Counter(
    'clarity_fallback_total',
    'Entries that used the fallback record',
    ['reason']  # no_credential, upstream_error, empty_completion, parse_failure
)

upstream_latency = Histogram(
    'clarity_upstream_latency_seconds',
    'Gemini generateContent latency',
    buckets=(0.5, 1, 2, 5, 10, 30)
)

# Diagnosis endpoint
requests_total = Counter(
    'clarity_requests_total',
    'Diagnosis endpoint responses',
    ['status']
)
