from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

REQUEST_COUNT = Counter('crud_service_requests_total', 'Total requests', ['method', 'endpoint', 'status'])
REQUEST_DURATION = Histogram('crud_service_request_duration_seconds', 'Request duration')
WRITE_COUNT = Counter('crud_service_writes_total', 'Rows written', ['entity', 'operation'])


def render():
    return generate_latest(), CONTENT_TYPE_LATEST
