from prometheus_client import CollectorRegistry, Counter

registry = CollectorRegistry()

validations = Counter(
    "birth_number_validations",
    "Birth numbers checked through the API",
    ["result"],
    registry=registry,
)
