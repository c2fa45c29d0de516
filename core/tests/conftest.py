"""Shared fixtures for vaultflow tests."""

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from botocore.exceptions import ClientError

from vaultflow.logging.filters import clear_request_context, set_logging_context
from vaultflow.settings import _reload_settings


_EXPORTER = InMemorySpanExporter()
_PROVIDER = TracerProvider()
_PROVIDER.add_span_processor(SimpleSpanProcessor(_EXPORTER))
trace.set_tracer_provider(_PROVIDER)


@pytest.fixture
def span_exporter():
    """In-memory exporter attached to the global tracer provider."""
    _EXPORTER.clear()
    yield _EXPORTER
    _EXPORTER.clear()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep process-wide state from leaking between tests."""
    monkeypatch.delenv("VAULTFLOW_TEST_MODE", raising=False)
    for name in (
        "SECRETSMANAGER_REGION_NAME",
        "SECRETSMANAGER_ENDPOINT_URL",
        "SECRETSMANAGER_PROFILE_NAME",
        "SECRETSMANAGER_USE_SECRETS_MANAGER",
        "SECRETSMANAGER_ACCESS_KEY_ID",
        "SECRETSMANAGER_SECRET_ACCESS_KEY",
        "SECRETSMANAGER_SESSION_TOKEN",
        "SECRETSMANAGER_MAX_ATTEMPTS",
    ):
        monkeypatch.delenv(name, raising=False)
    _reload_settings()
    yield
    set_logging_context(environment=None, extra=None)
    clear_request_context()
    _reload_settings()


def make_client_error(code: str, operation: str = "GetSecretValue") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


@pytest.fixture
def not_found_error():
    return make_client_error("ResourceNotFoundException")


@pytest.fixture
def access_denied_error():
    return make_client_error("AccessDeniedException")
