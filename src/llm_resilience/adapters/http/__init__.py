"""HTTP adapter – resilient async HTTP client wrappers."""
from llm_resilience.adapters.http.client import HttpClient, HttpxHttpClient
from llm_resilience.adapters.http.errors import normalize_http_error, parse_retry_after
from llm_resilience.adapters.http.resilient_client import ResilientHttpClient

__all__ = ["HttpClient", "HttpxHttpClient", "ResilientHttpClient", "normalize_http_error", "parse_retry_after"]
