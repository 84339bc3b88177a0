"""
User-facing error messages.

Messages surfaced through ``Failure`` results and the CLI.
"""


class ErrorMessages:
    """Error message templates."""

    NO_DATA_LIST = "No internet connection and no cached data available"
    NO_DATA_DETAIL = "No internet connection and no cached data"
    UNKNOWN_LIST_ERROR = "An unknown error occurred"
    DETAIL_LOAD_FAILED = "Failed to load anime details"

    CONNECTION_FAILED = "Could not reach {url}: {reason}"
    TIMEOUT = "Request to {url} timed out after {timeout}s"
    SERVER_ERROR = "Server error {status_code} from {url}"
    CLIENT_ERROR = "Request to {url} failed with status {status_code}"
    RATE_LIMITED = "Rate limit exceeded for {url}"
    INVALID_JSON = "Response from {url} is not valid JSON: {reason}"
    INVALID_PAYLOAD = "Malformed payload from {url}: {reason}"

    CACHE_INIT_FAILED = "Failed to initialize anime cache: {reason}"
    CACHE_READ_FAILED = "Failed to read anime cache: {reason}"
    CACHE_WRITE_FAILED = "Failed to write anime cache: {reason}"
