"""Custom structlog processors.

Usage:
    from trellolib.logging.formatters import mask_sensitive_data
"""

from typing import Any

# Keys whose values never reach the logs. Matching is by substring, so
# "oauth_token_secret" and "member_token" are covered by "token"/"secret".
SENSITIVE_PATTERNS = frozenset(
    {
        "secret",
        "token",
        "key",
        "authorization",
        "oauth_signature",
        "password",
    }
)


def _mask(value: Any, patterns: frozenset[str], mask_value: str) -> Any:
    if isinstance(value, dict):
        return {
            k: (
                mask_value
                if v is not None and any(p in str(k).lower() for p in patterns)
                else _mask(v, patterns, mask_value)
            )
            for k, v in value.items()
        }
    return value


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that masks sensitive data in log entries.

    Values of keys containing a sensitive pattern are replaced, including
    keys of nested mappings such as logged query parameters.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra patterns to consider sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        masked_dict = {}
        for key, value in event_dict.items():
            if key == "event":
                masked_dict[key] = value
            elif value is not None and any(p in key.lower() for p in patterns):
                masked_dict[key] = mask_value
            else:
                masked_dict[key] = _mask(value, patterns, mask_value)
        return masked_dict

    return processor


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates overly large string values.

    Response bodies are logged on failures; this keeps them bounded.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
