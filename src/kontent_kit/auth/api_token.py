"""Bearer token authentication for the Management API."""


class APITokenAuth:
    """Authenticates requests with a Management API key.

    Example:
        >>> auth = APITokenAuth("ew0KICAiYWxnIjo...")
        >>> auth.get_headers()
        {'Authorization': 'Bearer ew0KICAiYWxnIjo...'}
    """

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key.strip() if api_key else ""

    def get_headers(self) -> dict[str, str]:
        """Build the Authorization header."""
        return {"Authorization": f"Bearer {self._api_key}"}

    def validate_token(self) -> bool:
        """Check that a non-empty key was supplied."""
        return bool(self._api_key)
