from typing import Optional

from shortlink_app.exceptions import InvalidInputError
from shortlink_app.store.durable_store import DurableStore


class URLService:
    """
    URL Service: the one entry point the HTTP routes, CLI and bot use.

    The store is injected (not created internally), so tests and the
    different front-ends can each hand in their own instance.
    """

    def __init__(self, store: DurableStore, base_url: str):
        """
        Initialize URL service with dependencies.

        Args:
            store: Durable code -> target store
            base_url: Prefix the code is appended to, e.g. "http://localhost:8080/"
        """
        self.store = store
        self.base_url = base_url

    def shorten(self, target: str) -> str:
        """Create a new short URL for `target`

        Note: Always creates a new code even if the target is already stored.
        Only emptiness is checked; URL validity is the caller's business.

        Raises:
            InvalidInputError: target is empty
            PersistenceError: the new mapping could not be saved
        """
        if not isinstance(target, str) or not target:
            raise InvalidInputError("Target URL must be a non-empty string")

        code = self.store.put(target)
        return self.short_url_for(code)

    def resolve(self, path: str) -> Optional[str]:
        """Look up the target for a code or request path such as "/AbC123"

        Returns None when the code is well-formed but unknown.

        Raises:
            InvalidInputError: nothing left after stripping "/", or the code
                               has the wrong length or characters
        """
        code = (path or "").lstrip("/")
        if not code:
            raise InvalidInputError("Short code must not be empty")
        if not self.store.generator.is_valid(code):
            raise InvalidInputError(f"Malformed short code: {code!r}")

        return self.store.get(code)

    def short_url_for(self, code: str) -> str:
        return f"{self.base_url}{code}"
