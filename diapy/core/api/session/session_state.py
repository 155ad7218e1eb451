"""Cookie state carried between requests of one client."""
from typing import Iterable, Iterator, List


class SessionState:
    """
    Cookies of one client session plus the process-wide disabled switch.

    Cookies are kept in arrival order, duplicates included. Resolving a
    successful response replaces them; building a request reads them.

    The disabled switch lives on the class, so toggling it from any
    instance is visible to every client in the process.

    Example:
        >>> state = SessionState()
        >>> state.replace(['JSESSIONID=abc'])
        >>> state.cookies
        ['JSESSIONID=abc']
    """

    _disabled: bool = False

    def __init__(self, cookies: Iterable[str] = ()):
        """Initialize session state."""
        self._cookies: List[str] = list(cookies)

    @property
    def cookies(self) -> List[str]:
        """Stored cookies (the live list)."""
        return self._cookies

    def replace(self, cookies: Iterable[str]) -> None:
        """Replace every stored cookie."""
        self._cookies = list(cookies)

    def add(self, cookie: str) -> None:
        """Append one cookie."""
        self._cookies.append(cookie)

    def clear(self) -> None:
        """Forget all cookies."""
        self._cookies = []

    def __iter__(self) -> Iterator[str]:
        return iter(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)

    @classmethod
    def disable(cls) -> None:
        """Advise every client to stop talking to the service."""
        SessionState._disabled = True

    @classmethod
    def enable(cls) -> None:
        """Allow clients to talk to the service again."""
        SessionState._disabled = False

    @classmethod
    def is_disabled(cls) -> bool:
        """Whether the process-wide switch is off."""
        return SessionState._disabled

    @classmethod
    def reset(cls) -> None:
        """Restore the switch to its default (enabled)."""
        SessionState._disabled = False
