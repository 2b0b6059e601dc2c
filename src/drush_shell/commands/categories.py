"""Category title lookup for the help listing."""

from collections.abc import Callable, Mapping, Sequence

# Maps a help topic (a category name) to the titles registered for it.
TitleLookup = Callable[[str], Sequence[str]]


def no_titles(topic: str) -> Sequence[str]:
    """A lookup that knows no titles."""
    return []


class StaticTitleLookup:
    """Title lookup backed by a fixed ``topic -> title`` mapping."""

    def __init__(self, titles: Mapping[str, str] | None = None) -> None:
        self._titles = dict(titles or {})

    def __call__(self, topic: str) -> Sequence[str]:
        title = self._titles.get(topic)
        return [title] if title else []

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._titles!r})"
