"""Outline session holding the canonical traced outline.

Cleanup is lossy, so a session never cleans its own output: every import and
every mode change recomputes from the stored original.
"""

from outliner.config import CleanupMode
from outliner.core.normalize import center_shape
from outliner.core.pipeline import CleanupReport, ShapeCleaner
from outliner.domain import Shape


class OutlineSession:
    """Keeps the original outline and the result derived from it.

    Example:
        session = OutlineSession()
        session.load(traced)
        session.set_mode(CleanupMode.AGGRESSIVE)
        shape = session.current
    """

    def __init__(
        self,
        cleaner: ShapeCleaner | None = None,
        mode: CleanupMode | int | str | None = None,
    ) -> None:
        """Initialize session.

        Args:
            cleaner: Cleaner to run (default settings if None)
            mode: Initial mode (the cleaner's configured mode if None)
        """
        self._cleaner = cleaner or ShapeCleaner()
        self._mode = (
            self._cleaner.settings.cleanup.mode if mode is None else CleanupMode.parse(mode)
        )
        self._original: Shape | None = None
        self._current: Shape | None = None
        self._report: CleanupReport | None = None

    @property
    def mode(self) -> CleanupMode:
        return self._mode

    @property
    def original(self) -> Shape | None:
        """Centered outline as imported, or None before load()."""
        return self._original

    @property
    def current(self) -> Shape | None:
        """Cleaned and normalized outline, or None before load()."""
        return self._current

    @property
    def report(self) -> CleanupReport | None:
        """Report from the most recent recompute."""
        return self._report

    def load(self, raw: Shape) -> Shape:
        """Store a newly traced outline and clean it with the current mode.

        The outline is centered on its bounding box before it is stored.

        Args:
            raw: Outline as produced by the tracer

        Returns:
            Cleaned and normalized outline
        """
        self._original = center_shape(raw)
        return self._recompute(self._original)

    def set_mode(self, mode: CleanupMode | int | str) -> Shape | None:
        """Switch cleanup mode and recompute from the original.

        Args:
            mode: New cleanup mode

        Returns:
            Recomputed outline, or None if nothing has been loaded

        Raises:
            InvalidCleanupModeError: If mode names no cleanup mode
        """
        self._mode = CleanupMode.parse(mode)
        if self._original is None:
            return None
        return self._recompute(self._original)

    def _recompute(self, original: Shape) -> Shape:
        self._current, self._report = self._cleaner.process(original, self._mode)
        return self._current
