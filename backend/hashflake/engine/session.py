"""View session — owns the current configuration and its persisted fragment.

States and the events that move between them:

    IDLE/READY --submit_seed--> GENERATING --generation completed--> READY
    any        --load / fragment_changed--> READY

Each generation takes a ticket. A finished generation publishes only if its
ticket is still the newest, so the most recent request wins and older
results are dropped. Publishing writes the fragment; the session remembers
what it wrote and ignores that same fragment coming back as an "external"
change.
"""

from __future__ import annotations

import enum
import logging
import random

from hashflake.engine import codec
from hashflake.engine.builder import build_async, random_branches
from hashflake.engine.renderer import VIEW_BOX_SIZE, Snowflake, render
from hashflake.errors import EmptyFragmentError, FragmentDecodeError, GenerationError
from hashflake.models.snowflake import Configuration, DrawSettings

logger = logging.getLogger(__name__)


class SessionState(str, enum.Enum):
    IDLE = "idle"
    GENERATING = "generating"
    READY = "ready"


class ViewSession:
    """Single view session state machine."""

    def __init__(
        self,
        draw_settings: DrawSettings | None = None,
        rng: random.Random | None = None,
        view_box_size: float = VIEW_BOX_SIZE,
    ) -> None:
        self.draw_settings = draw_settings or DrawSettings()
        self.view_box_size = view_box_size
        self.state = SessionState.IDLE
        self.configuration = Configuration()
        self.fragment = ""
        self.seed = ""
        self.fallback = False
        self._rng = rng or random.Random()
        self._ticket = 0
        self._written: str | None = None

    # -- events ---------------------------------------------------------------

    def load(self, fragment: str | None) -> Configuration:
        """Restore from a persisted fragment, else draw a random snowflake."""
        self._ticket += 1
        self._publish(self._configuration_from_fragment(fragment))
        return self.configuration

    def fragment_changed(self, fragment: str | None) -> bool:
        """External fragment change. Returns False when it was our own write."""
        if codec.strip_fragment(fragment) == self._written:
            logger.debug("Ignoring self-written fragment %r", self.fragment)
            return False
        self.load(fragment)
        return True

    async def submit_seed(self, seed: str) -> Configuration:
        """Derive a configuration from ``seed``. Empty seeds change nothing."""
        if not seed:
            return self.configuration

        self._ticket += 1
        ticket = self._ticket
        self.state = SessionState.GENERATING
        self.seed = seed
        logger.info("Generating snowflake for seed %r (ticket %d)", seed, ticket)

        try:
            branches = await build_async(seed, self.draw_settings)
        except (GenerationError, ValueError) as e:
            if ticket == self._ticket:
                self.state = SessionState.READY if self.fragment else SessionState.IDLE
            logger.warning("Generation for seed %r failed: %s", seed, e)
            if isinstance(e, GenerationError):
                raise
            raise GenerationError(str(e)) from e

        if ticket != self._ticket:
            logger.debug("Dropping stale generation (ticket %d < %d)", ticket, self._ticket)
            return self.configuration

        self.generation_completed(Configuration(branches=tuple(branches)))
        return self.configuration

    def generation_completed(self, configuration: Configuration) -> None:
        self.fallback = False
        self._publish(configuration)

    async def update_draw_settings(self, draw_settings: DrawSettings) -> Configuration:
        """New settings regenerate from the current seed, if there is one."""
        if draw_settings == self.draw_settings:
            return self.configuration
        self.draw_settings = draw_settings
        if self.seed:
            return await self.submit_seed(self.seed)
        return self.configuration

    # -- helpers --------------------------------------------------------------

    def render(self) -> Snowflake:
        return render(self.configuration.branches, self.draw_settings, self.view_box_size)

    def _configuration_from_fragment(self, fragment: str | None) -> Configuration:
        try:
            configuration = codec.decode(fragment)
        except EmptyFragmentError:
            logger.debug("No persisted fragment, using random snowflake")
        except FragmentDecodeError as e:
            logger.warning("Rejected fragment %r: %s", fragment, e)
        else:
            self.fallback = False
            return configuration

        self.fallback = True
        return Configuration(branches=tuple(random_branches(self.draw_settings, self._rng)))

    def _publish(self, configuration: Configuration) -> None:
        self.configuration = configuration
        self.fragment = codec.encode(configuration)
        self._written = self.fragment
        self.state = SessionState.READY


# Module-level singleton
_session: ViewSession | None = None


def get_view_session() -> ViewSession:
    global _session
    if _session is None:
        _session = ViewSession()
        _session.load(None)
    return _session


def reset_view_session(session: ViewSession | None = None) -> ViewSession:
    global _session
    _session = session or ViewSession()
    if session is None:
        _session.load(None)
    return _session
