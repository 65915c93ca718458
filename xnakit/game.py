"""Game loop objects: the game, its window, timing and the graphics device manager."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional

from .geometry import Rectangle
from .graphics_device import (
    DepthFormat,
    GraphicsAdapter,
    GraphicsDevice,
    GraphicsProfile,
    PresentationParameters,
    SurfaceFormat,
)
from .timespan import TimeSpan

DEFAULT_BACK_BUFFER_WIDTH = 800
DEFAULT_BACK_BUFFER_HEIGHT = 480
DEFAULT_TARGET_ELAPSED_TICKS = 166667
DEFAULT_WINDOW_TITLE = "My Game"


class DisplayOrientation(enum.Enum):
    DEFAULT = 0
    LANDSCAPE_LEFT = 1
    LANDSCAPE_RIGHT = 2
    PORTRAIT = 3


class GameWindowStyle(enum.Enum):
    WINDOWED = 0
    FULL_SCREEN = 1
    BORDERLESS_FULL_SCREEN = 2


@dataclass
class GameWindow:
    """The window a game draws into."""

    title: str = ""
    width: int = 0
    height: int = 0
    x: int = 0
    y: int = 0
    style: GameWindowStyle = GameWindowStyle.WINDOWED

    def client_bounds(self) -> Rectangle:
        """Return the window's position and size as a rectangle."""
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)


@dataclass(frozen=True)
class GameTime:
    """Timing values handed to update and draw."""

    elapsed_time: TimeSpan = field(default_factory=TimeSpan)
    is_slowly: bool = False
    total_time: TimeSpan = field(default_factory=TimeSpan)


_Hook = Optional[Callable[[], None]]
_TimedHook = Optional[Callable[[GameTime], None]]


@dataclass
class GameHandler:
    """Callbacks a game invokes during its life.

    Each hook may be given as a callable, or the matching ``on_*`` method
    may be overridden in a subclass.
    """

    begin_run: _Hook = None
    end_run: _Hook = None
    update: _TimedHook = None
    draw: _TimedHook = None
    begin_draw: _Hook = None
    end_draw: _Hook = None
    initialize: _Hook = None
    load_content: _Hook = None

    def on_begin_run(self) -> None:
        """Called once before the game loop starts."""
        if self.begin_run is not None:
            self.begin_run()

    def on_end_run(self) -> None:
        """Called once after the game loop ends."""
        if self.end_run is not None:
            self.end_run()

    def on_update(self, game_time: GameTime) -> None:
        """Called for each update step."""
        if self.update is not None:
            self.update(game_time)

    def on_draw(self, game_time: GameTime) -> None:
        """Called for each frame to draw."""
        if self.draw is not None:
            self.draw(game_time)

    def on_begin_draw(self) -> None:
        """Called before drawing a frame."""
        if self.begin_draw is not None:
            self.begin_draw()

    def on_end_draw(self) -> None:
        """Called after drawing a frame."""
        if self.end_draw is not None:
            self.end_draw()

    def on_initialize(self) -> None:
        """Called once when the game initializes."""
        if self.initialize is not None:
            self.initialize()

    def on_load_content(self) -> None:
        """Called once to load content."""
        if self.load_content is not None:
            self.load_content()


class Game:
    """A game: its window, timing settings, device and callback handler."""

    def __init__(self) -> None:
        self.game_window: Optional[GameWindow] = GameWindow(
            DEFAULT_WINDOW_TITLE, DEFAULT_BACK_BUFFER_WIDTH, DEFAULT_BACK_BUFFER_HEIGHT
        )
        self.graphics_device: Optional[GraphicsDevice] = None
        self.current_game_time = GameTime()
        self.handler: Optional[GameHandler] = None
        self.is_window_created = False
        self.is_fixed_time_step = True
        self.target_elapsed_time = TimeSpan.from_ticks(DEFAULT_TARGET_ELAPSED_TICKS)
        self.set_is_fixed_time_step(self.is_fixed_time_step)
        self.set_target_elapsed_time(self.target_elapsed_time)

    def set_is_fixed_time_step(self, value: bool) -> None:
        self.is_fixed_time_step = value

    def set_target_elapsed_time(self, value: TimeSpan) -> None:
        """Set the fixed step length; ignored unless the game uses a fixed time step."""
        if not self.is_fixed_time_step:
            return
        self.target_elapsed_time = value

    def attach_graphics_device(self, device: GraphicsDevice) -> None:
        self.graphics_device = device


class GraphicsDeviceManager:
    """Holds the preferred device settings for a game and tracks pending changes."""

    DEFAULT_BACK_BUFFER_WIDTH = DEFAULT_BACK_BUFFER_WIDTH
    DEFAULT_BACK_BUFFER_HEIGHT = DEFAULT_BACK_BUFFER_HEIGHT

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game
        self.graphics_adapter: Optional[GraphicsAdapter] = GraphicsAdapter()
        self.graphics_device: Optional[GraphicsDevice] = None
        self.presentation_parameters = PresentationParameters(
            back_buffer_width=DEFAULT_BACK_BUFFER_WIDTH,
            back_buffer_height=DEFAULT_BACK_BUFFER_HEIGHT,
            back_buffer_format=SurfaceFormat.COLOR,
            is_full_screen=False,
        )
        self.is_device_dirty = False
        self.in_device_transition = False
        self.graphics_profile = GraphicsProfile.HI_DEF
        self.is_full_screen = False
        self.synchronize_with_vertical_retrace = True
        self.use_resized_back_buffer = False
        self.resized_back_buffer_width = 0
        self.resized_back_buffer_height = 0
        self.back_buffer_width = DEFAULT_BACK_BUFFER_WIDTH
        self.back_buffer_height = DEFAULT_BACK_BUFFER_HEIGHT
        self.depth_stencil_format = DepthFormat.DEPTH24
        self.allow_multi_sampling = False
        self.back_buffer_format = SurfaceFormat.COLOR

    def set_graphics_profile(self, value: GraphicsProfile) -> None:
        self.graphics_profile = value
        self.is_device_dirty = True

    def set_preferred_depth_stencil_format(self, value: DepthFormat) -> None:
        self.depth_stencil_format = value
        self.is_device_dirty = True

    def set_preferred_back_buffer_format(self, value: SurfaceFormat) -> None:
        self.back_buffer_format = value
        self.is_device_dirty = True

    def set_preferred_back_buffer_width(self, value: int) -> None:
        self.resized_back_buffer_width = value
        self.is_device_dirty = True

    def set_preferred_back_buffer_height(self, value: int) -> None:
        self.resized_back_buffer_height = value
        self.is_device_dirty = True

    def set_full_screen(self, value: bool) -> None:
        self.is_full_screen = value
        self.is_device_dirty = True

    def set_synchronize_with_vertical_retrace(self, value: bool) -> None:
        self.synchronize_with_vertical_retrace = value
        self.is_device_dirty = True

    def set_prefer_multi_sampling(self, value: bool) -> None:
        self.allow_multi_sampling = value
        self.is_device_dirty = True


@dataclass
class GraphicsDeviceInformation:
    """A candidate device configuration: adapter, profile and presentation parameters."""

    adapter: GraphicsAdapter = field(default_factory=GraphicsAdapter)
    profile: GraphicsProfile = GraphicsProfile.REACH
    presentation_parameters: PresentationParameters = field(default_factory=PresentationParameters)

    def compare(self, other: "GraphicsDeviceInformation") -> int:
        """Order candidates: -1, 0 or 1, lower profiles first."""
        if self != other:
            return -1 if self.profile.value <= other.profile.value else 1
        params1 = self.presentation_parameters
        params2 = other.presentation_parameters
        if params1 != params2 and params1.multi_sample_count <= params2.multi_sample_count:
            return -1
        return 0

    def __lt__(self, other: "GraphicsDeviceInformation") -> bool:
        if not isinstance(other, GraphicsDeviceInformation):
            return NotImplemented
        return self.compare(other) < 0