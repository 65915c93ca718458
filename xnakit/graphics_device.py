"""Graphics adapters, display modes, presentation parameters and the graphics device."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .geometry import Rectangle
from .graphics_states import (
    BlendState,
    DepthStencilState,
    RasterizerState,
    SamplerStateCollection,
)


class GraphicsProfile(enum.Enum):
    REACH = 0
    HI_DEF = 1


class SurfaceFormat(enum.Enum):
    COLOR = 0
    UNKNOWN = 1

    def rank(self) -> int:
        """Bits per pixel used to rank formats; 0 for unknown formats."""
        return 32 if self is SurfaceFormat.COLOR else 0


class PresentInterval(enum.Enum):
    DEFAULT = 0
    ONE = 1
    TWO = 2
    IMMEDIATE = 3


class DepthFormat(enum.Enum):
    NONE = 0
    DEPTH16 = 1
    DEPTH24 = 2
    DEPTH24_STENCIL8 = 3


class SwapEffect(enum.Enum):
    DISCARD = 0
    SEQUENTIAL = 1
    FLIP_SEQUENTIAL = 2
    FLIP_DISCARD = 3


class ScanlineOrder(enum.Enum):
    UNSPECIFIED = 0
    PROGRESSIVE = 1
    UPPER_FIELD = 2
    LOWER_FIELD = 3


class DisplayModeScaling(enum.Enum):
    UNSPECIFIED = 0
    CENTERED = 1
    STRETCHED = 2


class SurfaceUsage(enum.Enum):
    BACK_BUFFER = 0
    DISCARD = 1
    READ_ONLY = 2
    RENDER_TARGET_OUTPUT = 3
    SHADER_INPUT = 4
    SHARED = 5
    UNORDERED = 6


class SwapChainFlag(enum.Enum):
    NON_PRE_ROTATED = 0
    ALLOW_MODE_SWITCH = 1
    GDI_COMPATIBLE = 2
    RESTRICTED_CONTENT = 3
    RESTRICT_SHARED_RESOURCE_DRIVER = 4
    DISPLAY_ONLY = 5
    FRAME_LATENCY_WAITABLE_OBJECT = 6
    FOREGROUND_LAYER = 7
    FULLSCREEN_VIDEO = 8
    YUV_VIDEO = 9
    HW_PROTECTED = 10
    ALLOW_TEARING = 11
    RESTRICTED_TO_ALL_HOLOGRAPHIC_DISPLAYS = 12


@dataclass(frozen=True)
class DisplayMode:
    """A display resolution, refresh rate and pixel format."""

    width: int = 0
    height: int = 0
    refresh_rate_numerator: int = 0
    refresh_rate_denominator: int = 0
    format: SurfaceFormat = SurfaceFormat.COLOR
    scanline_order: ScanlineOrder = ScanlineOrder.UNSPECIFIED
    scaling: DisplayModeScaling = DisplayModeScaling.UNSPECIFIED


@dataclass
class DisplayModeCollection:
    """A list of display modes."""

    display_modes: List[DisplayMode] = field(default_factory=list)

    def query(self, surface_format: SurfaceFormat) -> "DisplayModeCollection":
        """Return the modes that use ``surface_format``, in their original order."""
        return DisplayModeCollection([m for m in self.display_modes if m.format == surface_format])

    def __iter__(self) -> Iterator[DisplayMode]:
        return iter(self.display_modes)

    def __len__(self) -> int:
        return len(self.display_modes)


@dataclass
class GraphicsAdapterOutput:
    """A display output attached to an adapter."""

    device_name: str = ""
    desktop_coordinates: Rectangle = field(default_factory=Rectangle)
    attached_to_desktop: bool = False
    display_mode_collection: DisplayModeCollection = field(default_factory=DisplayModeCollection)
    current_display_mode: Optional[DisplayMode] = None


@dataclass
class GraphicsAdapter:
    """A graphics adapter and its outputs."""

    index: int = 0
    description: str = ""
    device_id: int = 0
    is_default: bool = False
    revision: int = 0
    sub_system_id: int = 0
    vendor_id: int = 0
    outputs: List[GraphicsAdapterOutput] = field(default_factory=list)
    current_output: Optional[GraphicsAdapterOutput] = None


@dataclass(frozen=True)
class PresentationParameters:
    """How a device presents its back buffer."""

    back_buffer_width: int = 0
    back_buffer_height: int = 0
    back_buffer_format: SurfaceFormat = SurfaceFormat.COLOR
    is_full_screen: bool = False
    multi_sample_count: int = 0
    presentation_interval: PresentInterval = PresentInterval.DEFAULT
    depth_stencil_format: DepthFormat = DepthFormat.NONE
    presentation_swap_effect: SwapEffect = SwapEffect.FLIP_DISCARD


@dataclass(frozen=True)
class Viewport:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    min_depth: float = 0.0
    max_depth: float = 0.0


@dataclass(frozen=True)
class Texture2D:
    width: int = 0
    height: int = 0
    format: SurfaceFormat = SurfaceFormat.COLOR


@dataclass(frozen=True)
class RenderTarget2D:
    texture: Texture2D = field(default_factory=Texture2D)


_DEFAULT_SWAP_DISPLAY = DisplayMode(
    width=800,
    height=600,
    refresh_rate_numerator=60,
    refresh_rate_denominator=1,
    format=SurfaceFormat.COLOR,
)


@dataclass(frozen=True)
class SwapChain:
    """Description of the chain of buffers a device presents from."""

    display: DisplayMode = _DEFAULT_SWAP_DISPLAY
    sample_count: int = 1
    sample_quality: int = 0
    usage: SurfaceUsage = SurfaceUsage.RENDER_TARGET_OUTPUT
    buffer_count: int = 2
    windowed: bool = True
    swap_effect: SwapEffect = SwapEffect.FLIP_DISCARD
    flags: SwapChainFlag = SwapChainFlag.ALLOW_MODE_SWITCH

    @classmethod
    def from_parameters(cls, parameters: PresentationParameters) -> "SwapChain":
        """Describe a swap chain matching the given presentation parameters."""
        display = DisplayMode(
            width=parameters.back_buffer_width,
            height=parameters.back_buffer_height,
            refresh_rate_numerator=60,
            refresh_rate_denominator=1,
            format=parameters.back_buffer_format,
        )
        return cls(display=display, windowed=not parameters.is_full_screen)


def _default_device_parameters() -> PresentationParameters:
    return PresentationParameters(
        back_buffer_width=800,
        back_buffer_height=600,
        back_buffer_format=SurfaceFormat.COLOR,
        is_full_screen=False,
        multi_sample_count=1,
        presentation_interval=PresentInterval.DEFAULT,
        depth_stencil_format=DepthFormat.NONE,
        presentation_swap_effect=SwapEffect.FLIP_DISCARD,
    )


@dataclass
class GraphicsDevice:
    """The state a graphics device is configured with."""

    adapter: Optional[GraphicsAdapter] = None
    blend_state: BlendState = field(default_factory=BlendState.opaque)
    depth_stencil_state: DepthStencilState = field(default_factory=DepthStencilState.default)
    rasterizer_state: RasterizerState = field(default_factory=RasterizerState.cull_clockwise)
    sampler_state_collection: SamplerStateCollection = field(default_factory=SamplerStateCollection)
    presentation_parameters: PresentationParameters = field(default_factory=_default_device_parameters)
    viewport: Viewport = field(
        default_factory=lambda: Viewport(0.0, 0.0, 800.0, 600.0, 0.0, 1.0)
    )
    render_target: RenderTarget2D = field(default_factory=RenderTarget2D)
    swap_chain: SwapChain = field(default_factory=SwapChain)
    graphics_profile: GraphicsProfile = GraphicsProfile.REACH

    @classmethod
    def from_profile(
        cls,
        adapter: GraphicsAdapter,
        profile: GraphicsProfile,
        presentation_parameters: PresentationParameters,
    ) -> "GraphicsDevice":
        """Create a device for an adapter, profile and presentation parameters."""
        return cls(
            adapter=copy.deepcopy(adapter),
            graphics_profile=profile,
            presentation_parameters=presentation_parameters,
        )

    def reset(self, parameters: PresentationParameters, adapter: GraphicsAdapter) -> None:
        """Reconfigure the device with new presentation parameters and adapter."""
        self.adapter = copy.deepcopy(adapter)
        self.presentation_parameters = parameters