"""Fixed-function pipeline state: blending, depth/stencil, rasterizer and sampler states."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import List, Tuple

from .color import Color

RENDER_TARGET_COUNT = 8


class Blend(enum.Enum):
    ZERO = 0
    ONE = 1
    SOURCE_COLOR = 2
    INVERSE_SOURCE_COLOR = 3
    SOURCE_ALPHA = 4
    INVERSE_SOURCE_ALPHA = 5
    DESTINATION_ALPHA = 6
    INVERSE_DESTINATION_ALPHA = 7
    DESTINATION_COLOR = 8
    INVERSE_DESTINATION_COLOR = 9
    SOURCE_ALPHA_SATURATION = 10
    BLEND_FACTOR = 11
    INVERSE_BLEND_FACTOR = 12
    SOURCE1_COLOR = 13
    INVERSE_SOURCE1_COLOR = 14
    SOURCE1_ALPHA = 15
    INVERSE_SOURCE1_ALPHA = 16


class BlendFunction(enum.Enum):
    ADD = 0
    SUBTRACT = 1
    REVERSE_SUBTRACT = 2
    MIN = 3
    MAX = 4


class ColorWriteChannels(enum.Enum):
    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3
    ALL = 4


@dataclass(frozen=True)
class BlendRenderTarget:
    """Blend settings for one render target."""

    enabled: bool = False
    source: Blend = Blend.ZERO
    destination: Blend = Blend.ZERO
    operation: BlendFunction = BlendFunction.ADD
    source_alpha: Blend = Blend.ZERO
    destination_alpha: Blend = Blend.ZERO
    operation_alpha: BlendFunction = BlendFunction.ADD
    write_mask: ColorWriteChannels = ColorWriteChannels.RED


_BASE_TARGET = BlendRenderTarget(
    enabled=True,
    source=Blend.ONE,
    destination=Blend.ONE,
    operation=BlendFunction.ADD,
    source_alpha=Blend.ONE,
    destination_alpha=Blend.ONE,
    operation_alpha=BlendFunction.ADD,
    write_mask=ColorWriteChannels.ALL,
)


@dataclass(frozen=True)
class BlendState:
    """How colours written to the render targets are combined with what is there."""

    blend_factor: Color = field(default_factory=lambda: Color(0xFFFFFFFF))
    multi_sample_mask: int = 0xFFFFFFFF
    alpha_to_coverage_enable: bool = False
    independent_blend_enable: bool = False
    render_targets: Tuple[BlendRenderTarget, ...] = (_BASE_TARGET,) * RENDER_TARGET_COUNT

    @classmethod
    def _with_first_target(cls, source: Blend, destination: Blend) -> "BlendState":
        base = cls()
        first = replace(
            base.render_targets[0],
            source=source,
            source_alpha=source,
            destination=destination,
            destination_alpha=destination,
        )
        return replace(base, render_targets=(first,) + base.render_targets[1:])

    @classmethod
    def opaque(cls) -> "BlendState":
        return cls._with_first_target(Blend.ONE, Blend.ZERO)

    @classmethod
    def alpha_blend(cls) -> "BlendState":
        return cls._with_first_target(Blend.ONE, Blend.INVERSE_SOURCE_ALPHA)

    @classmethod
    def additive(cls) -> "BlendState":
        return cls._with_first_target(Blend.SOURCE_ALPHA, Blend.ONE)

    @classmethod
    def non_premultiplied(cls) -> "BlendState":
        return cls._with_first_target(Blend.SOURCE_ALPHA, Blend.INVERSE_SOURCE_ALPHA)


class StencilOperation(enum.Enum):
    KEEP = 0
    ZERO = 1
    REPLACE = 2
    INCREMENT_SATURATION = 3
    DECREMENT_SATURATION = 4
    INVERT = 5
    INCREMENT = 6
    DECREMENT = 7


class ComparisonFunction(enum.Enum):
    NEVER = 0
    LESS = 1
    EQUAL = 2
    LESS_EQUALS = 3
    GREATER = 4
    NOT_EQUAL = 5
    GREATER_EQUAL = 6
    ALWAYS = 7


@dataclass(frozen=True)
class DepthFace:
    """Stencil behaviour for one face orientation."""

    stencil_function: ComparisonFunction = ComparisonFunction.NEVER
    stencil_pass_operation: StencilOperation = StencilOperation.KEEP
    stencil_fail_operation: StencilOperation = StencilOperation.KEEP
    stencil_depth_fail_operation: StencilOperation = StencilOperation.KEEP


_ALWAYS_KEEP = DepthFace(stencil_function=ComparisonFunction.ALWAYS)


@dataclass(frozen=True)
class DepthStencilState:
    """Depth and stencil test settings."""

    depth_enable: bool = True
    stencil_enable: bool = True
    depth_function: ComparisonFunction = ComparisonFunction.LESS_EQUALS
    stencil_read_mask: int = 0xFF
    stencil_write_mask: int = 0xFF
    depth_write_mask: bool = True
    front_face: DepthFace = _ALWAYS_KEEP
    back_face: DepthFace = _ALWAYS_KEEP

    @classmethod
    def none(cls) -> "DepthStencilState":
        return cls(depth_enable=False, depth_write_mask=False)

    @classmethod
    def default(cls) -> "DepthStencilState":
        return cls()

    @classmethod
    def depth_read(cls) -> "DepthStencilState":
        return cls.default()


class CullMode(enum.Enum):
    NONE = 0
    CULL_CLOCKWISE_FACE = 1
    CULL_COUNTER_CLOCKWISE_FACE = 2


class FillMode(enum.Enum):
    WIRE_FRAME = 0
    SOLID = 1


@dataclass(frozen=True)
class RasterizerState:
    """How primitives are turned into pixels."""

    cull_mode: CullMode = CullMode.NONE
    fill_mode: FillMode = FillMode.SOLID
    multi_sample_anti_alias: bool = False
    depth_bias: int = 0
    depth_bias_clamp: float = 0.0
    slope_scale_depth_bias: float = 0.0
    scissor_test_enable: bool = False
    depth_clip_enable: bool = True
    antialiased_line_enable: bool = False
    front_counter_clockwise: bool = False

    @classmethod
    def cull_none(cls) -> "RasterizerState":
        return cls(cull_mode=CullMode.NONE)

    @classmethod
    def cull_clockwise(cls) -> "RasterizerState":
        return cls(cull_mode=CullMode.CULL_CLOCKWISE_FACE)

    @classmethod
    def cull_counter_clockwise(cls) -> "RasterizerState":
        return cls(cull_mode=CullMode.CULL_COUNTER_CLOCKWISE_FACE)


class TextureFilter(enum.Enum):
    LINEAR = 0
    POINT = 1
    ANISOTROPIC = 2
    LINEAR_MIP_POINT = 3
    POINT_MIP_LINEAR = 4
    MIN_LINEAR_MAG_POINT_MIP_LINEAR = 5
    MIN_LINEAR_MAG_POINT_MIP_POINT = 6
    MIN_POINT_MAG_LINEAR_MIP_LINEAR = 7
    MIN_POINT_MAG_LINEAR_MIP_POINT = 8


class TextureAddressMode(enum.Enum):
    WRAP = 0
    MIRROR = 1
    CLAMP = 2
    BORDER = 3
    MIRROR_ONCE = 4


@dataclass(frozen=True)
class SamplerState:
    """How textures are sampled."""

    max_anisotropy: int = 0
    filter: TextureFilter = TextureFilter.LINEAR
    address_u: TextureAddressMode = TextureAddressMode.WRAP
    address_v: TextureAddressMode = TextureAddressMode.WRAP
    address_w: TextureAddressMode = TextureAddressMode.WRAP
    mip_map_level_of_detail_bias: float = 0.0
    max_mip_level: float = 0.0
    min_mip_level: float = 0.0
    border_color: Color = field(default_factory=Color)
    comparison_function: ComparisonFunction = ComparisonFunction.NEVER

    @classmethod
    def _make(cls, texture_filter: TextureFilter, mode: TextureAddressMode) -> "SamplerState":
        return cls(filter=texture_filter, address_u=mode, address_v=mode, address_w=mode)

    @classmethod
    def point_wrap(cls) -> "SamplerState":
        return cls._make(TextureFilter.POINT, TextureAddressMode.WRAP)

    @classmethod
    def point_clamp(cls) -> "SamplerState":
        return cls._make(TextureFilter.POINT, TextureAddressMode.CLAMP)

    @classmethod
    def linear_wrap(cls) -> "SamplerState":
        return cls._make(TextureFilter.LINEAR, TextureAddressMode.CLAMP)

    @classmethod
    def linear_clamp(cls) -> "SamplerState":
        return cls._make(TextureFilter.LINEAR, TextureAddressMode.WRAP)

    @classmethod
    def anisotropic_wrap(cls) -> "SamplerState":
        return cls._make(TextureFilter.ANISOTROPIC, TextureAddressMode.CLAMP)

    @classmethod
    def anisotropic_clamp(cls) -> "SamplerState":
        return cls._make(TextureFilter.ANISOTROPIC, TextureAddressMode.WRAP)


@dataclass
class SamplerStateCollection:
    """The sampler states bound to a device."""

    samplers: List[SamplerState] = field(default_factory=list)