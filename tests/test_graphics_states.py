import dataclasses

import pytest

from xnakit.color import Color
from xnakit.graphics_states import (
    Blend,
    BlendFunction,
    BlendState,
    ColorWriteChannels,
    ComparisonFunction,
    CullMode,
    DepthStencilState,
    FillMode,
    RasterizerState,
    SamplerState,
    SamplerStateCollection,
    StencilOperation,
    TextureAddressMode,
    TextureFilter,
)


def test_blend_state_defaults():
    state = BlendState()
    assert len(state.render_targets) == 8
    assert state.blend_factor == Color.named("white")
    assert state.multi_sample_mask == 0xFFFFFFFF
    assert not state.alpha_to_coverage_enable
    for target in state.render_targets:
        assert target.enabled
        assert target.source is Blend.ONE
        assert target.destination is Blend.ONE
        assert target.operation is BlendFunction.ADD
        assert target.write_mask is ColorWriteChannels.ALL


@pytest.mark.parametrize(
    "factory, source, destination",
    [
        (BlendState.opaque, Blend.ONE, Blend.ZERO),
        (BlendState.alpha_blend, Blend.ONE, Blend.INVERSE_SOURCE_ALPHA),
        (BlendState.additive, Blend.SOURCE_ALPHA, Blend.ONE),
        (BlendState.non_premultiplied, Blend.SOURCE_ALPHA, Blend.INVERSE_SOURCE_ALPHA),
    ],
)
def test_blend_presets_change_only_first_target(factory, source, destination):
    state = factory()
    first = state.render_targets[0]
    assert first.source is source
    assert first.source_alpha is source
    assert first.destination is destination
    assert first.destination_alpha is destination
    assert state.render_targets[1:] == BlendState().render_targets[1:]


def test_blend_state_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        BlendState().multi_sample_mask = 0


def test_depth_stencil_default():
    state = DepthStencilState.default()
    assert state.depth_enable and state.stencil_enable and state.depth_write_mask
    assert state.depth_function is ComparisonFunction.LESS_EQUALS
    assert state.stencil_read_mask == 255
    assert state.front_face.stencil_function is ComparisonFunction.ALWAYS
    assert state.back_face.stencil_pass_operation is StencilOperation.KEEP


def test_depth_stencil_none_and_read():
    none = DepthStencilState.none()
    assert none == dataclasses.replace(
        DepthStencilState.default(), depth_enable=False, depth_write_mask=False
    )
    assert DepthStencilState.depth_read() == DepthStencilState.default()


@pytest.mark.parametrize(
    "factory, mode",
    [
        (RasterizerState.cull_none, CullMode.NONE),
        (RasterizerState.cull_clockwise, CullMode.CULL_CLOCKWISE_FACE),
        (RasterizerState.cull_counter_clockwise, CullMode.CULL_COUNTER_CLOCKWISE_FACE),
    ],
)
def test_rasterizer_presets(factory, mode):
    state = factory()
    assert state.cull_mode is mode
    assert state.fill_mode is FillMode.SOLID
    assert state.depth_clip_enable
    assert dataclasses.replace(state, cull_mode=CullMode.NONE) == RasterizerState()


@pytest.mark.parametrize(
    "factory, texture_filter, mode",
    [
        (SamplerState.point_wrap, TextureFilter.POINT, TextureAddressMode.WRAP),
        (SamplerState.point_clamp, TextureFilter.POINT, TextureAddressMode.CLAMP),
        (SamplerState.linear_wrap, TextureFilter.LINEAR, TextureAddressMode.CLAMP),
        (SamplerState.linear_clamp, TextureFilter.LINEAR, TextureAddressMode.WRAP),
        (SamplerState.anisotropic_wrap, TextureFilter.ANISOTROPIC, TextureAddressMode.CLAMP),
        (SamplerState.anisotropic_clamp, TextureFilter.ANISOTROPIC, TextureAddressMode.WRAP),
    ],
)
def test_sampler_presets(factory, texture_filter, mode):
    state = factory()
    assert state.filter is texture_filter
    assert (state.address_u, state.address_v, state.address_w) == (mode, mode, mode)
    assert state.border_color == Color(0)
    assert state.comparison_function is ComparisonFunction.NEVER


def test_sampler_collection_holds_states():
    collection = SamplerStateCollection()
    assert collection.samplers == []
    collection.samplers.append(SamplerState.point_wrap())
    assert SamplerStateCollection().samplers == []
    assert collection.samplers[0].filter is TextureFilter.POINT