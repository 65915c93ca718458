import dataclasses

from xnakit.graphics_device import (
    DepthFormat,
    DisplayMode,
    DisplayModeCollection,
    GraphicsAdapter,
    GraphicsAdapterOutput,
    GraphicsDevice,
    GraphicsProfile,
    PresentationParameters,
    PresentInterval,
    SurfaceFormat,
    SurfaceUsage,
    SwapChain,
    SwapChainFlag,
    SwapEffect,
)
from xnakit.graphics_states import BlendState, CullMode, DepthStencilState


def test_surface_format_rank():
    assert SurfaceFormat.COLOR.rank() == 32
    assert SurfaceFormat.UNKNOWN.rank() == 0


def test_query_filters_by_format_and_keeps_order():
    a = DisplayMode(width=640, height=480, format=SurfaceFormat.COLOR)
    b = DisplayMode(width=1024, height=768, format=SurfaceFormat.UNKNOWN)
    c = DisplayMode(width=800, height=600, format=SurfaceFormat.COLOR)
    collection = DisplayModeCollection([a, b, c])
    assert collection.query(SurfaceFormat.COLOR).display_modes == [a, c]
    assert collection.query(SurfaceFormat.UNKNOWN).display_modes == [b]
    assert len(collection) == 3


def test_query_on_empty_collection():
    assert DisplayModeCollection().query(SurfaceFormat.COLOR).display_modes == []


def test_swap_chain_defaults():
    chain = SwapChain()
    assert chain.windowed
    assert chain.sample_count == 1
    assert chain.buffer_count == 2
    assert chain.usage is SurfaceUsage.RENDER_TARGET_OUTPUT
    assert chain.flags is SwapChainFlag.ALLOW_MODE_SWITCH
    assert chain.swap_effect is SwapEffect.FLIP_DISCARD
    assert (chain.display.width, chain.display.height) == (800, 600)
    assert chain.display.refresh_rate_numerator == 60


def test_swap_chain_from_parameters():
    params = PresentationParameters(
        back_buffer_width=1280,
        back_buffer_height=720,
        back_buffer_format=SurfaceFormat.UNKNOWN,
        is_full_screen=True,
    )
    chain = SwapChain.from_parameters(params)
    assert not chain.windowed
    assert chain.display.width == params.back_buffer_width
    assert chain.display.height == params.back_buffer_height
    assert chain.display.format is SurfaceFormat.UNKNOWN
    assert dataclasses.replace(chain, windowed=True, display=SwapChain().display) == SwapChain()


def test_graphics_device_defaults():
    device = GraphicsDevice()
    assert device.adapter is None
    assert device.blend_state == BlendState.opaque()
    assert device.rasterizer_state.cull_mode is CullMode.CULL_CLOCKWISE_FACE
    assert device.depth_stencil_state == DepthStencilState.default()
    params = device.presentation_parameters
    assert (params.back_buffer_width, params.back_buffer_height) == (800, 600)
    assert params.multi_sample_count == 1
    assert params.depth_stencil_format is DepthFormat.NONE
    assert (device.viewport.width, device.viewport.height) == (800.0, 600.0)
    assert device.viewport.max_depth == 1.0
    assert device.graphics_profile is GraphicsProfile.REACH
    assert device.swap_chain == SwapChain()


def _adapter():
    output = GraphicsAdapterOutput(device_name="DISPLAY-TEST")
    return GraphicsAdapter(index=0, description="Test Adapter", outputs=[output], current_output=output)


def test_from_profile_copies_arguments():
    adapter = _adapter()
    params = PresentationParameters(back_buffer_width=1024, back_buffer_height=768)
    device = GraphicsDevice.from_profile(adapter, GraphicsProfile.HI_DEF, params)
    assert device.adapter == adapter
    assert device.adapter is not adapter
    assert device.graphics_profile is GraphicsProfile.HI_DEF
    assert device.presentation_parameters == params
    adapter.description = "changed"
    assert device.adapter.description == "Test Adapter"


def test_reset_replaces_parameters_and_adapter():
    device = GraphicsDevice()
    adapter = _adapter()
    params = PresentationParameters(presentation_interval=PresentInterval.IMMEDIATE)
    device.reset(params, adapter)
    assert device.adapter == adapter
    assert device.presentation_parameters.presentation_interval is PresentInterval.IMMEDIATE
    assert device.blend_state == BlendState.opaque()