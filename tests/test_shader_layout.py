import pytest

from abyss.shader_layout import (
    ShaderDescriptor,
    ShaderInput,
    ShaderSampler,
    ShaderStorage,
    ShaderUniform,
    VertexClass,
    VkFormat,
)


def _input(binding, fmt, location=0):
    size = ShaderDescriptor.format_size(fmt)
    return ShaderInput(location, binding, 0, size, fmt)


def test_vk_format_matches_vulkan_numbering():
    assert ShaderDescriptor.format_size(109) == ShaderDescriptor.format_size(
        VkFormat.R32G32B32A32_SFLOAT
    )
    assert ShaderDescriptor.format_size(109) == 16
    assert ShaderDescriptor.format_size(98) == ShaderDescriptor.format_size(
        VkFormat.R32_UINT
    )
    assert ShaderDescriptor.format_size(98) == 4


@pytest.mark.parametrize("kind", ["SFLOAT", "SINT", "UINT"])
def test_format_size_scales_with_component_count(kind):
    one = ShaderDescriptor.format_size(VkFormat[f"R32_{kind}"])
    assert one == ShaderDescriptor.format_size(VkFormat.R32_SFLOAT)
    assert ShaderDescriptor.format_size(VkFormat[f"R32G32_{kind}"]) == 2 * one
    assert ShaderDescriptor.format_size(VkFormat[f"R32G32B32_{kind}"]) == 3 * one
    assert ShaderDescriptor.format_size(VkFormat[f"R32G32B32A32_{kind}"]) == 4 * one


def test_format_size_of_unsupported_format_is_zero():
    assert ShaderDescriptor.format_size(VkFormat.UNDEFINED) == 0
    assert ShaderDescriptor.format_size(12345) == 0


def test_uniform_binding_sizes_sum_per_binding():
    desc = ShaderDescriptor(
        uniforms=[
            ShaderUniform("b", 0, 1, 32),
            ShaderUniform("a", 0, 0, 64),
            ShaderUniform("c", 0, 0, 16),
        ]
    )
    sizes = desc.uniform_binding_sizes()
    assert list(sizes) == [0, 1]
    assert sizes[1] == 32
    assert sum(sizes.values()) == sum(u.size for u in desc.uniforms)


def test_uniform_binding_sizes_empty():
    assert ShaderDescriptor().uniform_binding_sizes() == {}


def test_input_binding_sizes_and_stride_agree():
    desc = ShaderDescriptor(
        inputs=[
            _input(0, VkFormat.R32G32B32_SFLOAT),
            _input(0, VkFormat.R32G32B32A32_SFLOAT, 1),
            _input(1, VkFormat.R32_UINT, 2),
        ]
    )
    sizes = desc.input_binding_sizes()
    assert sizes == desc.input_binding_stride()
    assert sizes[1] == ShaderDescriptor.format_size(VkFormat.R32_UINT)
    assert sizes[0] == ShaderDescriptor.format_size(
        VkFormat.R32G32B32_SFLOAT
    ) + ShaderDescriptor.format_size(VkFormat.R32G32B32A32_SFLOAT)


def test_descriptor_holds_storages_and_samplers():
    desc = ShaderDescriptor(
        storages=[ShaderStorage("buf", 0, 2)],
        samplers=[ShaderSampler("tex", 1, 10, 4)],
    )
    assert desc.storages[0].binding == 2
    assert desc.samplers[0].count == 4


def test_vertex_class_size_matches_binding_size():
    desc = ShaderDescriptor(
        inputs=[
            _input(0, VkFormat.R32G32B32_SFLOAT),
            _input(0, VkFormat.R32G32_SFLOAT, 1),
            _input(1, VkFormat.R32G32B32A32_UINT, 2),
        ]
    )
    sizes = desc.input_binding_sizes()
    vc0 = VertexClass(desc, 100)
    vc1 = VertexClass(desc, 50, binding=1)
    assert vc0.vertex_size == sizes[0]
    assert vc1.vertex_size == sizes[1]
    assert vc0.binding == 0 and vc1.binding == 1
    assert vc0.max_vertices == 100


def test_vertex_class_unknown_binding_has_zero_size():
    desc = ShaderDescriptor(inputs=[_input(0, VkFormat.R32_SFLOAT)])
    assert VertexClass(desc, 10, binding=7).vertex_size == 0


def test_vertex_class_rejects_negative_capacity():
    with pytest.raises(ValueError):
        VertexClass(ShaderDescriptor(), -1)