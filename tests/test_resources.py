import pytest

from abyss.resources import EResource, Resource, ResourceClass, ResourceHandler


class RecordingHandler(ResourceHandler):
    def __init__(self):
        super().__init__(user_data="ctx")
        self.events = []

    def on_add(self, handle, resource):
        self.events.append(("add", handle, resource))

    def on_erase(self, handle, resource):
        self.events.append(("erase", handle, resource))


def test_default_resource_is_false():
    assert not Resource()
    assert Resource() == Resource(EResource.NONE, 0)
    assert Resource(EResource.FONT, 0)


def test_resource_equality():
    assert Resource(EResource.SHADER, 1) == Resource(EResource.SHADER, 1)
    assert Resource(EResource.SHADER, 1) != Resource(EResource.TEXTURE, 1)
    assert Resource(EResource.SHADER, 1) != Resource(EResource.SHADER, 2)


def test_add_assigns_sequential_handles():
    store = ResourceClass(EResource.TEXTURE)
    first = store.add("a")
    second = store.add("b")
    assert first == Resource(EResource.TEXTURE, 0)
    assert second == Resource(EResource.TEXTURE, 1)
    assert store.at(first) == "a"
    assert store.at(second) == "b"
    assert len(store) == 2


def test_erase_recycles_handle():
    store = ResourceClass(EResource.FONT)
    first = store.add("a")
    store.add("b")
    store.erase(first)
    assert len(store) == 1
    reused = store.add("c")
    assert reused.handle == first.handle
    assert store.at(reused) == "c"


def test_at_missing_raises_key_error():
    store = ResourceClass(EResource.SHADER)
    res = store.add("x")
    store.erase(res)
    with pytest.raises(KeyError):
        store.at(res)
    with pytest.raises(KeyError):
        store.erase(res)


def test_kind_mismatch_raises():
    store = ResourceClass(EResource.SHADER)
    res = store.add("x")
    with pytest.raises(ValueError):
        store.at(Resource(EResource.TEXTURE, res.handle))


def test_handlers_notified_on_add_and_erase():
    store = ResourceClass(EResource.TEXTURE)
    handler = RecordingHandler()
    store.add_handler(handler)
    res = store.add("tex")
    store.erase(res)
    assert handler.events == [("add", res.handle, "tex"), ("erase", res.handle, "tex")]
    assert handler.user_data == "ctx"


def test_emplace_builds_without_notifying():
    store = ResourceClass(EResource.FONT)
    handler = RecordingHandler()
    store.add_handler(handler)
    res = store.emplace(dict, size=14)
    assert store.at(res) == {"size": 14}
    assert handler.events == []


def test_iteration_and_contains():
    store = ResourceClass(EResource.SHADER)
    a = store.add("vert")
    b = store.add("frag")
    assert dict(store) == {a.handle: "vert", b.handle: "frag"}
    assert a in store
    assert Resource(EResource.FONT, a.handle) not in store


def test_clear_empties_store():
    store = ResourceClass(EResource.SHADER)
    res = store.add("vert")
    store.clear()
    assert len(store) == 0
    assert res not in store
    assert store.add("again").handle == res.handle + 1


def test_handler_is_abstract():
    with pytest.raises(TypeError):
        ResourceHandler()