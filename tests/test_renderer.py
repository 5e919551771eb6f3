import pygame
import pytest

from colordrawer.drawer import Drawer, DrawerBuilder
from colordrawer.renderer import Renderer
from colordrawer.scene import GameObject, SceneLayer


class DummyDrawer(Drawer):
    """Drawer stub recording draw/dispose calls."""

    def __init__(self, renderer, name, use_real_delta_time=False, out=False):
        super().__init__(renderer, name, use_real_delta_time)
        self.out = out
        self.deltas = []
        self.disposed = False

    def draw(self, delta):
        self.deltas.append(delta)

    def is_out_of_bounds(self):
        return self.out

    def dispose(self):
        self.disposed = True


class DummyBuilder(DrawerBuilder):
    def __init__(self, **kwargs):
        super().__init__()
        self.kwargs = kwargs

    def build(self, name):
        return DummyDrawer(self.renderer, name, **self.kwargs)


@pytest.fixture
def renderer():
    layer = SceneLayer("test", pygame.Surface((4, 4)))
    return Renderer(GameObject(layer, name="owner"))


def test_renderer_attaches_to_object(renderer):
    assert renderer.object.renderer is renderer


def test_add_get_and_iterate(renderer):
    a = renderer.add_drawer("a", DummyBuilder())
    b = renderer.add_drawer("b", DummyBuilder())
    assert a.renderer is renderer
    assert renderer.get_drawer("a") is a
    assert renderer.get_drawer("missing") is None
    assert renderer.has_drawer("b")
    assert list(renderer) == [a, b]
    assert len(renderer) == 2


def test_duplicate_name_rejected(renderer):
    renderer.add_drawer("a", DummyBuilder())
    with pytest.raises(ValueError):
        renderer.add_drawer("a", DummyBuilder())


def test_remove_disposes(renderer):
    a = renderer.add_drawer("a", DummyBuilder())
    assert renderer.remove_drawer("a") is True
    assert a.disposed
    assert not renderer.has_drawer("a")
    # Unknown names are reported, not raised
    assert renderer.remove_drawer("a") is False
    assert renderer.remove_drawer("never-added") is False


def test_render_skips_disabled_and_out_of_bounds(renderer):
    shown = renderer.add_drawer("shown", DummyBuilder())
    hidden = renderer.add_drawer("hidden", DummyBuilder())
    culled = renderer.add_drawer("culled", DummyBuilder(out=True))
    hidden.enabled = False
    renderer.render(0.5)
    assert shown.deltas == [0.5]
    assert hidden.deltas == []
    assert culled.deltas == []


def test_render_routes_raw_delta(renderer):
    scaled = renderer.add_drawer("scaled", DummyBuilder())
    raw = renderer.add_drawer("raw", DummyBuilder(use_real_delta_time=True))
    renderer.render(0.0, 0.25)
    assert scaled.deltas == [0.0]
    assert raw.deltas == [0.25]
    # Without a raw delta, everyone gets the same value
    renderer.render(0.1)
    assert raw.deltas[-1] == 0.1


def test_set_drawers_enabled(renderer):
    a = renderer.add_drawer("a", DummyBuilder())
    renderer.set_drawers_enabled(False)
    renderer.render(1.0)
    assert a.deltas == []
    renderer.set_drawers_enabled(True)
    renderer.render(1.0)
    assert a.deltas == [1.0]


def test_dispose_disposes_all(renderer):
    a = renderer.add_drawer("a", DummyBuilder())
    b = renderer.add_drawer("b", DummyBuilder())
    renderer.dispose()
    assert a.disposed and b.disposed
    assert len(renderer) == 0


def test_drawer_base_is_abstract():
    with pytest.raises(TypeError):
        Drawer(None, "x")


class OtherDrawer(DummyDrawer):
    pass


def test_add_drawer_binds_drawer_to_renderer(renderer):
    class UnboundBuilder(DrawerBuilder):
        def build(self, name):
            return DummyDrawer(None, name)

    drawer = renderer.add_drawer("a", UnboundBuilder())
    assert drawer.renderer is renderer


def test_place_at_start_and_end(renderer):
    a = renderer.add_drawer("a", DummyBuilder())
    b = renderer.add_drawer("b", DummyBuilder())
    c = renderer.add_drawer("c", DummyBuilder())
    renderer.place_at_start("c")
    assert list(renderer) == [c, a, b]
    renderer.place_at_end("c")
    assert list(renderer) == [a, b, c]
    renderer.place_at_end("a")
    assert list(renderer) == [b, c, a]
    # Reordering keeps name lookup intact
    assert renderer.get_drawer("a") is a
    with pytest.raises(KeyError):
        renderer.place_at_start("missing")


def test_place_at_start_changes_draw_order(renderer):
    order = []

    class OrderedDrawer(DummyDrawer):
        def draw(self, delta):
            order.append(self.name)

    class OrderedBuilder(DrawerBuilder):
        def build(self, name):
            return OrderedDrawer(self.renderer, name)

    renderer.add_drawer("back", OrderedBuilder())
    renderer.add_drawer("front", OrderedBuilder())
    renderer.place_at_start("front")
    renderer.render(0.1)
    assert order == ["front", "back"]


def test_get_drawer_checks_class(renderer):
    a = renderer.add_drawer("a", DummyBuilder())
    assert renderer.get_drawer("a", DummyDrawer) is a
    assert renderer.get_drawer("missing", DummyDrawer) is None
    # Subclasses do not match; the class must be exact
    with pytest.raises(TypeError):
        renderer.get_drawer("a", OtherDrawer)


def test_builder_use_real_time_flag():
    builder = DummyBuilder()
    assert builder.use_real_delta_time is False
    assert builder.set_use_real_time(True) is builder
    assert builder.use_real_delta_time is True
