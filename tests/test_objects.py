import pytest

from siegeengine.objects import Control, GameObject, Group, Scene
from siegeengine.point import Point


class Recorder(GameObject):
    def __init__(self, name, log):
        super().__init__()
        self.name = name
        self.log = log

    def update(self, delta_time):
        self.log.append(("update", self.name, delta_time))

    def draw(self, surface):
        self.log.append(("draw", self.name))


class Button(GameObject, Control):
    def __init__(self, name, log):
        super().__init__()
        self.name = name
        self.log = log

    def on_key_down(self, key_code):
        self.log.append(("key_down", self.name, key_code))

    def on_key_up(self, key_code):
        self.log.append(("key_up", self.name, key_code))

    def on_mouse_down(self, button, mx, my):
        self.log.append(("mouse_down", self.name, button, mx, my))

    def on_mouse_up(self, button, mx, my):
        self.log.append(("mouse_up", self.name, button, mx, my))

    def on_mouse_move(self, mx, my):
        self.log.append(("mouse_move", self.name, mx, my))

    def on_mouse_scroll(self, mx, my, delta):
        self.log.append(("scroll", self.name, mx, my, delta))


class SelfRemover(GameObject):
    def __init__(self, group, log):
        super().__init__()
        self.group = group
        self.log = log

    def update(self, delta_time):
        self.log.append("removed")
        self.group.remove_object(self)


class FakeSurface:
    def __init__(self):
        self.fills = []

    def fill(self, color):
        self.fills.append(color)


class DemoScene(Scene):
    def __init__(self, log):
        super().__init__()
        self.log = log

    def initialize(self):
        self.add_object(Recorder("a", self.log))


def test_game_object_geometry():
    obj = GameObject(1, 2, 3, 4, 0.5, 1)
    assert obj.position == Point(1, 2)
    assert obj.size == Point(3, 4)
    assert obj.anchor == Point(0.5, 1)
    assert obj.visible is True


def test_update_and_draw_go_to_visible_objects_in_order():
    log = []
    group = Group()
    a, b, c = Recorder("a", log), Recorder("b", log), Recorder("c", log)
    for obj in (a, b, c):
        group.add_object(obj)
    b.visible = False
    group.update(0.5)
    group.draw(None)
    assert [obj.name for obj in group.objects()] == ["a", "b", "c"]
    assert log == [("update", "a", 0.5), ("update", "c", 0.5), ("draw", "a"), ("draw", "c")]


def test_insert_object_before():
    group = Group()
    a, b, c = GameObject(), GameObject(), GameObject()
    group.add_object(a)
    group.add_object(c)
    group.insert_object(b, c)
    assert group.objects() == [a, b, c]


def test_insert_before_missing_raises():
    group = Group()
    with pytest.raises(ValueError):
        group.insert_object(GameObject(), GameObject())


def test_remove_object_uses_identity():
    group = Group()
    a, b = GameObject(), GameObject()
    group.add_object(a)
    group.add_object(b)
    group.remove_object(b)
    assert group.objects() == [a]
    assert group.objects()[0] is a
    with pytest.raises(ValueError):
        group.remove_object(b)


def test_control_object_goes_in_both_lists_and_removed_from_both():
    log = []
    group = Group()
    button = Button("btn", log)
    group.add_control_object(button)
    assert group.objects() == [button]
    assert group.controls() == [button]
    group.remove_control_object(button)
    assert group.objects() == []
    assert group.controls() == []


def test_add_control_object_requires_game_object():
    group = Group()
    with pytest.raises(TypeError):
        group.add_control_object(Control())


def test_events_reach_every_control():
    log = []
    group = Group()
    first, second = Button("x", log), Button("y", log)
    group.add_control(first)
    group.add_control(second)
    group.on_key_down(7)
    group.on_key_up(8)
    group.on_mouse_down(1, 2, 3)
    group.on_mouse_up(1, 4, 5)
    group.on_mouse_move(6, 9)
    group.on_mouse_scroll(1, 1, -1)
    assert [ctrl.name for ctrl in group.controls()] == ["x", "y"]
    assert log == [
        ("key_down", "x", 7), ("key_down", "y", 7),
        ("key_up", "x", 8), ("key_up", "y", 8),
        ("mouse_down", "x", 1, 2, 3), ("mouse_down", "y", 1, 2, 3),
        ("mouse_up", "x", 1, 4, 5), ("mouse_up", "y", 1, 4, 5),
        ("mouse_move", "x", 6, 9), ("mouse_move", "y", 6, 9),
        ("scroll", "x", 1, 1, -1), ("scroll", "y", 1, 1, -1),
    ]


def test_child_may_remove_itself_during_update():
    log = []
    group = Group()
    remover = SelfRemover(group, log)
    after = Recorder("after", log)
    group.add_object(remover)
    group.add_object(after)
    group.update(1.0)
    assert log == ["removed", ("update", "after", 1.0)]
    assert group.objects() == [after]


def test_nested_groups_delegate():
    log = []
    outer, inner = Group(), Group()
    inner.add_object(Recorder("leaf", log))
    outer.add_control_object(inner)
    outer.update(0.25)
    assert log == [("update", "leaf", 0.25)]
    inner.visible = False
    outer.update(0.25)
    assert len(log) == 1


def test_clear_empties_group():
    group = Group()
    group.add_object(GameObject())
    group.add_control(Control())
    group.clear()
    assert group.objects() == []
    assert group.controls() == []


def test_objects_returns_a_copy():
    group = Group()
    group.add_object(GameObject())
    snapshot = group.objects()
    snapshot.clear()
    assert len(group.objects()) == 1


def test_scene_draw_clears_to_black_then_draws():
    log = []
    scene = DemoScene(log)
    scene.initialize()
    surface = FakeSurface()
    Scene.draw(scene, surface)
    assert len(Scene.objects(scene)) == 1
    assert surface.fills == [(0, 0, 0)]
    assert log == [("draw", "a")]


def test_scene_terminate_removes_children():
    scene = DemoScene([])
    scene.initialize()
    assert len(Scene.objects(scene)) == 1
    Scene.terminate(scene)
    assert Scene.objects(scene) == []
    assert Scene.controls(scene) == []


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene()