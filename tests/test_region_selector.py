import pytest

from depth_inspector.algos import (
    InspectionPoint,
    PointerEventKind,
    PreconditionError,
    RegionSelector,
)

MOVE = PointerEventKind.MOVE
DOWN = PointerEventKind.DOWN
OTHER = PointerEventKind.OTHER


def test_initial_state():
    state = RegionSelector(3).state

    assert state.point == InspectionPoint(0, 0)
    assert state.radius == 3
    assert not state.visible
    assert not state.pinned


def test_default_radius_is_three():
    assert RegionSelector().radius == 3


@pytest.mark.parametrize("radius", [-1, 1.5, "3", None, True])
def test_invalid_radius_rejected(radius):
    with pytest.raises(PreconditionError):
        RegionSelector(radius)


def test_zero_radius_allowed():
    assert RegionSelector(0).radius == 0


def test_move_follows_pointer_while_hovering():
    selector = RegionSelector(2)
    for x, y in [(10, 10), (11, 40), (300, 7)]:
        selector.handle_pointer_event(MOVE, x, y)
        assert selector.state.point == InspectionPoint(x, y)
    assert not selector.state.pinned


def test_other_events_are_ignored():
    selector = RegionSelector(2)
    selector.handle_pointer_event(OTHER, 50, 60)

    state = selector.state
    assert not state.visible
    assert state.point == InspectionPoint(0, 0)


def test_visibility_latches_on_first_event():
    selector = RegionSelector(2)
    selector.handle_pointer_event(MOVE, 5, 5)
    assert selector.state.visible

    selector.handle_pointer_event(OTHER, 0, 0)
    selector.handle_pointer_event(DOWN, 5, 5)
    selector.handle_pointer_event(DOWN, 5, 5)
    assert selector.state.visible


def test_down_is_enough_to_become_visible():
    selector = RegionSelector(2)
    selector.handle_pointer_event(DOWN, 5, 5)
    assert selector.state.visible


def test_click_pins_at_click_location():
    selector = RegionSelector(3)
    selector.handle_pointer_event(MOVE, 10, 10)
    selector.handle_pointer_event(DOWN, 20, 30)

    state = selector.state
    assert state.pinned
    assert state.point == InspectionPoint(20, 30)


def test_move_is_ignored_while_pinned():
    selector = RegionSelector(3)
    selector.handle_pointer_event(DOWN, 20, 30)
    selector.handle_pointer_event(MOVE, 100, 100)

    assert selector.state.point == InspectionPoint(20, 30)


@pytest.mark.parametrize("x, y", [(20, 30), (17, 27), (23, 33), (17, 33), (23, 27)])
def test_click_inside_pinned_region_unpins_without_moving(x, y):
    selector = RegionSelector(3)
    selector.handle_pointer_event(DOWN, 20, 30)
    selector.handle_pointer_event(DOWN, x, y)

    state = selector.state
    assert not state.pinned
    assert state.point == InspectionPoint(20, 30)


@pytest.mark.parametrize("x, y", [(16, 30), (24, 30), (20, 26), (20, 34), (0, 0)])
def test_click_outside_pinned_region_repins(x, y):
    selector = RegionSelector(3)
    selector.handle_pointer_event(DOWN, 20, 30)
    selector.handle_pointer_event(DOWN, x, y)

    state = selector.state
    assert state.pinned
    assert state.point == InspectionPoint(x, y)


def test_hover_resumes_after_unpin():
    selector = RegionSelector(1)
    selector.handle_pointer_event(DOWN, 20, 30)
    selector.handle_pointer_event(DOWN, 21, 29)
    selector.handle_pointer_event(MOVE, 5, 6)

    assert selector.state.point == InspectionPoint(5, 6)


def test_zero_radius_only_the_point_itself_unpins():
    selector = RegionSelector(0)
    selector.handle_pointer_event(DOWN, 10, 10)
    selector.handle_pointer_event(DOWN, 11, 10)
    assert selector.state.pinned
    assert selector.state.point == InspectionPoint(11, 10)

    selector.handle_pointer_event(DOWN, 11, 10)
    assert not selector.state.pinned


def test_state_is_a_snapshot():
    selector = RegionSelector(2)
    before = selector.state
    selector.handle_pointer_event(MOVE, 9, 9)

    assert before.point == InspectionPoint(0, 0)
    assert not before.visible


def test_state_contains_is_inclusive():
    selector = RegionSelector(2)
    selector.handle_pointer_event(MOVE, 10, 10)
    state = selector.state

    assert state.contains(8, 12)
    assert state.contains(12, 8)
    assert not state.contains(7, 10)
    assert not state.contains(10, 13)
