"""
Tests for the rectangle primitives: coordinates, corners, overlap,
containment, area and the place-once rule of items.
"""

import pytest

from Rectangles import AlreadyPlacedError, FreeRect, Item, NotPlacedError, Placement


# ---------------------------------------------------------------------------
# FreeRect
# ---------------------------------------------------------------------------

def test_free_rect_creation():
    rect = FreeRect(10, 20, 5, 5, 1)
    assert rect.width == 10
    assert rect.height == 20
    assert rect.x == 5
    assert rect.y == 5
    assert rect.container_id == 1


def test_free_rect_coords_and_corners():
    rect = FreeRect(10, 20, 5, 5, 1)
    assert rect.get_coords() == (5, 15, 5, 25)
    assert rect.get_corners() == [(5, 5), (15, 5), (5, 25), (15, 25)]


def test_free_rect_overlap():
    assert FreeRect(10, 10, 0, 0, 1).overlap(FreeRect(10, 10, 5, 5, 1))


def test_free_rect_other_container_never_overlaps():
    assert not FreeRect(10, 10, 0, 0, 1).overlap(FreeRect(10, 10, 5, 5, 0))


def test_free_rect_corner_touch_is_not_overlap():
    assert not FreeRect(10, 10, 0, 0, 1).overlap(FreeRect(10, 10, 10, 10, 1))


def test_free_rect_edge_touch_is_not_overlap():
    left = FreeRect(10, 10, 0, 0, 1)
    right = FreeRect(10, 10, 10, 0, 1)
    assert not left.overlap(right)
    assert not right.overlap(left)


def test_free_rect_contains():
    assert FreeRect(10, 10, 0, 0, 1).contains(FreeRect(5, 5, 2, 2, 1))


def test_free_rect_contains_is_inclusive():
    outer = FreeRect(10, 10, 0, 0, 1)
    assert outer.contains(FreeRect(10, 10, 0, 0, 1))
    assert outer.contains(FreeRect(5, 10, 5, 0, 1))


def test_free_rect_not_contains():
    assert not FreeRect(10, 10, 0, 0, 1).contains(FreeRect(5, 5, 6, 6, 1))


def test_free_rect_other_container_never_contains():
    assert not FreeRect(10, 10, 0, 0, 1).contains(FreeRect(5, 5, 2, 2, 2))


def test_free_rect_area():
    assert FreeRect(10, 20, 5, 5, 1).area() == 200


def test_free_rect_equality():
    assert FreeRect(1, 2, 3, 4, 5) == FreeRect(1, 2, 3, 4, 5)
    assert FreeRect(1, 2, 3, 4, 5) != FreeRect(1, 2, 3, 4, 6)


# ---------------------------------------------------------------------------
# Item
# ---------------------------------------------------------------------------

def test_item_starts_unplaced():
    item = Item(5, 6)
    assert item.width == 5
    assert item.height == 6
    assert item.placement is None
    assert not item.is_placed
    assert item.container_id is None


def test_item_place(placed_item):
    assert placed_item.placement == Placement(10, 20, 1)
    assert placed_item.is_placed
    assert placed_item.container_id == 1


def test_item_coords_and_corners(placed_item):
    assert placed_item.get_coords() == (10, 15, 20, 26)
    assert placed_item.get_corners() == [(10, 20), (15, 20), (10, 26), (15, 26)]


def test_unplaced_item_has_no_coords():
    with pytest.raises(NotPlacedError):
        Item(5, 6).get_coords()


def test_item_can_only_be_placed_once(placed_item):
    with pytest.raises(AlreadyPlacedError):
        placed_item.place(0, 0, 1)
    assert placed_item.placement == Placement(10, 20, 1)


def test_item_overlap_with_free_rect(placed_item):
    assert not placed_item.overlap(FreeRect(5, 6, 12, 22, 0))
    assert placed_item.overlap(FreeRect(5, 6, 9, 19, 1))


def test_item_edge_touch_is_not_overlap(placed_item):
    assert not placed_item.overlap(FreeRect(5, 6, 15, 20, 1))
    assert not placed_item.overlap(FreeRect(5, 20, 10, 0, 1))


def test_unplaced_item_overlaps_nothing():
    assert not Item(5, 6).overlap(FreeRect(100, 100, 0, 0, 1))


def test_free_rect_never_overlaps_unplaced_item():
    # an unplaced item has no container, same as a FreeRect without one
    assert not FreeRect(100, 100, 0, 0, None).overlap(Item(5, 6))
    assert not FreeRect(100, 100, 0, 0, 1).overlap(Item(5, 6))


def test_placed_item_never_overlaps_unplaced_item():
    item = Item(5, 6)
    item.place(0, 0, None)
    assert not item.overlap(Item(5, 6))


def test_item_overlap_with_item(placed_item):
    other = Item(4, 4)
    other.place(12, 22, 1)
    assert placed_item.overlap(other)
    assert other.overlap(placed_item)


def test_item_area():
    assert Item(5, 6).area() == 30
