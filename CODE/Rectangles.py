from collections import namedtuple

# --------------------------------
# 1) Errors
# --------------------------------

class NotPlacedError(Exception):
    """Raised when an unplaced item is asked for its coordinates."""


class AlreadyPlacedError(Exception):
    """Raised when an item that already has a placement is placed again."""


# --------------------------------
# 2) Basic Data Structures
# --------------------------------

# Where an item ended up: top-left origin inside a container.
Placement = namedtuple("Placement", ["x", "y", "container_id"])


def _corners_from_coords(coords):
    left, right, top, bottom = coords
    return [(left, top), (right, top), (left, bottom), (right, bottom)]


def _strict_overlap(corners_a, corners_b):
    # corners[1] is (right, top), corners[2] is (left, bottom)
    return not (
        corners_a[1][0] <= corners_b[2][0]
        or corners_a[2][0] >= corners_b[1][0]
        or corners_a[1][1] >= corners_b[2][1]
        or corners_a[2][1] <= corners_b[1][1]
    )


class FreeRect:
    """
    A free rectangular region of a container, defined by (x, y, width, height)
    and the id of the container it belongs to.
    A whole, empty container is just its initial FreeRect.
    """
    def __init__(self, width, height, x, y, container_id):
        self.width = width
        self.height = height
        self.x = x
        self.y = y
        self.container_id = container_id

    def get_coords(self):
        """
        Return (left, right, top, bottom).
        """
        return (self.x, self.x + self.width, self.y, self.y + self.height)

    def get_corners(self):
        return _corners_from_coords(self.get_coords())

    def overlap(self, other):
        """
        True if the interiors of both rectangles intersect.
        Rectangles in different containers never overlap, and rectangles
        that only share an edge do not overlap either. Unplaced items
        overlap nothing.
        """
        if isinstance(other, Item) and not other.is_placed:
            return False
        if self.container_id != other.container_id:
            return False
        return _strict_overlap(self.get_corners(), other.get_corners())

    def contains(self, other):
        """
        True if 'other' lies completely inside this rectangle (edges included).
        """
        if self.container_id != other.container_id:
            return False
        left, right, top, bottom = self.get_coords()
        o_left, o_right, o_top, o_bottom = other.get_coords()
        return (
            left <= o_left
            and o_right <= right
            and top <= o_top
            and o_bottom <= bottom
        )

    def area(self):
        return self.width * self.height

    def __eq__(self, other):
        if not isinstance(other, FreeRect):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.x == other.x
            and self.y == other.y
            and self.container_id == other.container_id
        )

    def __hash__(self):
        return hash((self.width, self.height, self.x, self.y, self.container_id))

    def __repr__(self):
        return (f"<FreeRect bin={self.container_id} x={self.x} y={self.y} "
                f"w={self.width} h={self.height}>")


class Item:
    """
    A rectangle waiting to be packed. Width and height are fixed; the
    placement is None until the packer places it, and it is set only once.
    """
    def __init__(self, width, height, item_id=None):
        self.item_id = item_id
        self.width = width
        self.height = height
        self.placement = None

    @property
    def is_placed(self):
        return self.placement is not None

    @property
    def container_id(self):
        if self.placement is None:
            return None
        return self.placement.container_id

    def place(self, x, y, container_id):
        """
        Record the item at (x, y) inside 'container_id'.
        """
        if self.placement is not None:
            raise AlreadyPlacedError(
                f"{self!r} is already placed in bin {self.placement.container_id}"
            )
        self.placement = Placement(x, y, container_id)

    def get_coords(self):
        """
        Return (left, right, top, bottom) of the placed item.
        Asking an unplaced item is a programming error.
        """
        if self.placement is None:
            raise NotPlacedError(f"{self!r} has no coordinates, it was never placed")
        x, y, _ = self.placement
        return (x, x + self.width, y, y + self.height)

    def get_corners(self):
        return _corners_from_coords(self.get_coords())

    def overlap(self, other):
        """
        True if this placed item and 'other' (a FreeRect or another placed
        item) intersect inside the same container. Unplaced items overlap
        nothing.
        """
        if self.placement is None or self.container_id != other.container_id:
            return False
        if isinstance(other, Item) and not other.is_placed:
            return False
        return _strict_overlap(self.get_corners(), other.get_corners())

    def area(self):
        return self.width * self.height

    def __repr__(self):
        label = "" if self.item_id is None else f"id={self.item_id} "
        if self.placement is None:
            return f"<Item {label}w={self.width} h={self.height} unplaced>"
        x, y, container_id = self.placement
        return (f"<Item {label}w={self.width} h={self.height} "
                f"bin={container_id} x={x} y={y}>")
