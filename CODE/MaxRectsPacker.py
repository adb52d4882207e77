import logging
from collections import namedtuple

import numpy as np

from Rectangles import FreeRect

log = logging.getLogger(__name__)

# placed, unplaced and free_rects are tuples; placed keeps placement order.
PackingResult = namedtuple("PackingResult", ["placed", "unplaced", "free_rects"])


# --------------------------------
# 1) Free-space bookkeeping
# --------------------------------

def _keep(rect):
    return rect.width > 0 and rect.height > 0


def split_used_rectangle(rect, item):
    """
    Leftovers of 'rect' after 'item' was placed in its lower-left corner:
    the strip to the RIGHT of the item (full height) and the strip ABOVE it
    (full width). The two strips overlap each other in the top-right corner.
    """
    right = FreeRect(
        width=rect.width - item.width,
        height=rect.height,
        x=rect.x + item.width,
        y=rect.y,
        container_id=rect.container_id,
    )
    above = FreeRect(
        width=rect.width,
        height=rect.height - item.height,
        x=rect.x,
        y=rect.y,
        container_id=rect.container_id,
    )
    return [r for r in (right, above) if _keep(r)]


def split_around_item(rect, item):
    """
    Cut the placed 'item' out of an overlapping 'rect'. Returns the maximal
    pieces of 'rect' left of, above, right of and below the item.
    """
    left, right, top, bottom = rect.get_coords()
    i_left, i_right, i_top, i_bottom = item.get_coords()
    cid = rect.container_id

    pieces = [
        FreeRect(i_left - left, rect.height, left, top, cid),
        FreeRect(rect.width, i_top - top, left, top, cid),
        FreeRect(right - i_right, rect.height, i_right, top, cid),
        FreeRect(rect.width, bottom - i_bottom, left, i_bottom, cid),
    ]
    return [p for p in pieces if _keep(p)]


def prune_contained(free_rects):
    """
    Keep only maximal rectangles: drop every rectangle that lies inside
    another one. Of two identical rectangles the first is kept.
    """
    dropped = [False] * len(free_rects)
    for i, outer in enumerate(free_rects):
        for j, inner in enumerate(free_rects):
            if i == j or dropped[j]:
                continue
            if outer.contains(inner):
                if inner.contains(outer) and j < i:
                    continue
                dropped[j] = True
    return [r for r, gone in zip(free_rects, dropped) if not gone]


# --------------------------------
# 2) Packer
# --------------------------------

class MaxRectsPacker:
    """
    Greedy MaxRects packer over several containers.

    Keeps every maximal free rectangle of every container. Each round the
    (item, free rectangle) pair with the smallest short-side leftover is
    placed, its rectangle is split, free rectangles crossing the item are
    cut around it and non-maximal ones are discarded. Packing stops the
    first round nothing fits.
    """
    def __init__(self, items, free_rects):
        self.items = list(items)
        self.free_rects = list(free_rects)

    def _best_fit(self):
        """
        Score all items against all free rectangles at once and return
        (item_idx, rect_idx, score) of the tightest fit, or None.
        Ties go to the lowest rectangle index, then the lowest item index.
        """
        if not self.items or not self.free_rects:
            return None

        # read-only snapshot of the current state; sizes keep their own
        # dtype so integer fit checks stay exact
        item_w = np.array([it.width for it in self.items])
        item_h = np.array([it.height for it in self.items])
        rect_w = np.array([r.width for r in self.free_rects])
        rect_h = np.array([r.height for r in self.free_rects])

        # shape (rects, items)
        spare_w = rect_w[:, None] - item_w[None, :]
        spare_h = rect_h[:, None] - item_h[None, :]
        valid = (item_w > 0) & (item_h > 0)
        fits = (spare_w >= 0) & (spare_h >= 0) & valid[None, :]
        if not fits.any():
            return None

        scores = np.minimum(spare_w, spare_h)
        best = scores[fits].min()
        # flatnonzero is row-major: lowest rect index first, then lowest item
        first = np.flatnonzero(fits & (scores == best))[0]
        rect_idx, item_idx = np.unravel_index(first, scores.shape)
        return int(item_idx), int(rect_idx), best

    def _cut_overlaps(self, item):
        kept = []
        pieces = []
        for rect in self.free_rects:
            if item.overlap(rect):
                pieces.extend(split_around_item(rect, item))
            else:
                kept.append(rect)
        return kept + pieces

    def place(self):
        """
        Place items until none of the remaining ones fits anywhere.

        Returns a PackingResult (placed, unplaced, free_rects):
          - placed items in the order they were placed
          - items that could not be placed
          - the maximal free rectangles left in the containers
        """
        placed = []
        total = len(self.items)

        while True:
            best = self._best_fit()
            if best is None:
                break
            item_idx, rect_idx, score = best

            item = self.items.pop(item_idx)
            rect = self.free_rects.pop(rect_idx)

            # flush left, resting on the bottom edge of the rectangle
            item.place(
                rect.x,
                rect.y + rect.height - item.height,
                rect.container_id,
            )
            placed.append(item)
            log.debug("Placed %r into %r (score=%s)", item, rect, score)

            self.free_rects.extend(split_used_rectangle(rect, item))
            self.free_rects = self._cut_overlaps(item)
            self.free_rects = prune_contained(self.free_rects)

        log.info(
            "Packing round done: %d of %d items placed, %d unplaced, %d free rectangles",
            len(placed), total, len(self.items), len(self.free_rects),
        )
        return PackingResult(tuple(placed), tuple(self.items), tuple(self.free_rects))
