import logging
import os

import numpy as np
import pandas as pd

from Rectangles import FreeRect, Item

log = logging.getLogger(__name__)


def packed_percentage(placed_items, containers):
    """
    Share of the total container area covered by the placed items, in percent.
    Returns 0.0 when there is no container area at all.
    """
    total_container_area = sum(c.area() for c in containers)
    if total_container_area == 0:
        return 0.0

    total_item_area = sum(it.area() for it in placed_items)
    return 100.0 * total_item_area / total_container_area


def build_containers(count, width, height):
    """
    'count' empty containers of the same size, ids 0..count-1.
    """
    return [FreeRect(width, height, 0, 0, container_id) for container_id in range(count)]


def generate_random_items(count, min_side, max_side, seed=None):
    """
    'count' items whose sides are random integers in [min_side, max_side].
    """
    rng = np.random.default_rng(seed)
    sides = rng.integers(min_side, max_side, size=(count, 2), endpoint=True)
    return [
        Item(width=int(w), height=int(h), item_id=idx)
        for idx, (w, h) in enumerate(sides, start=1)
    ]


def load_items_from_csv(csv_path):
    """
    Read items from a CSV file with columns W and H.
    Optional columns: ITEM (label) and CANTIDAD (how many copies of the row).
    """
    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    df = pd.read_csv(csv_path)
    df.columns = df.columns.str.strip()
    missing = [col for col in ("W", "H") if col not in df.columns]
    if missing:
        raise ValueError(f"{csv_path}: missing column(s) {', '.join(missing)}")

    items = []
    for row_num, row in df.iterrows():
        w = int(row['W'])
        h = int(row['H'])
        item_id = row['ITEM'] if 'ITEM' in df.columns else row_num + 1
        quantity = int(row['CANTIDAD']) if 'CANTIDAD' in df.columns else 1

        for _ in range(quantity):
            items.append(Item(width=w, height=h, item_id=item_id))

    log.info("Loaded %d items from %s", len(items), csv_path)
    return items


def placements_dataframe(placed_items):
    """
    Returns DataFrame with columns:
      [CONTAINER_ID, ITEM_ID, x0, y0, x1, y1, AREA]
    one row per placed item, in placement order.
    """
    records = []
    for item in placed_items:
        x0, x1, y0, y1 = item.get_coords()
        records.append({
            "CONTAINER_ID": item.container_id,
            "ITEM_ID":      item.item_id,
            "x0":           x0,
            "y0":           y0,
            "x1":           x1,
            "y1":           y1,
            "AREA":         item.area(),
        })
    return pd.DataFrame(
        records,
        columns=["CONTAINER_ID", "ITEM_ID", "x0", "y0", "x1", "y1", "AREA"],
    )


def free_rects_dataframe(free_rects):
    """
    Returns DataFrame with columns:
      [CONTAINER_ID, x0, y0, x1, y1, AREA]
    """
    records = []
    for rect in free_rects:
        x0, x1, y0, y1 = rect.get_coords()
        records.append({
            "CONTAINER_ID": rect.container_id,
            "x0":           x0,
            "y0":           y0,
            "x1":           x1,
            "y1":           y1,
            "AREA":         rect.area(),
        })
    return pd.DataFrame(
        records,
        columns=["CONTAINER_ID", "x0", "y0", "x1", "y1", "AREA"],
    )
