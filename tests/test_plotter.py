import os

import numpy as np
import plotly.graph_objs as go

from MaxRectsPacker import MaxRectsPacker
from Plotter import CONTAINER_COLOR, PackingPlotter
from Rectangles import FreeRect, Item


def packed(containers, items):
    return MaxRectsPacker(items, containers).place().placed


def test_render_raster_layout():
    bins = [FreeRect(20, 30, 0, 0, 0), FreeRect(20, 30, 0, 0, 1)]
    img = PackingPlotter(buffer=10).render_raster([], bins)

    assert img.shape == (30, 50, 3)
    assert img.dtype == np.uint8
    assert (img[:, :20] == CONTAINER_COLOR).all()
    assert (img[:, 20:30] == 0).all()
    assert (img[:, 30:] == CONTAINER_COLOR).all()


def test_render_raster_draws_items_at_their_offset():
    bins = [FreeRect(20, 30, 0, 0, 0), FreeRect(20, 30, 0, 0, 1)]
    item = Item(5, 5)
    item.place(0, 25, 1)
    img = PackingPlotter(buffer=10).render_raster([item], bins, seed=1)

    block = img[25:30, 30:35]
    assert (block == block[0, 0]).all()
    # everything else in the second container stays grey
    assert (img[0:25, 30:50] == CONTAINER_COLOR).all()
    assert (img[25:30, 35:50] == CONTAINER_COLOR).all()


def test_render_raster_no_containers():
    assert PackingPlotter().render_raster([], []).shape == (0, 0, 3)


def test_plot_single_container():
    bins = [FreeRect(10, 20, 0, 0, 0)]
    placed = packed(bins, [Item(5, 6, item_id=1), Item(4, 4, item_id=2)])
    fig = PackingPlotter().plot_single_container(bins[0], placed)

    assert isinstance(fig, go.Figure)
    # container outline + one trace per item
    assert len(fig.data) == 3
    assert "Item: 1" in fig.data[1].text


def test_plot_all_containers_writes_html(tmp_path):
    bins = [FreeRect(10, 20, 0, 0, 0), FreeRect(10, 20, 0, 0, 1)]
    placed = packed(bins, [Item(5, 6)])
    out = tmp_path / "plots"

    written = PackingPlotter().plot_all_containers(placed, bins, str(out), seed=0)

    # only the container holding an item gets its own plot
    assert [os.path.basename(p) for p in written] == ["bin_0.html", "packing.html"]
    assert all(os.path.exists(p) for p in written)
