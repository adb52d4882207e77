# plotter.py

import logging
import os

import numpy as np
import plotly.graph_objs as go
import plotly.offline as pyo

log = logging.getLogger(__name__)

CONTAINER_COLOR = (200, 200, 200)


class PackingPlotter:
    """
    Draws a multi-container 2D packing solution.

    Two outputs:
      - a raster image (numpy RGB array) with every container side by side
        and each placed item as a colored block at its recorded offset
      - interactive plotly figures, one per container, with hover info
    """

    def __init__(self, buffer=10):
        # pixels between two containers in the raster
        self.buffer = buffer
        self.color_palette = [
            "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
            "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf"
        ]

    def get_color_for_item(self, index):
        return self.color_palette[index % len(self.color_palette)]

    def render_raster(self, placed_items, containers, seed=None):
        """
        Returns a uint8 array of shape (height, width, 3).
        Containers are laid out left to right in the given order, each
        drawn in light grey; every placed item gets a random color.
        """
        if not containers:
            return np.zeros((0, 0, 3), dtype=np.uint8)

        rng = np.random.default_rng(seed)
        max_w = max(c.width for c in containers)
        max_h = max(c.height for c in containers)
        width = len(containers) * (max_w + self.buffer) - self.buffer
        img = np.zeros((max_h, width, 3), dtype=np.uint8)

        for i, container in enumerate(containers):
            x_offset = i * (max_w + self.buffer)
            img[0:container.height, x_offset:x_offset + container.width] = CONTAINER_COLOR

            for item in placed_items:
                if item.container_id != container.container_id:
                    continue
                x0, x1, y0, y1 = item.get_coords()
                # coordinates are relative to the container origin
                x0 -= container.x
                x1 -= container.x
                y0 -= container.y
                y1 -= container.y
                color = rng.integers(0, 255, size=3, endpoint=True, dtype=np.uint8)
                img[y0:y1, x_offset + x0:x_offset + x1] = color

        return img

    def plot_raster(self, placed_items, containers, title="MaxRects Packing", seed=None):
        img = self.render_raster(placed_items, containers, seed=seed)
        fig = go.Figure(data=[go.Image(z=img)])
        fig.update_layout(title=title)
        return fig

    def _make_rectangle(self, x0, x1, y0, y1, color, name, hover_text=None, fill=True):
        """
        A closed rectangle outline as a Scatter trace, optionally filled.
        """
        return go.Scatter(
            x=[x0, x1, x1, x0, x0],
            y=[y0, y0, y1, y1, y0],
            mode='lines',
            line=dict(color=color, width=2),
            fill='toself' if fill else 'none',
            opacity=0.6 if fill else 1.0,
            name=name,
            hoverinfo='text' if hover_text else 'none',
            text=hover_text,
        )

    def plot_single_container(self, container, placed_items, title=None):
        """
        Plots one container with the items placed in it.
        """
        x0, x1, y0, y1 = container.get_coords()
        data_traces = [
            self._make_rectangle(x0, x1, y0, y1, color='black',
                                 name='Bin', fill=False)
        ]

        in_container = [it for it in placed_items
                        if it.container_id == container.container_id]
        for idx, item in enumerate(in_container):
            ix0, ix1, iy0, iy1 = item.get_coords()
            hover_txt = (
                f"Item: {item.item_id}<br>"
                f"Size: {item.width} x {item.height}<br>"
                f"Origin: ({ix0}, {iy0})"
            )
            data_traces.append(self._make_rectangle(
                ix0, ix1, iy0, iy1,
                color=self.get_color_for_item(idx),
                name=f"Item {item.item_id}",
                hover_text=hover_txt,
            ))

        layout = go.Layout(
            title=title or f"Bin {container.container_id} - 2D Packing",
            xaxis=dict(title='Width'),
            # image convention: y grows downwards
            yaxis=dict(title='Height', autorange='reversed',
                       scaleanchor='x', scaleratio=1),
            showlegend=False,
        )
        return go.Figure(data=data_traces, layout=layout)

    def plot_all_containers(self, placed_items, containers, output_folder, seed=None):
        """
        Writes one HTML file per container that received items, plus
        'packing.html' with the raster overview. Returns the written paths.
        """
        if not os.path.exists(output_folder):
            os.makedirs(output_folder)

        written = []
        used_ids = {it.container_id for it in placed_items}
        for container in containers:
            if container.container_id not in used_ids:
                continue
            fig = self.plot_single_container(container, placed_items)
            filename = os.path.join(output_folder, f"bin_{container.container_id}.html")
            pyo.plot(fig, filename=filename, auto_open=False)
            log.info("Saved plot for Bin %s => %s", container.container_id, filename)
            written.append(filename)

        if not containers:
            return written

        overview = os.path.join(output_folder, "packing.html")
        pyo.plot(self.plot_raster(placed_items, containers, seed=seed),
                 filename=overview, auto_open=False)
        log.info("Saved packing overview => %s", overview)
        written.append(overview)
        return written
