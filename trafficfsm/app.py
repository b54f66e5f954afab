"""Window showing the crossroad scene."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from trafficfsm.scene import TrafficScene


def render(canvas: Any, scene: TrafficScene) -> list[Any]:
    """Redraw the scene onto a Tk-style canvas; return the created item ids."""
    canvas.delete("all")
    ids = []
    for item in scene.items:
        px, py = item.pos
        for op in item.paint():
            r = op.rect
            x1, y1 = px + r.x, py + r.y
            coords = (x1, y1, x1 + r.width, y1 + r.height)
            draw = canvas.create_oval if op.shape == "ellipse" else canvas.create_rectangle
            ids.append(draw(*coords, fill=op.fill, outline=op.outline or ""))
    return ids


def main(argv: list[str] | None = None) -> int:
    """Open the crossroad window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="trafficfsm-gui",
        description="Show a crossroad with clickable pedestrian buttons.",
    )
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    root.title("Traffic Light FSM")
    root.geometry("800x600")
    root.rowconfigure(0, weight=1)
    root.columnconfigure(0, weight=1)

    scene = TrafficScene()
    bounds = scene.scene_rect
    canvas = tk.Canvas(
        root,
        background="white",
        scrollregion=(
            bounds.x,
            bounds.y,
            bounds.x + bounds.width,
            bounds.y + bounds.height,
        ),
    )
    xbar = tk.Scrollbar(root, orient=tk.HORIZONTAL, command=canvas.xview)
    ybar = tk.Scrollbar(root, orient=tk.VERTICAL, command=canvas.yview)
    canvas.configure(xscrollcommand=xbar.set, yscrollcommand=ybar.set)
    canvas.grid(row=0, column=0, sticky="nsew")
    ybar.grid(row=0, column=1, sticky="ns")
    xbar.grid(row=1, column=0, sticky="ew")

    def on_click(event: Any) -> None:
        if scene.click(canvas.canvasx(event.x), canvas.canvasy(event.y)):
            render(canvas, scene)

    canvas.bind("<Button-1>", on_click)
    render(canvas, scene)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())