import cv2
from typing import List, Optional
import tkinter as tk
from PIL import Image, ImageTk

from ..detection.config import MODES, DetectConfig, default_config
from ..detection.detect_object import CascadeLike, detect_objects_for_mode
from ..detection.rect import Rect
from ..realtime.HaarDetector import HaarDetector
from ..utils.viz import draw_boxes_with_labels


def detect_frame(detector: CascadeLike, frame, mode: str, scaled_width: int) -> List[Rect]:
    """
    Run one detection pass on a camera frame.
    :param detector: Loaded HaarDetector (or a raw cv2.CascadeClassifier).
    :param frame: BGR frame.
    :param mode: "largest" or "many", any case.
    :param scaled_width: Working width for detection.
    :return: Boxes to draw; the largest mode yields at most one.
    """
    return detect_objects_for_mode(frame, detector, mode, scaled_width)


def run_webcam(config: Optional[DetectConfig] = None) -> None:
    """
    Tkinter window showing the camera feed with the detected boxes drawn on top.
    Escape or 'q' closes it.
    """
    cfg = config or default_config()
    if cfg.mode.lower() not in MODES:
        raise ValueError(f"Unknown detection mode: {cfg.mode}")
    detector = HaarDetector(cfg.cascade_path)

    cap = cv2.VideoCapture(cfg.camera_index)
    if not cap.isOpened():
        raise RuntimeError("Could not open camera.")

    root = tk.Tk()
    root.title(cfg.window_title)
    video_label = tk.Label(root)
    video_label.pack()

    # state carried between frames
    frame_i = 0
    cached_boxes: List[Rect] = []
    running = True

    def on_close():
        nonlocal running
        running = False
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)
    root.bind("<Escape>", lambda e: on_close())
    root.bind("<q>", lambda e: on_close())

    def update_frame():
        nonlocal frame_i, cached_boxes
        if not running:
            return

        ok, frame = cap.read()
        if not ok:
            print("[webcam] Camera stopped delivering frames.")
            on_close()
            return

        # Re-run detector every Nth frame; cache between runs
        if frame_i % cfg.detect_every_n == 0:
            cached_boxes = detect_frame(detector, frame, cfg.mode, cfg.scaled_width)

        draw_boxes_with_labels(frame, cached_boxes, thickness=cfg.box_thickness)

        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        imgtk = ImageTk.PhotoImage(image=Image.fromarray(rgb))
        video_label.imgtk = imgtk  # keep a reference, Tk doesn't
        video_label.configure(image=imgtk)

        frame_i += 1
        root.after(10, update_frame)

    update_frame()
    try:
        root.mainloop()
    finally:
        cap.release()
