# Detect objects in a single image and optionally save an annotated copy.
import argparse, time
from typing import List, Optional

from ..detection.config import MODES, default_cascade_path
from ..detection.rect import INVALID_RECT
from .HaarDetector import HaarDetector
from ..utils.io import load_image, save_image
from ..utils.viz import draw_boxes_with_labels, to_bgr


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(prog="detect_image", description="Detect objects in one image.")
    ap.add_argument("image", help="Input image path.")
    ap.add_argument("--cascade", default=default_cascade_path(), help="Haar / LBP cascade XML.")
    ap.add_argument("--mode", choices=MODES, default="largest")
    ap.add_argument("--scaled-width", type=int, default=320,
                    help="Width the image is shrunk to before detection.")
    ap.add_argument("--out", default=None, help="Where to save the annotated image (optional).")
    args = ap.parse_args(argv)

    img = load_image(args.image)
    detector = HaarDetector(args.cascade)

    t0 = time.perf_counter()
    if args.mode == "largest":
        rect = detector.largest(img, args.scaled_width)
        boxes = [rect] if rect != INVALID_RECT else []
    else:
        boxes = detector.many(img, args.scaled_width)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    print(f"[detect] {len(boxes)} object(s) in {args.image} ({elapsed_ms:.1f} ms)")
    for i, r in enumerate(boxes):
        print(f"[detect] #{i}: x={r.x} y={r.y} w={r.width} h={r.height}")

    if args.out:
        vis = draw_boxes_with_labels(to_bgr(img), boxes, [f"#{i}" for i in range(len(boxes))])
        save_image(args.out, vis)
        print(f"[detect] Wrote: {args.out}")
    return boxes


if __name__ == '__main__':
    main()
