# Run detection over every image in a folder and write the boxes to a CSV report.
import os, time, argparse
from typing import List, Optional

import cv2
import pandas as pd
from tqdm.auto import tqdm

from ..detection.config import LARGEST_OBJECT_PARAMS, MODES, default_cascade_path, params_for_mode
from ..detection.detect_object import detect_objects_for_mode
from ..detection.rect import INVALID_RECT
from ..realtime.HaarDetector import HaarDetector
from ..utils.io import ensure_dir, load_image
from ..utils.time_measure import measure_time

IMAGE_EXTS = (".jpg", ".jpeg", ".png", ".bmp", ".tif", ".tiff", ".webp", ".pgm", ".ppm")
CSV_COLUMNS = ["image", "x", "y", "width", "height"]


def list_images(folder: str) -> List[str]:
    """
    List image files directly inside folder, sorted by name.
    :param folder: Directory to scan (not recursive).
    :return: Full paths of the files whose extension looks like an image.
    """
    if not os.path.isdir(folder):
        raise FileNotFoundError(f"Image folder not found: {folder}")
    names = sorted(n for n in os.listdir(folder) if n.lower().endswith(IMAGE_EXTS))
    return [os.path.join(folder, n) for n in names]


def detect_folder(folder: str, detector, mode: str = "largest", scaled_width: int = 320,
                  show_progress: bool = True) -> pd.DataFrame:
    """
    Detect objects in every image of a folder.
    One row per box. In "largest" mode an image without a hit still gets a row of -1
    (the INVALID_RECT convention); in "many" mode it gets no row at all.
    Unreadable files, and files OpenCV fails on, are reported and skipped.
    :param folder: Directory with the images.
    :param detector: HaarDetector or cv2.CascadeClassifier.
    :param mode: "largest" or "many", any case.
    :param scaled_width: Working width used for detection.
    :param show_progress: Show a tqdm bar.
    :return: DataFrame with columns image, x, y, width, height.
    """
    params = params_for_mode(mode)
    paths = list_images(folder)
    rows = []
    for path in tqdm(paths, desc="Detecting", leave=False, dynamic_ncols=True, disable=not show_progress):
        name = os.path.basename(path)
        try:
            img = load_image(path)
            boxes = detect_objects_for_mode(img, detector, mode, scaled_width)
        except (FileNotFoundError, cv2.error) as e:
            print(f"[batch][WARN] {name}: {e}, skipping.")
            continue
        if not boxes and params is LARGEST_OBJECT_PARAMS:
            boxes = [INVALID_RECT]
        rows.extend([name, *box] for box in boxes)
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(prog="batch_detect", description="Detect objects in a folder of images.")
    ap.add_argument("folder", help="Folder with the input images.")
    ap.add_argument("--out", default="results/detections.csv", help="CSV report path.")
    ap.add_argument("--cascade", default=default_cascade_path(), help="Haar / LBP cascade XML.")
    ap.add_argument("--mode", choices=MODES, default="many")
    ap.add_argument("--scaled-width", type=int, default=320)
    ap.add_argument("--no-progress", action="store_true")
    args = ap.parse_args(argv)

    detector = HaarDetector(args.cascade)
    t0 = time.perf_counter()
    df = detect_folder(args.folder, detector, mode=args.mode, scaled_width=args.scaled_width,
                       show_progress=not args.no_progress)
    ensure_dir(os.path.dirname(args.out))
    df.to_csv(args.out, index=False)

    found = int((df["width"] != INVALID_RECT.width).sum()) if len(df) else 0
    print(f"[batch] {found} object(s) in {df['image'].nunique() if len(df) else 0} image(s) "
          f"in {measure_time(time.perf_counter() - t0)}")
    print(f"[batch] Wrote: {args.out}")
    return df


if __name__ == '__main__':
    main()
