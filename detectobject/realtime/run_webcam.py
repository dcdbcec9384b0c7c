# Run the webcam viewer with fixed defaults (no argparse).
from ..detection.config import default_cascade_path, with_overrides
from .app import run_webcam

# ======= Defaults you can tweak =======
CASCADE_PATH = default_cascade_path("haarcascade_frontalface_default.xml")
MODE = "many"  # 'largest' or 'many'
SCALED_WIDTH = 320  # frames are shrunk to this width before detection
CAMERA_INDEX = 0  # 0 = default camera
DETECT_EVERY_N = 2  # run detector every N frames for speed

# ======================================


def main():
    run_webcam(with_overrides(
        cascade_path=CASCADE_PATH,
        mode=MODE,
        scaled_width=SCALED_WIDTH,
        camera_index=CAMERA_INDEX,
        detect_every_n=DETECT_EVERY_N,
    ))


if __name__ == '__main__':
    main()
