import argparse
import logging
import threading
import time

import cv2

from jotter import config
from jotter.core.canvas import GridCanvas
from jotter.core.classifier import StrokeClassifier
from jotter.core.contour import ContourClassifier
from jotter.core.heuristics import HeuristicClassifier
from jotter.core.hud import HUDMessage
from jotter.core.ledger import Reconciler
from jotter.core.session import StrokeSession

logger = logging.getLogger("jotter")

WINDOW_NAME = "Jotter"


def build_session(width, height, use_contour=True, background_load=True):
    """Wire canvas, classifiers and reconciler together."""
    canvas = GridCanvas(width=width, height=height)
    canvas.draw_grid()

    contour = ContourClassifier(load=False)
    if not use_contour:
        contour.enabled = False
    elif background_load:
        # Strokes drawn before this finishes use the heuristic tier only
        threading.Thread(target=contour.load, name="contour-load", daemon=True).start()
    else:
        contour.load()

    classifier = StrokeClassifier(heuristic=HeuristicClassifier(), contour=contour)
    return StrokeSession(canvas, classifier=classifier, reconciler=Reconciler(canvas))


def make_mouse_handler(session, hud):
    canvas = session.surface

    def inside(x, y):
        return 0 <= x < canvas.width and 0 <= y < canvas.height

    def on_mouse(event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            session.on_stroke_start((x, y))
        elif event == cv2.EVENT_MOUSEMOVE and session.drawing:
            if not inside(x, y):
                # left the canvas: cancel the stroke
                session.on_stroke_abandoned()
                return
            session.on_stroke_point((x, y))
        elif event == cv2.EVENT_LBUTTONUP and session.drawing:
            shape = session.on_stroke_end()
            if shape is not None and shape.recognized:
                hud.show(shape.type.capitalize())

    return on_mouse


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Sketch on a grid; strokes snap to shapes.")
    parser.add_argument("--width", type=int, default=config.CANVAS_WIDTH)
    parser.add_argument("--height", type=int, default=config.CANVAS_HEIGHT)
    parser.add_argument("--no-contour", action="store_true",
                        help="classify with the heuristic tier only")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    session = build_session(args.width, args.height, use_contour=not args.no_contour)
    hud = HUDMessage()

    cv2.namedWindow(WINDOW_NAME)
    cv2.setMouseCallback(WINDOW_NAME, make_mouse_handler(session, hud))
    print("Jotter ready - draw with the left mouse button. C = clear, S = save, Q = quit")

    while True:
        frame = hud.draw(session.surface.image.copy())
        cv2.imshow(WINDOW_NAME, frame)

        key = cv2.waitKey(15) & 0xFF
        if key in (ord('q'), 27):
            break
        elif key == ord('c'):
            session.reset()
            hud.show("Cleared")
        elif key == ord('s'):
            filename = "jotter_%d.png" % int(time.time())
            saved_path = session.surface.save(filename)
            logger.info("Saved drawing to %s", saved_path)
            hud.show("Saved")

    cv2.destroyAllWindows()


if __name__ == "__main__":
    main()
