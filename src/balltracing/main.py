# main.py
import argparse
import numpy as np
import pygame
from balltracing.geometry.world import Scene
from balltracing.renderer.raytracer import MAX_RAY_DEPTH, Renderer
from balltracing.renderer.tone_mapping import clamp_colors, reinhard_tone_mapping, to_uint8
from balltracing.renderer.image_io import save_image
from balltracing.scenes.random_balls import BALL_COUNT, random_balls_scene
from balltracing.scenes.scene_log import read_scene_log, write_scene_log

WIDTH = 1280
HEIGHT = 720
TITLE = "HEU_EASY_OPENGL"
FOV = 40.0

class Application:
    """
    Window that shows a rendered color buffer until it is closed or Escape
    is pressed. All window state lives on the instance.
    """
    def __init__(self, width: int = WIDTH, height: int = HEIGHT, title: str = TITLE,
                 tone_mapping: str = "clamp"):
        self.width = width
        self.height = height
        self.title = title
        self.tone_mapping = tone_mapping
        self.screen = None
        self.clock = None

    def init_window(self):
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.title)
        self.clock = pygame.time.Clock()

    def make_surface(self, image: np.ndarray) -> "pygame.Surface":
        """Convert a (height, width, 3) color buffer into a window-sized surface."""
        if self.tone_mapping == "reinhard":
            pixels = reinhard_tone_mapping(image)
        else:
            pixels = to_uint8(clamp_colors(image))
        # surfarray wants (width, height, 3)
        surface = pygame.surfarray.make_surface(pixels.transpose(1, 0, 2))
        if surface.get_size() != (self.width, self.height):
            surface = pygame.transform.scale(surface, (self.width, self.height))
        return surface

    def handle_events(self) -> bool:
        """Returns False once the window should close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True

    def run(self, image: np.ndarray):
        try:
            self.init_window()
            frame_surface = self.make_surface(image)
            running = True
            while running:
                self.clock.tick(30)
                running = self.handle_events()
                self.screen.fill((0, 0, 0))
                self.screen.blit(frame_surface, (0, 0))
                pygame.display.flip()
        except pygame.error as e:
            print(f"Failed to create window: {e}")
            raise
        finally:
            print("Closing window...")
            pygame.quit()

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="balltracing",
        description="Recursive Whitted-style ray tracer for scenes of spheres.")
    parser.add_argument("--width", type=int, default=WIDTH, help="image width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT, help="image height in pixels")
    parser.add_argument("--fov", type=float, default=FOV, help="vertical field of view in degrees")
    parser.add_argument("--depth", type=int, default=MAX_RAY_DEPTH, help="maximum ray recursion depth")
    parser.add_argument("--balls", type=int, default=BALL_COUNT, help="number of random balls")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the scene")
    parser.add_argument("--light", action="store_true", help="add a light source to the random scene")
    parser.add_argument("--scene-log", default=None, help="write the scene parameters to this file")
    parser.add_argument("--load-scene", default=None, help="render spheres from a scene log instead")
    parser.add_argument("--output", default=None, help="save the rendered image to this file")
    parser.add_argument("--tone-mapping", choices=("clamp", "reinhard"), default="clamp",
                        help="color mapping used for the window")
    parser.add_argument("--no-window", action="store_true", help="render without opening a window")
    parser.add_argument("--debug", action="store_true", help="print per-row render progress")
    return parser

def build_scene(args) -> Scene:
    if args.load_scene:
        spheres = read_scene_log(args.load_scene)
        print(f"Loaded {len(spheres)} spheres from {args.load_scene}")
        return Scene(spheres)
    rng = np.random.default_rng(args.seed)
    scene = random_balls_scene(args.balls, rng, with_light=args.light)
    print(f"Generated {args.balls} random balls (seed={args.seed})")
    return scene

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    scene = build_scene(args)
    if args.scene_log:
        count = write_scene_log(scene, args.scene_log)
        print(f"Wrote {count} spheres to {args.scene_log}")

    renderer = Renderer(args.width, args.height, fov=args.fov,
                        max_depth=args.depth, debug_mode=args.debug)
    image = renderer.render(scene)

    if args.output:
        save_image(image, args.output)
        print(f"Saved image to {args.output}")

    if not args.no_window:
        Application(args.width, args.height, tone_mapping=args.tone_mapping).run(image)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
