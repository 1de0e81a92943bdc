# main.py
import argparse
import sys

from renderer.image_writer import save_image, write_ppm
from renderer.raytracer import Renderer
from scenes import SCENES

# Overrides applied on top of a scene's own camera settings.
QUALITY_LEVELS = {
    "preview": {"samples": 4, "bounces": 8, "width": 200},
    "balanced": {"samples": 32, "bounces": 25, "width": 400},
    "final": {"samples": 100, "bounces": 50, "width": None},
}

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Offline path tracer for sphere scenes.")
    p.add_argument("--scene", choices=sorted(SCENES), default="random_spheres")
    p.add_argument("--output", "-o", default="-",
                   help="Output file (.ppm, .png, ...). '-' writes plain PPM to stdout.")
    p.add_argument("--quality", choices=sorted(QUALITY_LEVELS),
                   help="Quality preset; explicit --width/--samples/--max-depth win over it.")
    p.add_argument("--width", type=int, help="Image width in pixels")
    p.add_argument("--samples", type=int, help="Samples per pixel")
    p.add_argument("--max-depth", type=int, help="Maximum ray bounces")
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--workers", type=int, default=1,
                   help="Worker processes; 0 uses every CPU")
    p.add_argument("--texture", default="images/earthmap.jpg",
                   help="Image used by the earth scene")
    p.add_argument("--quiet", action="store_true", help="Disable progress output")
    return p.parse_args(argv)

def build_scene(args):
    if args.scene == "earth":
        world, camera = SCENES["earth"](args.texture, seed=args.seed)
    else:
        world, camera = SCENES[args.scene](seed=args.seed)

    if args.quality is not None:
        quality = QUALITY_LEVELS[args.quality]
        camera.samples_per_pixel = quality["samples"]
        camera.max_depth = quality["bounces"]
        if quality["width"] is not None:
            camera.image_width = quality["width"]
    if args.width is not None:
        camera.image_width = args.width
    if args.samples is not None:
        camera.samples_per_pixel = args.samples
    if args.max_depth is not None:
        camera.max_depth = args.max_depth
    return world, camera

def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        world, camera = build_scene(args)
        if len(world) == 0:
            raise ValueError("Scene contains no objects")
        if not args.quiet:
            print(f"Scene '{args.scene}': {len(world)} top-level object(s)", file=sys.stderr)
        renderer = Renderer(seed=args.seed, workers=args.workers or None, progress=not args.quiet)
        image = renderer.render(camera, world)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.output == "-":
        write_ppm(sys.stdout, image)
    else:
        save_image(args.output, image)
        if not args.quiet:
            print(f"Wrote {args.output}", file=sys.stderr)
    return 0

if __name__ == "__main__":
    sys.exit(main())
