#!/usr/bin/env python3
"""
PhongTracer - A Python Ray Tracer

Main entry point for rendering the demo scenes.
"""

import argparse
import math
import sys
import time
from pathlib import Path

from phongtracer.canvas import Canvas
from phongtracer.renderer import Renderer, RenderSettings
from phongtracer.scenes import (
    ROOM_VIEW, PLANETS_VIEW, draw_clock, draw_trajectory, trace_shadow,
    trace_sphere, room_world, planets_world
)

CANVAS_SCENES = {
    'clock': draw_clock,
    'trajectory': draw_trajectory,
    'shadow': trace_shadow,
    'sphere': trace_sphere,
}


def progress_bar(progress: float, bar_len: int = 40) -> str:
    filled = int(bar_len * progress)
    return '█' * filled + '░' * (bar_len - filled)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='PhongTracer - A Python Ray Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --scene world --output world.ppm
  python main.py --scene world --width 600 --height 300 --output world.png
  python main.py --scene planets --frames 100 --output frames/planet.ppm
  python main.py --scene clock --width 400 --height 400 --output clock.ppm
  python main.py --scene trajectory --width 900 --height 550 --output trajectory.ppm
        '''
    )

    parser.add_argument('--width', type=int, default=400, help='Image width (default: 400)')
    parser.add_argument('--height', type=int, default=200, help='Image height (default: 200)')
    parser.add_argument('--fov', type=float, default=60.0, help='Field of view in degrees (default: 60)')
    parser.add_argument('--frames', type=int, default=1, help='Frames for the planets animation (default: 1)')
    parser.add_argument('--output', type=str, default='output/render.ppm', help='Output filename')
    parser.add_argument('--scene', type=str, default='world',
                        choices=['clock', 'trajectory', 'shadow', 'sphere', 'world', 'planets'],
                        help='Scene to render (default: world)')

    args = parser.parse_args(argv)

    try:
        settings = RenderSettings(width=args.width, height=args.height, field_of_view=args.fov)
    except ValueError as err:
        parser.error(str(err))

    print("=" * 60)
    print("PhongTracer Ray Tracer")
    print("=" * 60)

    print(f"\nRender Settings:")
    print(f"  Resolution: {settings.width}x{settings.height}")
    print(f"  Field of view: {settings.field_of_view:g} degrees")
    print(f"  Scene: {args.scene}")

    renderer = Renderer(settings)

    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            print(f'\rRendering: [{progress_bar(progress)}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    start_time = time.time()

    if args.scene in CANVAS_SCENES:
        canvas = Canvas(settings.width, settings.height)
        print("\nTracing...")
        CANVAS_SCENES[args.scene](canvas)
        renderer.save_image(canvas, output_path)
        print(f"Saved: {output_path}")

    elif args.scene == 'world':
        camera = renderer.make_camera(*ROOM_VIEW)
        print("\nRendering...")
        canvas = renderer.render(room_world(), camera)
        renderer.save_image(canvas, output_path)
        print(f"\nSaved: {output_path}")

    else:
        camera = renderer.make_camera(*PLANETS_VIEW)
        frames = max(args.frames, 1)
        for frame in range(frames):
            angle = 2 * math.pi / frames * frame
            if frames == 1:
                frame_path = output_path
            else:
                frame_path = output_path.with_name(f"{output_path.stem}-{frame:03d}{output_path.suffix}")
            last_progress[0] = 0
            print(f"\nFrame {frame + 1}/{frames}: {frame_path}")
            canvas = renderer.render(planets_world(angle), camera)
            renderer.save_image(canvas, frame_path)

    elapsed = time.time() - start_time
    print(f"\nCompleted in {elapsed:.2f} seconds")
    print("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
