#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
ReDraw – approximate an image with randomly placed lines and rectangles,
keeping each one only if it lowers the colour error where it lands.
'''
import argparse
import json
import os
import sys
import time

from tqdm import tqdm

from selection.config import ConfigError, RedrawConfig, parse_shapes
from selection.hill_climb import HillClimber
from utils.preprocess_image import blur_canvas, frame_path, load_target, save_canvas

__version__ = "0.1.0"


def build_parser():
    ap = argparse.ArgumentParser(prog="redraw", description="ReDraw")
    ap.add_argument('image', help='Target image to approximate.')
    ap.add_argument('--version', action='version', version=f'ReDraw {__version__}')
    ap.add_argument('-q', '--quiet', action='store_true', help='Suppress output.')
    ap.add_argument('-o', '--output', default='redraw.png')
    ap.add_argument('-n', '--iterations', type=int, default=500000)
    ap.add_argument('-m', '--min', type=int, default=1, help='Minimum size of each drawn object.')
    ap.add_argument('-M', '--max', type=int, default=20, help='Maximum size of each drawn object.')
    ap.add_argument('--shapes', default='lines',
                    help='Comma separated list of shapes: lines, rectangles.')
    ap.add_argument('--uniform', action='store_true', help='Sample a uniform color distribution.')
    ap.add_argument('-a', '--adaptive', action='store_true',
                    help='Reduce object size after certain number of failures.')
    ap.add_argument('--adapt_rate', type=int, default=100000)
    ap.add_argument('--adapt_coeff', type=float, default=0.9)
    ap.add_argument('-A', '--animate', action='store_true', help='Output frames for animation.')
    ap.add_argument('--animation_interval', type=int, default=1000,
                    help='Output a frame every N objects drawn.')
    ap.add_argument('--frames_dir', default='frames')
    ap.add_argument('-b', '--blur', action='store_true', help='Apply gaussian blur.')
    ap.add_argument('--blur_amount', type=float, default=0.5)
    ap.add_argument('-B', '--bias', action='store_true', help='Make line angle have bias.')
    ap.add_argument('--size', type=int, nargs=2, default=None, help='Resize target to H W.')
    ap.add_argument('--seed', type=int, default=None)
    ap.add_argument('-D', '--debug', action='store_true')
    return ap


def config_from_args(args) -> RedrawConfig:
    return RedrawConfig(
        iterations=args.iterations,
        min_size=args.min,
        max_size=args.max,
        shapes=parse_shapes(args.shapes),
        uniform_palette=args.uniform,
        adaptive=args.adaptive,
        adapt_rate=args.adapt_rate,
        adapt_coeff=args.adapt_coeff,
        biased=args.bias,
        animate=args.animate,
        animation_interval=args.animation_interval,
        blur=args.blur,
        blur_amount=args.blur_amount,
        quiet=args.quiet,
        seed=args.seed,
    ).validate()


def write_recipe(out_path, image, config, result, seconds):
    recipe_path = os.path.join(os.path.dirname(os.path.abspath(out_path)), 'recipe.json')
    recipe = dict(
        image=image,
        output=out_path,
        params=config.to_dict(),
        seed=config.seed,
        stats=dict(
            iterations=result.iterations,
            committed=result.committed,
            final_max_size=result.max_size,
            shrinks=result.shrinks,
            seconds=seconds,
        ),
    )
    with open(recipe_path, 'w', encoding='utf-8') as f:
        json.dump(recipe, f, indent=2)
    return recipe_path


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
    except ConfigError as e:
        parser.error(str(e))
    if args.size is not None and min(args.size) <= 0:
        parser.error(f"--size needs positive H W, got {args.size[0]} {args.size[1]}")

    if args.debug:
        print(f"[debug] {config.to_dict()}")

    target = load_target(args.image, size=args.size)
    try:
        climber = HillClimber(target, config)
    except ConfigError as e:
        parser.error(str(e))

    bar = tqdm(total=config.iterations, desc='redraw', unit='it', disable=config.quiet)

    def on_progress(i, committed):
        bar.update(i - bar.n)
        bar.set_postfix(objects=committed)

    def on_frame(number, canvas):
        save_canvas(frame_path(args.frames_dir, number), canvas)

    def on_shrink(i, new_max):
        if args.debug:
            tqdm.write(f"[debug] iter {i}: max size -> {new_max}")

    t0 = time.time()
    result = climber.run(on_progress=on_progress, on_frame=on_frame, on_shrink=on_shrink)
    dt = time.time() - t0
    bar.update(config.iterations - bar.n)
    bar.close()

    canvas = result.canvas
    if config.blur:
        canvas = blur_canvas(canvas, config.blur_amount)
    save_canvas(args.output, canvas)
    recipe_path = write_recipe(args.output, args.image, config, result, dt)

    if not config.quiet:
        print(f'✅ objects drawn: {result.committed} / {result.iterations} in {dt:.2f}s')
        print(f'🖼️ saved result to {args.output}')
        print(f'📦 recipe: {recipe_path}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
