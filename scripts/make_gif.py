#!/usr/bin/env python3
import os, glob, argparse
import imageio.v2 as imageio


def collect_frames(src):
    return sorted(glob.glob(os.path.join(src, "frame-*.png")))


def make_gif(src, out, fps=20):
    frames = collect_frames(src)
    if not frames:
        raise FileNotFoundError(f"No frame-*.png files in {src}. Run main.py with --animate first.")
    imgs = [imageio.imread(f) for f in frames]
    imageio.mimsave(out, imgs, duration=1.0 / max(1, fps))
    return len(frames)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('--src', default='frames')
    ap.add_argument('--out', default='redraw.gif')
    ap.add_argument('--fps', type=int, default=20)  # tweak speed
    args = ap.parse_args()

    n = make_gif(args.src, args.out, fps=args.fps)
    print(f"✅ saved {args.out} ({n} frames)")


if __name__ == '__main__':
    main()
