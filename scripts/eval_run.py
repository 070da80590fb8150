#!/usr/bin/env python3
import argparse, json, os
import cv2, numpy as np

from utils.preprocess_image import load_target


def mean_l1(target, output):
    '''Mean per-pixel L1 colour distance (0..765).'''
    d = np.abs(target.astype(np.int64) - output.astype(np.int64)).sum(axis=2)
    return float(d.mean()) if d.size else 0.0

def ssim_simple(x, y, C1=0.01**2, C2=0.03**2):
    x = x.astype(np.float32); y = y.astype(np.float32)
    mu_x = cv2.GaussianBlur(x, (11,11), 1.5); mu_y = cv2.GaussianBlur(y, (11,11), 1.5)
    sigma_x = cv2.GaussianBlur(x*x,(11,11),1.5) - mu_x*mu_x
    sigma_y = cv2.GaussianBlur(y*y,(11,11),1.5) - mu_y*mu_y
    sigma_xy= cv2.GaussianBlur(x*y,(11,11),1.5) - mu_x*mu_y
    num = (2*mu_x*mu_y + C1)*(2*sigma_xy + C2)
    den = (mu_x*mu_x + mu_y*mu_y + C1)*(sigma_x + sigma_y + C2)
    return float((num/(den+1e-12)).mean())

def to_gray01(rgb_u8):
    return cv2.cvtColor(np.ascontiguousarray(rgb_u8), cv2.COLOR_RGB2GRAY).astype(np.float32) / 255.0

def evaluate(target, output):
    if target.shape != output.shape:
        raise ValueError(f"shape mismatch: target {target.shape} vs output {output.shape}")
    return dict(mean_l1=mean_l1(target, output), ssim=ssim_simple(to_gray01(target), to_gray01(output)))

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('--target', required=True)
    ap.add_argument('--output', default='redraw.png')
    ap.add_argument('--recipe', default=None, help='recipe.json written next to the output')
    args = ap.parse_args()

    out = load_target(args.output)
    recipe_path = args.recipe or os.path.join(os.path.dirname(os.path.abspath(args.output)), 'recipe.json')
    recipe = None
    if os.path.exists(recipe_path):
        with open(recipe_path, 'r', encoding='utf-8') as f:
            recipe = json.load(f)
    # mirror whatever resize the run applied
    tgt = load_target(args.target, size=out.shape[:2])

    m = evaluate(tgt, out)
    print(f"Mean L1: {m['mean_l1']:.2f}   SSIM (gray): {m['ssim']:.4f}")
    if recipe is not None:
        st = recipe['stats']
        print("Objects:", st['committed'], "Iterations:", st['iterations'], "Seconds:", round(st['seconds'], 2))

if __name__ == '__main__':
    main()
