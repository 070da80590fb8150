# selection/hill_climb.py
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from scoring.color_error import Score, commit, footprint_errors
from scoring.shapes import rasterize
from selection.adaptive import AdaptiveSizeController
from selection.config import ConfigError, RedrawConfig
from utils.generate_candidates import CandidateGenerator, SizeRange
from utils.palette import build_palette
from utils.preprocess_image import new_canvas


@dataclass
class SearchState:
    rng: np.random.Generator
    size: SizeRange
    canvas: np.ndarray
    iteration: int = 0
    committed: int = 0

    @property
    def rejection_streak(self) -> int:
        return self.iteration - self.committed


@dataclass
class RunResult:
    canvas: np.ndarray
    iterations: int
    committed: int
    max_size: int
    shrinks: int


class HillClimber:
    '''
    Random-proposal hill climbing over a flat-coloured canvas.

    Every iteration proposes one primitive, compares the footprint's error
    under the proposal against the canvas' current error there, and paints
    it only if strictly better.

    Callbacks (all optional):
      on_progress(iteration, committed)          every ~1% of the run
      on_frame(frame_number, canvas)             every animation_interval commits
      on_shrink(iteration, new_max)              each adaptive shrink
    '''
    def __init__(self, target: np.ndarray, config: RedrawConfig,
                 rng: Optional[np.random.Generator] = None):
        self.config = config.validate()
        self.target = np.asarray(target, np.uint8)
        if self.target.ndim != 3 or self.target.shape[2] != 3:
            raise ConfigError(f"expected an (H, W, 3) target, got shape {self.target.shape}")
        self.H, self.W = self.target.shape[:2]
        if self.H == 0 or self.W == 0:
            raise ConfigError("target image is empty")

        self.palette = build_palette(self.target, uniform=config.uniform_palette)
        if len(self.palette) == 0:
            raise ConfigError("palette is empty")

        self.state = SearchState(
            rng=rng if rng is not None else np.random.default_rng(config.seed),
            size=SizeRange(config.min_size, config.max_size),
            canvas=new_canvas((self.H, self.W)),
        )
        self.generator = CandidateGenerator(
            (self.H, self.W), self.palette, config.shapes,
            self.state.size, self.state.rng, biased=config.biased,
        )
        self.adaptive = AdaptiveSizeController(
            self.state.size, config.adapt_rate, config.adapt_coeff, enabled=config.adaptive,
        )

    @property
    def canvas(self) -> np.ndarray:
        return self.state.canvas

    def step(self, on_progress: Optional[Callable] = None, on_frame: Optional[Callable] = None,
             on_shrink: Optional[Callable] = None) -> Score:
        P = self.config
        st = self.state
        i = st.iteration

        cand = self.generator.propose(i)
        footprint = rasterize(cand.kind, cand.x0, cand.y0, cand.x1, cand.y1)
        score = Score(*footprint_errors(self.target, st.canvas, footprint, cand.color))

        if on_progress and not P.quiet and i % self.progress_every() == 0:
            on_progress(i, st.committed)

        if self.adaptive.observe(i, st.committed) and on_shrink:
            on_shrink(i, st.size.max)

        if score.accepted:
            commit(st.canvas, footprint, cand.color)
            st.committed += 1
            if P.animate and on_frame and st.committed % P.animation_interval == 0:
                on_frame(st.committed // P.animation_interval, st.canvas)

        st.iteration += 1
        return score

    def progress_every(self) -> int:
        return max(1, self.config.iterations // 100)

    def run(self, on_progress: Optional[Callable] = None, on_frame: Optional[Callable] = None,
            on_shrink: Optional[Callable] = None) -> RunResult:
        remaining = self.config.iterations - self.state.iteration
        for _ in range(max(0, remaining)):
            self.step(on_progress=on_progress, on_frame=on_frame, on_shrink=on_shrink)

        return RunResult(
            canvas=self.state.canvas,
            iterations=self.state.iteration,
            committed=self.state.committed,
            max_size=self.state.size.max,
            shrinks=self.adaptive.k,
        )
