"""Configured batches of draws, scored for luck, as JSON-ready dicts."""

from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from .engine import SeededEngine
from .evaluate import eval_bool_true, eval_float_max

DRAW_KINDS = ("int", "float", "bool", "gaussian", "dice", "weighted")


@dataclass
class DrawConfig:
    """Configuration for a batch of draws from one engine."""

    seed: Optional[int] = None  # None draws a fresh seed
    kind: str = "int"
    count: int = 3
    minimum: float = 1
    maximum: float = 6
    probability: float = 0.5
    mean: float = 0.0
    stddev: float = 1.0
    dice: Tuple[int, ...] = (6, 6)
    weights: Tuple[float, ...] = (1.0, 1.0)
    start_state: int = 0


@dataclass
class DrawRecord:
    index: int
    value: Any
    luck: Optional[float]


def _draw_fn(engine: SeededEngine, cfg: DrawConfig) -> Callable[[], Tuple[Any, Optional[float]]]:
    if cfg.kind == "int":
        low, high = int(cfg.minimum), int(cfg.maximum)

        def draw():
            value = engine.rand_int(low, high)
            return value, eval_float_max(value, low, high)
    elif cfg.kind == "float":

        def draw():
            value = engine.rand_float(cfg.minimum, cfg.maximum)
            return value, eval_float_max(value, cfg.minimum, cfg.maximum)
    elif cfg.kind == "bool":

        def draw():
            value = engine.rand_bool(cfg.probability)
            return value, eval_bool_true(value, cfg.probability)
    elif cfg.kind == "gaussian":

        def draw():
            return engine.rand_gaussian(cfg.mean, cfg.stddev), None
    elif cfg.kind == "dice":
        valid = [sides for sides in cfg.dice if sides >= 1]
        low, high = len(valid), sum(valid)

        def draw():
            value = engine.roll_dice_array(cfg.dice)
            return value, eval_float_max(value, low, high)
    elif cfg.kind == "weighted":

        def draw():
            return engine.rand_weighted(cfg.weights), None
    else:
        raise ValueError(f"Unknown draw kind '{cfg.kind}'. Expected one of {', '.join(DRAW_KINDS)}.")
    return draw


def run_draws(cfg: DrawConfig) -> Dict[str, Any]:
    """Run ``cfg.count`` draws and report values, luck and engine state."""

    engine = SeededEngine(cfg.seed)
    draw = _draw_fn(engine, cfg)
    engine.jump_to_state(cfg.start_state)
    start_state = engine.get_current_state()

    records: List[DrawRecord] = []
    for index in range(max(0, cfg.count)):
        value, luck = draw()
        records.append(
            DrawRecord(
                index=index,
                value=round(value, 6) if isinstance(value, float) else value,
                luck=None if luck is None else round(luck, 4),
            )
        )

    config = asdict(cfg)
    config["dice"] = list(cfg.dice)
    config["weights"] = list(cfg.weights)
    return {
        "config": config,
        "seed": engine.get_root_seed(),
        "start_state": start_state,
        "final_state": engine.get_current_state(),
        "draws": [asdict(record) for record in records],
    }
