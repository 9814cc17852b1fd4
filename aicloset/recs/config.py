from dataclasses import dataclass


@dataclass(frozen=True)
class RecsConfig:
    pool_size: int = 50
    batch_size: int = 5
    # History caps
    max_full_outfit_ids: int = 50
    max_key_item_ids: int = 80
    max_outerwear_ids: int = 40
    # Hybrid blend
    rule_weight: float = 0.7
    ml_weight: float = 0.3
    rule_score_max: float = 17.0
    ml_weights: tuple[float, ...] = (0.8, 0.3, 0.5, 0.6, 0.5, 0.4)
    ml_bias: float = -2.0
    ml_jitter: float = 0.1  # full width, centred on zero
    score_jitter: float = 0.05
    # Penalties on the blended score
    kill_score: float = -9999.0
    kill_threshold: float = -999.0
    repeat_key_item_penalty: float = 0.20
    cold_shorts_penalty: float = 0.25
    min_non_short_bottoms: int = 3
    # Outerwear ranking
    outer_eligible_bonus: float = 5.0
    outer_color_bonus: float = 3.0
    outer_block_penalty: float = 20.0
    outer_recency_base: float = 2.0
    outer_recency_scale: float = 2.0
    outer_recency_window: int = 10
    outer_dislike_penalty: float = 5.0
    outer_dislike_min_pool: int = 3
