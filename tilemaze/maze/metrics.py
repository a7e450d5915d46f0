from typing import Dict


def init_metrics() -> Dict[str, int | float | bool]:
    return {
        'walls': 0,
        'rooms': 0,
        'rooms_visited': 0,
        'rooms_isolated': 0,
        'walls_opened': 0,
        'walls_frontier_peak': 0,
        'tiles_open': 0,
        'tiles_wall': 0,
        'widened': False,
        'runtime_ms': 0.0,
    }
