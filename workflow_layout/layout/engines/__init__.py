"""Layout engines registry.

Available engines:
- linear: single-lane placement in workflow order, orthogonal routing
"""

from workflow_layout.layout.engines.base import LayoutEngine, ensure_workflow_model
from workflow_layout.layout.engines.linear import LinearLayoutEngine

# Engine registry
ENGINES = {
    "linear": LinearLayoutEngine,
}

DEFAULT_ENGINE = "linear"


def get_engine(name: str) -> type:
    """Get layout engine class by name.

    Args:
        name: Engine name ('linear')

    Returns:
        Layout engine class

    Raises:
        ValueError: If engine not found
    """
    if name not in ENGINES:
        raise ValueError(f"Unknown layout engine: {name}. Available: {list(ENGINES.keys())}")
    return ENGINES[name]


__all__ = [
    "LayoutEngine",
    "LinearLayoutEngine",
    "ENGINES",
    "DEFAULT_ENGINE",
    "get_engine",
    "ensure_workflow_model",
]
