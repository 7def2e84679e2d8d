"""Taichi runtime initialization.

The canvas stores pixels in Taichi fields and quantizes them with a Taichi
kernel, so Taichi must be initialized before the first Canvas is created.
Fields are 64-bit so that output quantization matches double-precision
arithmetic exactly.

Example:
    >>> from phongray.backend import init_backend
    >>> init_backend("cpu")
"""

from __future__ import annotations

import logging
from typing import Literal

import taichi as ti

logger = logging.getLogger(__name__)

Arch = Literal["cpu", "gpu"]


def init_backend(arch: Arch = "cpu", random_seed: int = 0) -> str:
    """Initialize Taichi with 64-bit defaults.

    Calling this resets the Taichi runtime; any existing canvases become
    invalid.

    Args:
        arch: "cpu", or "gpu" to try a GPU backend and fall back to CPU.
        random_seed: Seed for Taichi's random number generator.

    Returns:
        The name of the backend that was initialized.
    """
    if arch == "gpu":
        try:
            ti.init(arch=ti.gpu, default_fp=ti.f64, random_seed=random_seed)
            logger.info("Initialized Taichi GPU backend")
            return "gpu"
        except Exception as e:
            logger.warning("GPU backend unavailable (%s); falling back to CPU", e)
    ti.init(arch=ti.cpu, default_fp=ti.f64, random_seed=random_seed)
    logger.info("Initialized Taichi CPU backend")
    return "cpu"
