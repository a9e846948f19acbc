"""
Demo Scenario
=============
Plots cos and sin and walks a legend through every legend tool:
add a dummy entry, reverse the entries, drop one, and append it back.
"""
from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.legend import Legend

from legtools.controller.tools import LegendTools

logger = logging.getLogger(__name__)


def build_demo() -> Tuple[Figure, Legend]:
    x = np.linspace(-5, 5, 200)

    fig, ax = plt.subplots(figsize=(7, 5))
    ax.plot(x, np.cos(x))
    ax.plot(x, np.sin(x))
    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)

    lh = ax.legend(["cos", "sin"])
    logger.info("Legend: cos, sin")

    lh = LegendTools.adddummy(lh, "dummy", "ok")
    logger.info("Added dummy entry")

    lh = LegendTools.permute(lh, [2, 1, 0])
    logger.info("Reversed entries")

    lh = LegendTools.remove(lh, 1)
    logger.info("Removed entry 1")

    lh = LegendTools.append(lh, "sin")
    logger.info(f"Appended entry, legend is now: {[t.get_text() for t in lh.texts]}")

    return fig, lh
